# cube_diagram/cli.py
import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from .config import ArrowSpec, Config
from .io import load_batch, load_request, save_svg
from .orchestrator import DiagramRenderer
from .render.svg import SvgWriter
from .sim.masks import STAGE_MASKS
from .utils import parse_rotations


def setup_logging(level: str = "INFO", log_file: Path | None = None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render twisty-cube diagrams as SVG")

    # geometry
    parser.add_argument("--dimension", "-n", type=int)
    parser.add_argument("--size", type=int, help="Output width/height in pixels.")
    parser.add_argument("--view", choices=["normal", "plan"])
    parser.add_argument("--rotate", type=str, help='Rotation list, e.g. "y-30 x25".')
    parser.add_argument("--distance", type=float,
                        help="Viewing distance in cube widths ('inf' for orthographic).")

    # colours
    parser.add_argument("--alg", type=str, help="Moves applied to a solved 3x3.")
    parser.add_argument("--case", type=str, help="Show the state this algorithm solves.")
    parser.add_argument("--stage", choices=sorted(STAGE_MASKS))
    parser.add_argument("--definition", type=str, help="Facelet letters in URFDLB order (N and T allowed).")
    parser.add_argument("--background", type=str)
    parser.add_argument("--body-color", type=str)
    parser.add_argument("--body-opacity", type=float)
    parser.add_argument("--mask-color", type=str)

    # arrows
    parser.add_argument("--arrow", action="append", default=[], metavar="SPEC",
                        help='Repeatable, e.g. "U0,U1,U2;start=-0.2;end=0.3;marker=end;color=red".')
    parser.add_argument("--arrow-color", type=str)

    # input / output
    parser.add_argument("--config", type=Path, help="JSON request; explicit flags override it.")
    parser.add_argument("--out", type=Path, help="Output SVG (stdout when omitted).")
    parser.add_argument("--batch", type=Path, help="JSON list of requests.")
    parser.add_argument("--out-dir", type=Path, default=Path("diagrams"))

    # logging
    parser.add_argument("--log", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", type=Path)
    parser.add_argument("--quiet", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    data = load_request(args.config) if args.config else {}
    overrides = {
        "dimension": args.dimension,
        "size": args.size,
        "view": args.view,
        "distance": args.distance,
        "alg": args.alg,
        "case": args.case,
        "stage": args.stage,
        "definition": args.definition,
        "background": args.background,
        "body_color": args.body_color,
        "body_opacity": args.body_opacity,
        "mask_color": args.mask_color,
        "arrow_color": args.arrow_color,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    if args.rotate is not None:
        data["rotations"] = parse_rotations(args.rotate)
    if args.arrow:
        data["arrows"] = [ArrowSpec.parse(text) for text in args.arrow]
    return Config.from_dict(data)


def render_to_string(config: Config) -> str:
    return SvgWriter(DiagramRenderer(config).render()).to_string()


def run_batch(batch: Path, out_dir: Path, quiet: bool = False) -> int:
    requests = load_batch(batch)
    for name, config in tqdm(requests, desc="Rendering", disable=quiet):
        save_svg(out_dir / f"{name}.svg", render_to_string(config))
    return len(requests)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log, args.log_file)

    try:
        if args.batch:
            count = run_batch(args.batch, args.out_dir, quiet=args.quiet)
            if not args.quiet:
                print(f"✅ Rendered {count} diagrams → {args.out_dir}")
            return

        svg = render_to_string(config_from_args(args))
        if args.out:
            save_svg(args.out, svg)
            if not args.quiet:
                print(f"✅ Finished → {args.out}")
        else:
            sys.stdout.write(svg + "\n")
    except Exception:
        logging.exception("An error occurred while rendering")
        raise


if __name__ == "__main__":
    main()
