from .svg import SvgWriter, path_data, render_svg

__all__ = ["SvgWriter", "path_data", "render_svg"]
