# Render-result contract consumed by the serializer.
from .shapes import Diagram, FaceGroup, FaceletQuad, PathShape, Shape, Style

__all__ = ["Diagram", "FaceGroup", "FaceletQuad", "PathShape", "Shape", "Style"]
