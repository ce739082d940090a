from .map import HexMapSpec

__all__ = [
    "HexMapSpec",
]
