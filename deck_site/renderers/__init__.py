from .index_renderer import IndexRenderer, JinjaIndexRenderer

__all__ = [
    "IndexRenderer",
    "JinjaIndexRenderer",
]
