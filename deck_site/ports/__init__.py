from .filesystem import FileSystem

__all__ = ["FileSystem"]
