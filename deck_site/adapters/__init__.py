from .local_fs import LocalFileSystem

__all__ = ["LocalFileSystem"]
