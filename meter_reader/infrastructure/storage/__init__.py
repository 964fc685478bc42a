from .image_store import LocalImageStore

__all__ = ["LocalImageStore"]
