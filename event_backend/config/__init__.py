from .config import EventStoreConfig

__all__ = ["EventStoreConfig"]
