from .loader import load_archives, load_leaf, read_semaphore

__all__ = ["load_archives", "load_leaf", "read_semaphore"]
