class TreeError(Exception):
    """Base class for snapshot tree failures raised by this package."""


class DepthExceededError(TreeError):
    """Raised when a scan would descend past the configured depth limit."""

    def __init__(self, path: str, max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Maximum depth {max_depth} exceeded at {path}")
