from tree_builder.build_tree import build_tree
from tree_builder.components import Archive, Directory, Node, NodeType, Status
from tree_builder.errors import DepthExceededError, TreeError

__all__ = [
    "Archive",
    "DepthExceededError",
    "Directory",
    "Node",
    "NodeType",
    "Status",
    "TreeError",
    "build_tree",
]
