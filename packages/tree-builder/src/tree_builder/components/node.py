from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Iterator, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeType(StrEnum):
    STATUS = "status"
    DIRECTORY = "directory"
    ARCHIVE = "archive"


class Entry(BaseModel):
    """Fields shared by every node of a snapshot tree."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    size: int = Field(default=0, ge=0)


class Status(Entry):
    """Metadata-only record for a file."""

    node_type: Literal["status"] = NodeType.STATUS.value


class Archive(Entry):
    """A fully loaded file: metadata plus extension and text body.

    Sibling of :class:`Status` rather than a subclass, so ``is_status`` stays
    false once a leaf is loaded.
    """

    node_type: Literal["archive"] = NodeType.ARCHIVE.value
    extension: str = ""
    body: str = ""


class Directory(Entry):
    """A folder holding its entries in the order the host listed them."""

    node_type: Literal["directory"] = NodeType.DIRECTORY.value
    content: List[Node] = Field(default_factory=list)

    def iter_leaves(self) -> Iterator[Status | Archive]:
        """Yield every non-directory node, depth-first and pre-order."""
        for item in self.content:
            if is_directory(item):
                yield from item.iter_leaves()
            else:
                yield item

    def shape(self) -> tuple:
        """Nested ``(name, kind, children)`` tuples; leaves collapse to ``(name, "leaf")``."""
        children = tuple(
            item.shape() if is_directory(item) else (item.name, "leaf")
            for item in self.content
        )
        return (self.name, NodeType.DIRECTORY.value, children)


Node = Annotated[Union[Directory, Status, Archive], Field(discriminator="node_type")]

Directory.model_rebuild()


def is_directory(obj: object) -> bool:
    return isinstance(obj, Directory)


def is_archive(obj: object) -> bool:
    return isinstance(obj, Archive)


def is_status(obj: object) -> bool:
    return isinstance(obj, Status)
