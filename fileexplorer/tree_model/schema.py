"""Validation of untyped input into the recursive file/directory tree.

Input is a JSON-like value, either ``{name, kind: "file", size, modified}``
or ``{name, kind: "directory", children: [...]}``. Anything else raises
``SchemaViolation`` naming the offending path, e.g. ``children[1].kind``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from ..errors import SchemaViolation


class FileNode(BaseModel):
    """Leaf entry of the input tree."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    kind: Literal["file"]
    size: StrictStr
    modified: StrictStr


class DirectoryNode(BaseModel):
    """Directory entry with ordered children."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    kind: Literal["directory"]
    children: list[TreeNode]


TreeNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()

_TREE_ADAPTER: TypeAdapter[FileNode | DirectoryNode] = TypeAdapter(TreeNode)
_KIND_TAGS = frozenset({"file", "directory"})
_TAG_ERRORS = frozenset({"union_tag_invalid", "union_tag_not_found"})


def format_error_path(loc: tuple[int | str, ...], error_type: str = "") -> str:
    """Render a pydantic error location as ``children[1].size``.

    Discriminator tags inserted by pydantic are dropped. Tag errors point at
    the ``kind`` field of the offending node.
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif segment in _KIND_TAGS:
            continue
        else:
            parts.append(f".{segment}" if parts else segment)
    if error_type in _TAG_ERRORS:
        parts.append(".kind" if parts else "kind")
    return "".join(parts) or "<root>"


def validate_tree(data: object) -> FileNode | DirectoryNode:
    """Validate ``data`` and return the typed recursive tree."""
    try:
        return _TREE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        violations = tuple(
            (format_error_path(tuple(error["loc"]), error["type"]), error["msg"])
            for error in exc.errors()
        )
        path, message = violations[0] if violations else ("<root>", str(exc))
        raise SchemaViolation(path, message, violations) from exc


__all__ = [
    "FileNode",
    "DirectoryNode",
    "TreeNode",
    "format_error_path",
    "validate_tree",
]
