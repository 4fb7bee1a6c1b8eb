"""Syntax tree nodes for SVG documents and simple traversal."""

from __future__ import annotations

import enum
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Callable, Mapping, Optional, Union


class VisitResult(enum.Enum):
    """What a traversal callback asks the walker to do next."""

    CONTINUE = "continue"
    SKIP = "skip"
    STOP = "stop"


class _ParentNode:
    def has_children(self) -> bool:
        return True


class _LeafNode:
    @property
    def children(self) -> tuple:
        return ()

    def has_children(self) -> bool:
        return False


@dataclass
class XastRoot(_ParentNode):
    """Root of a document."""

    children: list = field(default_factory=list)

    def node_type(self) -> str:
        return "root"


@dataclass
class XastElement(_ParentNode):
    """An element with attributes and children."""

    name: str
    attributes: dict = field(default_factory=dict)
    children: list = field(default_factory=list)

    def node_type(self) -> str:
        return "element"


@dataclass
class XastText(_LeafNode):
    """Character data."""

    value: str

    def node_type(self) -> str:
        return "text"


@dataclass
class XastComment(_LeafNode):
    """A comment."""

    value: str

    def node_type(self) -> str:
        return "comment"


@dataclass
class XastDoctype(_LeafNode):
    """A DOCTYPE declaration."""

    name: str
    public_id: Optional[str] = None
    system_id: Optional[str] = None

    def node_type(self) -> str:
        return "doctype"


@dataclass
class XastInstruction(_LeafNode):
    """A processing instruction."""

    name: str
    value: str

    def node_type(self) -> str:
        return "instruction"


@dataclass
class XastCdata(_LeafNode):
    """A CDATA section."""

    value: str

    def node_type(self) -> str:
        return "cdata"


XastNode = Union[
    XastRoot, XastElement, XastText, XastComment, XastDoctype, XastInstruction, XastCdata
]

_NODE_TYPES: dict = {
    "root": XastRoot,
    "element": XastElement,
    "text": XastText,
    "comment": XastComment,
    "doctype": XastDoctype,
    "instruction": XastInstruction,
    "cdata": XastCdata,
}


def _walk(node: XastNode, callback: Callable[[XastNode], Optional[VisitResult]]) -> bool:
    result = callback(node)
    if result is VisitResult.STOP:
        return False
    if result is VisitResult.SKIP:
        return True
    for child in list(node.children):
        if not _walk(child, callback):
            return False
    return True


def traverse_tree(
    node: XastNode, callback: Callable[[XastNode], Optional[VisitResult]]
) -> bool:
    """Visit ``node`` and its descendants depth first, parents before children.

    The callback may return SKIP to leave a node's children out, or STOP to end
    the walk; returning None counts as CONTINUE. Returns False if the walk was
    stopped, True otherwise.
    """
    return _walk(node, callback)


def node_to_dict(node: XastNode) -> dict:
    """Convert a node and its subtree into plain JSON-compatible data."""
    data: dict = {"type": node.node_type()}
    for f in fields(node):
        value = getattr(node, f.name)
        if f.name == "children":
            value = [node_to_dict(child) for child in value]
        elif f.name == "attributes":
            value = dict(value)
        data[f.name] = value
    return data


def node_from_dict(data: Mapping[str, Any]) -> XastNode:
    """Build a node from data in the form produced by :func:`node_to_dict`."""
    if not isinstance(data, Mapping) or "type" not in data:
        raise ValueError("node data must be a mapping with a 'type' field")
    kind = data["type"]
    cls = _NODE_TYPES.get(kind)
    if cls is None:
        raise ValueError(f"unknown node type: {kind!r}")
    kwargs: dict = {}
    for f in fields(cls):
        if f.name in data:
            value = data[f.name]
            if f.name == "children":
                value = [node_from_dict(child) for child in value]
            elif f.name == "attributes":
                value = dict(value)
            kwargs[f.name] = value
        elif f.default is MISSING and f.default_factory is MISSING:
            raise ValueError(f"missing field {f.name!r} for {kind} node")
    return cls(**kwargs)