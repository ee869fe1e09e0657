"""In-memory asset tree implementing :class:`AssetNode`.

Used as the reference adapter for detection and by anything that assembles
a tree from already-extracted entries. Aliases are slash-separated paths
resolved from the alias node's parent; ``..`` steps up one level::

    root = MemoryNode("root")
    hero = root.add("hero")
    hero.add("hero.atlas", TextValue("..."))
    hero.add("hero.json", alias="../shared/hero.json")
"""

from __future__ import annotations

import logging

from skelprobe.domain.nodes import AssetNode, NodeValue, OtherValue

logger = logging.getLogger(__name__)

DEFAULT_MAX_ALIAS_DEPTH = 16


class MemoryNode(AssetNode):
    """Tree node holding its children in insertion order."""

    def __init__(
        self,
        name: str,
        value: NodeValue | None = None,
        *,
        alias: str | None = None,
        parent: MemoryNode | None = None,
        max_alias_depth: int = DEFAULT_MAX_ALIAS_DEPTH,
    ) -> None:
        self._name = name
        self._value: NodeValue = value if value is not None else OtherValue()
        self._alias = alias
        self._parent = parent
        self._children: dict[str, MemoryNode] = {}
        self._max_alias_depth = max_alias_depth

    def __repr__(self) -> str:
        return f"MemoryNode({self.path!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> MemoryNode | None:
        return self._parent

    @property
    def value(self) -> NodeValue:
        return self._value

    @property
    def alias(self) -> str | None:
        return self._alias

    @property
    def children(self) -> list[MemoryNode]:
        return list(self._children.values())

    @property
    def path(self) -> str:
        parts: list[str] = []
        node: MemoryNode | None = self
        while node is not None:
            parts.append(node.name)
            node = node.parent
        return "/".join(reversed(parts))

    def add(
        self,
        name: str,
        value: NodeValue | None = None,
        *,
        alias: str | None = None,
    ) -> MemoryNode:
        """Create and attach a child. Raises ValueError on a duplicate name."""
        if name in self._children:
            msg = f"Duplicate child {name!r} under {self.path!r}"
            raise ValueError(msg)
        node = MemoryNode(
            name,
            value,
            alias=alias,
            parent=self,
            max_alias_depth=self._max_alias_depth,
        )
        self._children[name] = node
        return node

    def child(self, name: str) -> MemoryNode | None:
        return self._children.get(name)

    def find(self, path: str) -> MemoryNode | None:
        """Walk a slash-separated *path* from this node. ``..`` steps up."""
        node: MemoryNode | None = self
        for segment in path.split("/"):
            if node is None:
                return None
            if segment in ("", "."):
                continue
            node = node.parent if segment == ".." else node.child(segment)
        return node

    def resolve_alias(self) -> MemoryNode | None:
        """Follow alias paths until a concrete node is reached.

        Dangling paths, detached aliases, and chains longer than the
        configured depth (cycles included) resolve to None.
        """
        node: MemoryNode = self
        for _ in range(self._max_alias_depth + 1):
            if node.alias is None:
                return node
            base = node.parent
            target = base.find(node.alias) if base is not None else None
            if target is None:
                logger.debug("Alias %s -> %s is dangling", node.path, node.alias)
                return None
            node = target
        logger.debug("Alias chain from %s exceeds depth %d", self.path, self._max_alias_depth)
        return None
