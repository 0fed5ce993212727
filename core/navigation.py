# Purpose: Builds the two-level side navigation tree from the flat list of menu entries.
# Titles containing a dot are grouped: the first segment names the parent group,
# the last segment names the leaf shown underneath it.

"""
Navigation tree builder for the application shell sidebar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

GROUP_SEPARATOR = "."


@dataclass(frozen=True)
class MenuEntry:
    title: str
    path: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[float] = None


@dataclass
class NavNode:
    label: str
    path: Optional[str] = None
    icon: Optional[str] = None
    children: List["NavNode"] = field(default_factory=list)

    @property
    def is_group(self) -> bool:
        return bool(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form used by the JSON navigation API."""
        return {
            "label": self.label,
            "path": self.path,
            "icon": self.icon,
            "children": [child.to_dict() for child in self.children],
        }


def split_title(title: str) -> tuple:
    """
    Returns (parent_label, leaf_label) for a grouped title, or (None, title)
    when the title has no separator.

    Only the first and last segments matter: "Reports.Monthly.Summary" gives
    ("Reports", "Summary"). Empty segments are kept as empty labels.
    """
    if GROUP_SEPARATOR not in title:
        return None, title
    segments = title.split(GROUP_SEPARATOR)
    return segments[0], segments[-1]


def build_nav_tree(entries: Optional[Iterable[Optional[MenuEntry]]]) -> List[NavNode]:
    """
    Convert an ordered sequence of menu entries into top-level navigation nodes.

    Args:
        entries: Menu entries in presentation order. ``None`` items are skipped.

    Returns:
        List[NavNode]: Top-level nodes in order of first appearance. Group nodes
        carry the icon of the first child that created them and no path.
    """
    tree: List[NavNode] = []
    if entries is None:
        return tree

    # First top-level node per label, so lookups match a front-to-back scan.
    top_level: Dict[str, NavNode] = {}
    skipped = 0
    processed = 0

    for entry in entries:
        if entry is None:
            skipped += 1
            continue
        processed += 1

        parent_label, leaf_label = split_title(entry.title)
        leaf = NavNode(label=leaf_label, path=entry.path, icon=entry.icon)

        if parent_label is None:
            tree.append(leaf)
            top_level.setdefault(leaf.label, leaf)
            continue

        parent = top_level.get(parent_label)
        if parent is None:
            parent = NavNode(label=parent_label, icon=entry.icon)
            tree.append(parent)
            top_level[parent_label] = parent
        parent.children.append(leaf)

    logger.debug(
        f"Built navigation tree: {processed} entries, {skipped} skipped, "
        f"{len(tree)} top-level nodes"
    )
    return tree


def count_leaves(nodes: Iterable[NavNode]) -> int:
    """Number of nodes without children, at any depth."""
    total = 0
    for node in nodes:
        if node.children:
            total += count_leaves(node.children)
        else:
            total += 1
    return total


class NavTreeBuilder:
    """Stateless wrapper around :func:`build_nav_tree` for injection into views."""

    def build(self, entries: Optional[Iterable[Optional[MenuEntry]]]) -> List[NavNode]:
        return build_nav_tree(entries)
