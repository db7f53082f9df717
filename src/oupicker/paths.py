"""Path index and child resolution for organizational unit DNs.

Paths arrive from the directory already stripped of their leading
``ou=`` and sorted. Segments are kept most-specific first, exactly as
they appear in the DN.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = ","

# The legacy resolver compares segment counts against depth plus this offset
LEGACY_DEPTH_OFFSET = 3


@dataclass(frozen=True)
class OUPath:
    """A single indexed organizational unit."""

    display: str
    segments: tuple[str, ...]
    prefix_length: int = 3

    @classmethod
    def parse(cls, display: str, prefix_length: int = 3) -> "OUPath":
        return cls(
            display=display,
            segments=tuple(display.split(SEGMENT_SEPARATOR)),
            prefix_length=prefix_length,
        )

    @property
    def depth(self) -> int:
        """Number of DN components."""
        return len(self.segments)

    @property
    def parent_display(self) -> str | None:
        """Display string the parent entry would have, or None for a single segment.

        The parent's DN is everything after the first component; its display
        form has the same fixed prefix removed.
        """
        if len(self.segments) < 2:
            return None
        parent_dn = SEGMENT_SEPARATOR.join(self.segments[1:])
        return parent_dn[self.prefix_length:]


@dataclass(frozen=True)
class PathIndex:
    """Read-only index of every known OU path."""

    paths: tuple[OUPath, ...]
    initial_choices: tuple[str, ...]
    _children: dict[str, tuple[str, ...]] = field(default_factory=dict, repr=False)

    @classmethod
    def build(
        cls,
        sorted_paths: Iterable[str],
        prefix_length: int = 3,
        root_segments: int = 3,
    ) -> "PathIndex":
        """Index a sorted list of display strings.

        Entries with at most ``root_segments`` components form the initial
        choice set. Duplicates are kept in input order.
        """
        paths = tuple(OUPath.parse(raw, prefix_length) for raw in sorted_paths)
        initial = tuple(p.display for p in paths if p.depth <= root_segments)

        children: dict[str, list[str]] = defaultdict(list)
        for path in paths:
            parent = path.parent_display
            if parent is not None:
                children[parent].append(path.display)

        if not paths:
            logger.warning("Path index built from an empty list")
        else:
            logger.info(
                "Indexed %d path(s), %d at the top level", len(paths), len(initial)
            )

        return cls(
            paths=paths,
            initial_choices=initial,
            _children={k: tuple(v) for k, v in children.items()},
        )

    def direct_children(self, display: str) -> tuple[str, ...]:
        """Return entries whose parent is ``display``, in index order."""
        return self._children.get(display, ())

    def __len__(self) -> int:
        return len(self.paths)


class ChildResolver(Protocol):
    """Finds the entries one level below a highlighted entry."""

    def children_of(self, selected: str, depth: int) -> tuple[str, ...]: ...


class TreeResolver:
    """Resolve children from the parent/child adjacency built with the index."""

    def __init__(self, index: PathIndex) -> None:
        self.index = index

    def children_of(self, selected: str, depth: int) -> tuple[str, ...]:
        # depth is not needed: adjacency is explicit
        return self.index.direct_children(selected)


class SubstringResolver:
    """Legacy resolution by substring containment and segment count.

    A path matches when its display string contains ``selected`` anywhere
    and it has exactly ``depth + 3`` components. A name that merely
    contains the selected string can match too.
    """

    def __init__(self, index: PathIndex) -> None:
        self.index = index

    def children_of(self, selected: str, depth: int) -> tuple[str, ...]:
        wanted = depth + LEGACY_DEPTH_OFFSET
        return tuple(
            path.display
            for path in self.index.paths
            if selected in path.display and path.depth == wanted
        )


MATCH_MODES = ("tree", "substring")


def make_resolver(index: PathIndex, match_mode: str = "tree") -> ChildResolver:
    """Create the resolver for a configured match mode."""
    if match_mode == "tree":
        return TreeResolver(index)
    if match_mode == "substring":
        return SubstringResolver(index)
    raise ValueError(f"Unknown match mode: {match_mode!r}")
