"""Navigation state management for drilling through the OU tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .paths import ChildResolver, PathIndex, TreeResolver

logger = logging.getLogger(__name__)

NO_CHILDREN_MESSAGE = "THE SELECTED OU IS EMPTY!"


class NavEvent(Enum):
    """Discrete input events understood by the navigator."""

    MOVE_NEXT = "move_next"
    MOVE_PREV = "move_prev"
    DRILL_IN = "drill_in"
    DRILL_OUT = "drill_out"
    CONFIRM = "confirm"
    QUIT = "quit"


@dataclass(frozen=True)
class Frame:
    """Snapshot of one level for drill-out history."""

    choices: tuple[str, ...]
    cursor: int


@dataclass(frozen=True)
class NavigationSnapshot:
    """Read-only view of the navigator handed to the renderer."""

    choices: tuple[str, ...]
    cursor: int
    depth: int
    message: str
    trail: tuple[str, ...]

    @property
    def highlighted(self) -> str | None:
        if not self.choices:
            return None
        return self.choices[self.cursor]


class NavigationStack:
    """Stack-based history for drill-in navigation."""

    def __init__(self) -> None:
        self._stack: list[Frame] = []

    def push(self, frame: Frame) -> None:
        """Push a frame onto the navigation stack."""
        self._stack.append(frame)

    def pop(self) -> Frame | None:
        """Pop and return the most recent frame, or None if empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self) -> None:
        """Clear all navigation history."""
        self._stack.clear()

    def is_empty(self) -> bool:
        """Check if the navigation stack is empty."""
        return len(self._stack) == 0

    def frames(self) -> tuple[Frame, ...]:
        """Return the frames from outermost to innermost."""
        return tuple(self._stack)

    def __len__(self) -> int:
        return len(self._stack)


class Navigator:
    """Drill-down/drill-up state machine over a PathIndex.

    Every transition is total: none of them raise and none of them can
    leave the cursor outside the current choice set. Once the user has
    confirmed or quit, further events are ignored.
    """

    def __init__(self, index: PathIndex, resolver: ChildResolver | None = None) -> None:
        self.index = index
        self.resolver = resolver if resolver is not None else TreeResolver(index)
        self.choices: tuple[str, ...] = index.initial_choices
        self.cursor = 0
        self.message = ""
        self.selection: str | None = None
        self.done = False
        self._stack = NavigationStack()

    @property
    def depth(self) -> int:
        return len(self._stack) + 1

    @property
    def history(self) -> NavigationStack:
        return self._stack

    def snapshot(self) -> NavigationSnapshot:
        """Capture the current state for display."""
        return NavigationSnapshot(
            choices=self.choices,
            cursor=self.cursor,
            depth=self.depth,
            message=self.message,
            trail=tuple(f.choices[f.cursor] for f in self._stack.frames()),
        )

    def handle(self, event: NavEvent) -> NavigationSnapshot:
        """Apply one event and return the resulting snapshot."""
        if not self.done:
            logger.debug("Event %s at depth %d", event.value, self.depth)
            getattr(self, event.value)()
        return self.snapshot()

    def move_next(self) -> None:
        self.message = ""
        if self.choices:
            self.cursor = (self.cursor + 1) % len(self.choices)

    def move_prev(self) -> None:
        self.message = ""
        if self.choices:
            self.cursor = (self.cursor - 1) % len(self.choices)

    def drill_out(self) -> None:
        """Return to the previous level, restoring its cursor."""
        self.message = ""
        if self._stack.is_empty():
            return
        frame = self._stack.pop()
        if frame is None:
            return
        self.choices = frame.choices
        self.cursor = frame.cursor

    def drill_in(self) -> None:
        """Descend into the highlighted entry, or set the advisory message."""
        children: tuple[str, ...] = ()
        if self.choices:
            children = tuple(self.resolver.children_of(self.choices[self.cursor], self.depth))

        if not children:
            self.message = NO_CHILDREN_MESSAGE
            return

        self._stack.push(Frame(choices=self.choices, cursor=self.cursor))
        self.choices = children
        self.cursor = 0
        self.message = ""

    def confirm(self) -> None:
        """Select the highlighted entry. Does nothing on an empty level."""
        self.message = ""
        if not self.choices:
            return
        self.selection = self.choices[self.cursor]
        self.done = True
        logger.info("Selected %s", self.selection)

    def quit(self) -> None:
        """Abandon the session without a selection."""
        self.selection = None
        self.done = True
        self._stack.clear()
