"""Widget showing the current level of the OU tree."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from ..navigation import NavigationSnapshot
from ..render import DEFAULT_TITLE, render_picker


class OUList(VerticalScroll):
    """Scrollable view of the navigator's current choice set."""

    # Keys belong to the app bindings, not to scrolling
    can_focus = False

    DEFAULT_CSS = """
    OUList {
        width: 1fr;
        height: 1fr;
        padding: 0 1;
    }

    OUList > #ou-view {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, title: str = DEFAULT_TITLE, **kwargs) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._snapshot: NavigationSnapshot | None = None

    def compose(self) -> ComposeResult:
        yield Static(id="ou-view")

    @property
    def snapshot(self) -> NavigationSnapshot | None:
        return self._snapshot

    def show(self, snapshot: NavigationSnapshot) -> None:
        """Render a navigator snapshot, keeping the cursor row in view."""
        self._snapshot = snapshot
        self.query_one("#ou-view", Static).update(render_picker(snapshot, self._title))
        # Title line, optional trail line and a blank line precede the rows
        row = snapshot.cursor + (3 if snapshot.trail else 2)
        self.scroll_to(y=max(row - 2, 0), animate=False)
