"""Main Textual application for OU Picker."""

from textual.app import App, ComposeResult
from textual.binding import Binding

from .config import Config
from .navigation import NavEvent, Navigator
from .paths import PathIndex, make_resolver
from .widgets import Banner, OUList


class PickerApp(App[str | None]):
    """OU Picker - browse organizational units and pick one."""

    TITLE = "OU Picker"
    SUB_TITLE = "Organizational Unit Picker"

    CSS = """
    #ou-list {
        border: solid $accent;
    }
    """

    BINDINGS = [
        Binding("up", "navigate('move_prev')", "Up", show=False),
        Binding("k", "navigate('move_prev')", "Up", show=False),
        Binding("down", "navigate('move_next')", "Down", show=False),
        Binding("j", "navigate('move_next')", "Down", show=False),
        Binding("left", "navigate('drill_out')", "Out", show=False),
        Binding("right", "navigate('drill_in')", "In", show=False),
        Binding("enter", "navigate('confirm')", "Select", show=False),
        Binding("q", "navigate('quit')", "Quit", show=False),
        Binding("ctrl+c", "navigate('quit')", "Quit", show=False, priority=True),
    ]

    def __init__(self, navigator: Navigator, server: str = "", base_dn: str = "") -> None:
        super().__init__()
        self.navigator = navigator
        self._server = server
        self._base_dn = base_dn

    def compose(self) -> ComposeResult:
        yield Banner(server=self._server, base_dn=self._base_dn)
        yield OUList(id="ou-list")

    def on_mount(self) -> None:
        """Show the initial level."""
        self.query_one("#ou-list", OUList).show(self.navigator.snapshot())

    def action_navigate(self, event_name: str) -> None:
        """Feed one navigation event to the navigator and redraw."""
        snapshot = self.navigator.handle(NavEvent(event_name))
        if self.navigator.done:
            self.exit(self.navigator.selection)
            return
        self.query_one("#ou-list", OUList).show(snapshot)


def run_app(index: PathIndex, config: Config) -> str | None:
    """Run the picker and return the selected OU, or None if the user quit."""
    navigator = Navigator(index, make_resolver(index, config.match_mode))
    app = PickerApp(navigator, server=config.ldap_server, base_dn=config.base_dn)
    return app.run()
