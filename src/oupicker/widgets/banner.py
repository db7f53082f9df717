"""ASCII art banner showing the directory being browsed."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


def _build_banner(server: str, base_dn: str) -> Text:
    """Build the banner as a Rich Text object with title and tree art side by side."""
    #           O        U
    colors = ["bright_cyan", "bright_green"]
    title_rows = [
        ["╔═╗ ", "╦ ╦"],
        ["║ ║ ", "║ ║"],
        ["╚═╝ ", "╚═╝"],
    ]

    # Small directory tree placed right of the title
    art_rows = [
        " ●─┬─● ",
        "   ├─● ",
        "   └─● ",
    ]

    node_color = "bright_yellow"
    branch_color = "bright_cyan"

    def _colorize_art(txt: Text, line: str) -> None:
        """Append a single art line with per-character coloring."""
        for ch in line:
            if ch == "●":
                txt.append(ch, style=f"bold {node_color}")
            elif ch in "─┬├└":
                txt.append(ch, style=f"bold {branch_color}")
            else:
                txt.append(ch, style="default")

    text = Text()
    gap = " " * 4

    for title_parts, art_line in zip(title_rows, art_rows):
        for part, color in zip(title_parts, colors):
            text.append(part, style=f"bold {color}")
        text.append(gap, style="default")
        _colorize_art(text, art_line)
        text.append("\n")

    text.append("Organizational Unit Picker", style="bright_white")
    if server:
        text.append("  │  ", style="dim")
        text.append(server, style="italic cyan")
    if base_dn:
        text.append("  │  ", style="dim")
        text.append(base_dn, style="italic cyan")
    return text


class Banner(Vertical):
    """Application banner with ASCII art title."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 5;
        background: $primary-background;
        padding: 0 1;
    }

    Banner > #banner-art {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, server: str = "", base_dn: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._server = server
        self._base_dn = base_dn

    def compose(self) -> ComposeResult:
        yield Static(_build_banner(self._server, self._base_dn), id="banner-art")
