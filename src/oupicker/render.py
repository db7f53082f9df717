"""Project navigator snapshots into styled text."""

from rich.text import Text

from .navigation import NavigationSnapshot

DEFAULT_TITLE = "Choose an OU:"
FOOTER_HINT = "Press q to quit."
EMPTY_LEVEL_TEXT = "(no organizational units)"

HIGHLIGHT_STYLE = "black on white"
MESSAGE_STYLE = "yellow"
TRAIL_STYLE = "dim"


def render_picker(snapshot: NavigationSnapshot, title: str = DEFAULT_TITLE) -> Text:
    """Build the picker view as a Rich Text object."""
    text = Text()
    text.append(title, style="bold")
    text.append("\n")
    if snapshot.trail:
        text.append(f"  in {snapshot.trail[-1]}", style=TRAIL_STYLE)
        text.append("\n")
    text.append("\n")

    if not snapshot.choices:
        text.append(f"  {EMPTY_LEVEL_TEXT}", style=TRAIL_STYLE)
        text.append("\n")

    for i, choice in enumerate(snapshot.choices):
        if i == snapshot.cursor:
            text.append("> ")
            text.append(choice, style=HIGHLIGHT_STYLE)
        else:
            text.append(f"  {choice}")
        text.append("\n")

    if snapshot.message:
        text.append("\n")
        text.append(snapshot.message, style=MESSAGE_STYLE)
        text.append("\n")

    text.append("\n")
    text.append(FOOTER_HINT, style=TRAIL_STYLE)
    return text
