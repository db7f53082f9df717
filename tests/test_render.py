"""Tests for oupicker.render module."""

from oupicker.navigation import NO_CHILDREN_MESSAGE, NavigationSnapshot
from oupicker.render import (
    EMPTY_LEVEL_TEXT,
    FOOTER_HINT,
    HIGHLIGHT_STYLE,
    MESSAGE_STYLE,
    render_picker,
)


def render_plain(snapshot, **kwargs) -> str:
    return render_picker(snapshot, **kwargs).plain


def make_snapshot(**overrides) -> NavigationSnapshot:
    values = dict(
        choices=("IT,dc=a,dc=b", "Sales,dc=a,dc=b"),
        cursor=1,
        depth=1,
        message="",
        trail=(),
    )
    values.update(overrides)
    return NavigationSnapshot(**values)


class TestRenderLayout:
    def test_layout(self):
        lines = render_plain(make_snapshot()).split("\n")
        assert lines == [
            "Choose an OU:",
            "",
            "  IT,dc=a,dc=b",
            "> Sales,dc=a,dc=b",
            "",
            FOOTER_HINT,
        ]

    def test_trail_shown_below_title(self):
        snapshot = make_snapshot(depth=2, trail=("Sales,dc=a,dc=b",))
        lines = render_plain(snapshot).split("\n")
        assert lines[1] == "  in Sales,dc=a,dc=b"

    def test_message(self):
        text = render_plain(make_snapshot(message=NO_CHILDREN_MESSAGE))
        assert f"\n{NO_CHILDREN_MESSAGE}\n" in text

    def test_empty_level(self):
        text = render_plain(make_snapshot(choices=(), cursor=0))
        assert EMPTY_LEVEL_TEXT in text
        assert ">" not in text

    def test_custom_title(self):
        assert render_plain(make_snapshot(), title="Pick:").startswith("Pick:\n")


class TestRenderStyles:
    def test_highlighted_choice_is_styled(self):
        text = render_picker(make_snapshot())
        styled = [
            text.plain[span.start:span.end]
            for span in text.spans
            if str(span.style) == HIGHLIGHT_STYLE
        ]
        assert styled == ["Sales,dc=a,dc=b"]

    def test_message_is_styled(self):
        text = render_picker(make_snapshot(message=NO_CHILDREN_MESSAGE))
        styled = [
            text.plain[span.start:span.end]
            for span in text.spans
            if str(span.style) == MESSAGE_STYLE
        ]
        assert styled == [NO_CHILDREN_MESSAGE]
