"""
Tests for row and option serialization.
"""

from __future__ import annotations

import io

import pytest

from rofiscript.application.utils.markup import escape_pango_markup
from rofiscript.domain.entities.render_model import RenderModel
from rofiscript.domain.entities.render_option import RenderOption
from rofiscript.domain.entities.row import Row


def test_row_without_fields_is_plain_text():
    """A row with no optional field has no delimiter."""
    assert Row(text="Option 1").serialize() == "Option 1"


def test_row_flags_are_concatenated():
    """Fields follow a single NUL with no separator between them."""
    row = Row(text="Option 3", urgent=True, active=True)
    assert row.serialize() == "Option 3\x00urgent\x1ftrueactive\x1ftrue"
    assert str(row) == row.serialize()


def test_row_fields_follow_fixed_order():
    """Fields are written as icon, display, meta, info, nonselectable, urgent, active."""
    row = Row(
        text="firefox",
        active=True,
        info="id-7",
        icon="firefox",
        nonselectable=True,
        meta="browser web",
        display="Firefox",
        urgent=True,
    )
    assert row.fields() == [
        ("icon", "firefox"),
        ("display", "Firefox"),
        ("meta", "browser web"),
        ("info", "id-7"),
        ("nonselectable", "true"),
        ("urgent", "true"),
        ("active", "true"),
    ]
    assert row.serialize() == (
        "firefox\x00icon\x1ffirefoxdisplay\x1fFirefoxmeta\x1fbrowser web"
        "info\x1fid-7nonselectable\x1ftrueurgent\x1ftrueactive\x1ftrue"
    )


def test_row_with_empty_text_keeps_fields():
    """Empty text is allowed; fields still follow the delimiter."""
    assert Row(text="", display="Shown").serialize() == "\x00display\x1fShown"


def test_options_come_before_rows():
    """Option lines are written first, then rows in append order."""
    model = RenderModel()
    model.append_row(Row(text="A"))
    model.set_option(RenderOption.PROMPT, "P")
    model.extend_rows([Row(text="B", urgent=True), Row(text="C")])

    assert model.lines() == ["\x00prompt\x1fP", "A", "B\x00urgent\x1ftrue", "C"]
    assert model.render().endswith("C\n")


def test_last_option_write_wins():
    """Setting the same option twice keeps one line with the last value."""
    model = RenderModel()
    model.set_option(RenderOption.MESSAGE, "first")
    model.set_option("message", "second")

    assert dict(model.options) == {RenderOption.MESSAGE: "second"}
    assert model.lines() == ["\x00message\x1fsecond"]


def test_option_values_are_formatted():
    """Booleans render as true/false and integers in decimal."""
    model = RenderModel()
    model.set_option(RenderOption.MARKUP_ROWS, True)
    model.set_option(RenderOption.NO_CUSTOM, False)
    model.set_option(RenderOption.NEW_SELECTION, 3)

    assert model.options[RenderOption.MARKUP_ROWS] == "true"
    assert model.options[RenderOption.NO_CUSTOM] == "false"
    assert model.options[RenderOption.NEW_SELECTION] == "3"


def test_unknown_and_reserved_options_are_rejected():
    """Only known option keys are accepted and 'data' is left to the session."""
    model = RenderModel()
    with pytest.raises(ValueError):
        model.set_option("bogus", "x")
    with pytest.raises(ValueError):
        model.set_option(RenderOption.DATA, "x")
    assert dict(model.options) == {}


def test_flush_writes_everything_at_once():
    """flush writes the rendered text to the stream."""
    model = RenderModel()
    model.set_option(RenderOption.PROMPT, "P")
    model.append_row(Row(text="A"))
    stream = io.StringIO()

    model.flush(stream)

    assert stream.getvalue() == "\x00prompt\x1fP\nA\n"


def test_escape_pango_markup():
    """Markup characters are escaped and newlines become carriage returns."""
    assert escape_pango_markup("<b>Tom & 'Jerry'</b>\n") == "&lt;b&gt;Tom &amp; &#39;Jerry&#39;&lt;/b&gt;\r"
    assert escape_pango_markup('say "hi"') == "say &quot;hi&quot;"
    assert escape_pango_markup("&amp;") == "&amp;amp;"
