from __future__ import annotations

"""
Unit tests for the Output Writer.

Verifies header placement, one line per entry in source order, streaming
behaviour when the entry source fails midway, and color toggling.
"""

import io
from typing import Iterator

import pytest
from rich.console import Console

from dirlist.core.rendering.formatter import format_header
from dirlist.core.rendering.writer import make_console, write_listing
from dirlist.domain.errors import EntryReadError
from dirlist.domain.listing_models import DirectoryEntry, EntryKind, FormatOptions


def _entry(name: str, depth: int = 1, kind: EntryKind = EntryKind.FILE) -> DirectoryEntry:
    return DirectoryEntry(path=f"./{name}", name=name, depth=depth, kind=kind, size=1, modified=0.0)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


def test_header_is_first_line(buffer: io.StringIO) -> None:
    options = FormatOptions()
    count = write_listing(make_console(file=buffer), [_entry("x")], options, show_headers=True)

    lines = buffer.getvalue().splitlines()
    assert count == 1
    assert lines[0] == format_header(options).plain
    assert lines[1].endswith("x")


def test_no_header_first_line_is_data(buffer: io.StringIO) -> None:
    write_listing(make_console(file=buffer), [_entry("x")], FormatOptions())

    first = buffer.getvalue().splitlines()[0]
    assert "Size" not in first
    assert first.endswith("x")


def test_lines_follow_source_order(buffer: io.StringIO) -> None:
    names = ["zeta", "alpha", "mid"]
    write_listing(make_console(file=buffer), (_entry(n) for n in names), FormatOptions())

    lines = buffer.getvalue().splitlines()
    assert [line.split()[-1] for line in lines] == names


def test_empty_source_writes_only_header(buffer: io.StringIO) -> None:
    count = write_listing(make_console(file=buffer), [], FormatOptions(), show_headers=True)

    assert count == 0
    assert len(buffer.getvalue().splitlines()) == 1


def test_partial_output_kept_when_source_fails(buffer: io.StringIO) -> None:
    def failing() -> Iterator[DirectoryEntry]:
        yield _entry("first")
        raise EntryReadError("./broken")

    with pytest.raises(EntryReadError):
        write_listing(make_console(file=buffer), failing(), FormatOptions())

    assert buffer.getvalue().splitlines()[0].endswith("first")


def test_long_names_are_not_wrapped(buffer: io.StringIO) -> None:
    long_name = "n" * 300
    write_listing(make_console(file=buffer), [_entry(long_name)], FormatOptions())

    assert len(buffer.getvalue().splitlines()) == 1


def test_forced_terminal_emits_ansi_styles() -> None:
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=True, color_system="standard", highlight=False)

    write_listing(console, [_entry("d", kind=EntryKind.DIRECTORY)], FormatOptions())

    assert "\x1b[" in buf.getvalue()


def test_no_color_strips_every_ansi_attribute(
        buffer: io.StringIO, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Header bold/underline and the dimmed indent are dropped even on a forced terminal."""
    monkeypatch.setenv("FORCE_COLOR", "1")

    write_listing(
        make_console(no_color=True, file=buffer),
        [_entry("c", depth=2)],
        FormatOptions(),
        show_headers=True,
    )

    output = buffer.getvalue()
    assert "\x1b[" not in output
    assert output.splitlines()[0].split() == ["Size", "Name"]
    assert output.splitlines()[1].endswith("⤷ c")


def test_color_console_styles_header_on_forced_terminal(
        buffer: io.StringIO, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")

    write_listing(make_console(file=buffer), [], FormatOptions(), show_headers=True)

    assert "\x1b[" in buffer.getvalue()
