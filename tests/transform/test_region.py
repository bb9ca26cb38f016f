# topmark:header:start
#
#   project      : GsiPatch
#   file         : test_region.py
#   file_relpath : tests/transform/test_region.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Region commenter: marker matching, idempotence and edge cases.

These tests use the real ``rw-system.sh`` markers unless a case needs
something shorter to stay readable.
"""

from __future__ import annotations

import pytest

from gsipatch.constants import REGION_END_MARKER, REGION_START_MARKER
from gsipatch.transform.region import RegionCommenter, RegionState, comment_region
from tests.conftest import RW_SYSTEM_REGION_LINES, RW_SYSTEM_SAMPLE, parametrize

START = REGION_START_MARKER
END = REGION_END_MARKER


def _commenter() -> RegionCommenter:
    return RegionCommenter(start_marker=START, end_marker=END)


def test_comments_block_from_start_through_end() -> None:
    """Every line from the start marker through the end marker gets ``# ``."""
    lines = ["a", START, "  resize2fs /dev/root || true", "fi", END, "b"]

    out = comment_region(lines, START, END)

    assert out == [
        "a",
        f"# {START}",
        "#   resize2fs /dev/root || true",
        "# fi",
        f"# {END}",
        "b",
    ]


def test_resize_block_without_else_branch() -> None:
    """A minimal remount block is commented exactly, and a rerun keeps it."""
    lines = ["A", START, "  resize2fs /dev/foo", END, "B"]
    expected = ["A", f"# {START}", "#   resize2fs /dev/foo", f"# {END}", "B"]

    once = comment_region(lines, START, END)

    assert once == expected
    assert comment_region(once, START, END) == expected


def test_second_application_is_a_no_op() -> None:
    """Running the commenter on its own output changes nothing."""
    once = comment_region(["a", START, "x", END, "b"], START, END)
    twice = comment_region(once, START, END)
    assert twice == once


def test_already_commented_lines_in_region_are_kept() -> None:
    """Lines starting with ``#`` inside the region are emitted verbatim."""
    lines = [START, "#resize2fs /dev/root", "# already", END]
    out = comment_region(lines, START, END)
    assert out == [f"# {START}", "#resize2fs /dev/root", "# already", f"# {END}"]


def test_single_line_region() -> None:
    """A line containing both markers opens and closes the region by itself."""
    lines = ["a", f"{START} ; {END}", "c", END]
    out = comment_region(lines, START, END)
    # The trailing END line is outside any region and stays untouched.
    assert out == ["a", f"# {START} ; {END}", "c", END]


def test_unclosed_region_comments_through_end_of_file() -> None:
    """Without an end marker after the start, every remaining line is commented."""
    lines = ["a", START, "b", "#c", ""]
    out = comment_region(lines, START, END)
    assert out == ["a", f"# {START}", "# b", "#c", "# "]


def test_end_marker_before_start_is_ignored() -> None:
    """An end marker seen while outside the region does not affect anything."""
    lines = [END, "a", START, "b", END]
    out = comment_region(lines, START, END)
    assert out == [END, "a", f"# {START}", "# b", f"# {END}"]


def test_absent_start_marker_returns_identical_document() -> None:
    """No start marker means no change."""
    lines = ["#!/system/bin/sh", "mount -o remount,rw /", END]
    assert comment_region(lines, START, END) == lines


def test_empty_document() -> None:
    """The empty document maps to the empty document."""
    assert comment_region([], START, END) == []


def test_markers_match_as_substrings() -> None:
    """Indented or suffixed marker lines still open and close the region."""
    lines = [f"    {START} # phh", "x", f"\t{END}  "]
    out = comment_region(lines, START, END)
    assert out == [f"#     {START} # phh", "# x", f"# \t{END}  "]


def test_markers_are_not_regular_expressions() -> None:
    """Regex metacharacters in markers are matched literally."""
    out = comment_region(["a.b", "a*b", "x", "(c)"], "a*b", "(c)")
    assert out == ["a.b", "# a*b", "# x", "# (c)"]


def test_region_reopens_after_closing() -> None:
    """A later start marker opens a new region."""
    lines = [START, END, "between", START, "x", END, "after"]
    out = comment_region(lines, START, END)
    assert out == [f"# {START}", f"# {END}", "between", f"# {START}", "# x", f"# {END}", "after"]


def test_line_terminators_are_preserved() -> None:
    """Lines keep their own terminators; the prefix goes in front."""
    lines = ["a\r\n", f"{START}\r\n", "b\n", f"{END}"]
    out = comment_region(lines, START, END)
    assert out == ["a\r\n", f"# {START}\r\n", "# b\n", f"# {END}"]


def test_custom_comment_prefix() -> None:
    """The first character of the prefix is the "already commented" test."""
    out = comment_region(["s", "x", ";y", "e"], "s", "e", comment_prefix="; ")
    assert out == ["; s", "; x", ";y", "; e"]


def test_rw_system_sample_region() -> None:
    """On a real rw-system.sh excerpt exactly the remount block is commented."""
    lines = RW_SYSTEM_SAMPLE.splitlines(keepends=True)
    commenter = _commenter()

    out = commenter.apply(lines)

    assert len(out) == len(lines)
    changed = [i for i, (old, new) in enumerate(zip(lines, out)) if old != new]
    assert len(changed) == RW_SYSTEM_REGION_LINES
    assert changed == list(range(changed[0], changed[0] + RW_SYSTEM_REGION_LINES))
    assert out[changed[0]] == f"# {START}\n"
    assert out[changed[-1]] == f"# {END}\n"
    assert "mount -o remount,ro /system || true\n" not in out
    assert commenter.count_commented(lines) == RW_SYSTEM_REGION_LINES
    assert commenter.count_commented(out) == 0


@parametrize(
    "state, line, expected",
    [
        (RegionState.OUTSIDE, "plain", (RegionState.OUTSIDE, "plain")),
        (RegionState.OUTSIDE, START, (RegionState.INSIDE, f"# {START}")),
        (RegionState.OUTSIDE, f"{START}{END}", (RegionState.OUTSIDE, f"# {START}{END}")),
        (RegionState.INSIDE, "body", (RegionState.INSIDE, "# body")),
        (RegionState.INSIDE, "#body", (RegionState.INSIDE, "#body")),
        (RegionState.INSIDE, END, (RegionState.OUTSIDE, f"# {END}")),
        (RegionState.OUTSIDE, END, (RegionState.OUTSIDE, END)),
    ],
)
def test_step_transitions(
    state: RegionState, line: str, expected: tuple[RegionState, str]
) -> None:
    """Each transition of the two-state machine emits one line."""
    assert _commenter().step(state, line) == expected


@parametrize(
    "kwargs",
    [
        {"start_marker": "", "end_marker": END},
        {"start_marker": START, "end_marker": ""},
        {"start_marker": START, "end_marker": END, "comment_prefix": ""},
    ],
)
def test_empty_markers_are_rejected(kwargs: dict[str, str]) -> None:
    """Empty markers or prefix would match or mark every line; they are refused."""
    with pytest.raises(ValueError):
        RegionCommenter(**kwargs)
