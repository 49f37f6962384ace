"""Tests for the CondensedDiff model."""

import pytest
from pydantic import ValidationError

from blame_lens.models.diff import CondensedDiff


def test_lines_and_selected_line():
    diff = CondensedDiff(rendered_text="- old\n+ new\n ...\n...", selected_position=2)

    assert diff.lines == ["- old", "+ new", " ...", "..."]
    assert diff.selected_line == "+ new"


def test_single_line():
    diff = CondensedDiff(rendered_text="...", selected_position=1)

    assert diff.lines == ["..."]
    assert diff.selected_line == "..."


def test_selected_position_is_one_based():
    with pytest.raises(ValidationError):
        CondensedDiff(rendered_text="...", selected_position=0)


def test_equality():
    first = CondensedDiff(rendered_text="+ a\n...", selected_position=1)
    second = CondensedDiff(rendered_text="+ a\n...", selected_position=1)

    assert first == second
