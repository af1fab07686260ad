"""Tests for list row layout and update planning."""

from livelist.viewmodels import ItemRow, LoadingMoreRow, build_list_rows, plan_row_updates
from tests.fakes import make_item


def test_rows_follow_items_with_trailing_loading_row():
    items = [make_item("A"), make_item("B"), make_item("C")]

    rows = build_list_rows(items, "c1")

    assert len(rows) == 4
    assert [row.item.id for row in rows[:3]] == ["A", "B", "C"]
    assert [row.index for row in rows[:3]] == [0, 1, 2]
    assert isinstance(rows[3], LoadingMoreRow)


def test_no_loading_row_without_cursor():
    items = [make_item("A"), make_item("B")]

    rows = build_list_rows(items, None)

    assert all(isinstance(row, ItemRow) for row in rows)
    assert len(rows) == 2


def test_empty_items_with_cursor_only_loading_row():
    rows = build_list_rows([], "c1")

    assert rows == [LoadingMoreRow()]


def test_plan_appends_tail_when_prefix_matches():
    items = [make_item("A"), make_item("B"), make_item("C")]

    plan = plan_row_updates(["A"], items)

    assert plan.reset is False
    assert [row.item.id for row in plan.to_append] == ["B", "C"]
    assert [row.index for row in plan.to_append] == [1, 2]


def test_plan_nothing_to_do_when_unchanged():
    items = [make_item("A"), make_item("B")]

    plan = plan_row_updates(["A", "B"], items)

    assert plan.reset is False
    assert plan.to_append == ()


def test_plan_resets_when_items_replaced():
    items = [make_item("X"), make_item("Y")]

    plan = plan_row_updates(["A", "B"], items)

    assert plan.reset is True
    assert [row.item.id for row in plan.to_append] == ["X", "Y"]


def test_plan_resets_when_list_shrinks():
    plan = plan_row_updates(["A", "B"], [make_item("A")])

    assert plan.reset is True
    assert [row.item.id for row in plan.to_append] == ["A"]


def test_plan_from_empty_appends_everything():
    items = [make_item("A")]

    plan = plan_row_updates([], items)

    assert plan.reset is False
    assert [row.item.id for row in plan.to_append] == ["A"]
