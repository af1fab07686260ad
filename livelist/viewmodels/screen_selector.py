"""Decides which top-level screen the window shows."""

from enum import Enum

from livelist.state import ViewState


class Screen(Enum):
    LOADING = "loading"
    ERROR = "error"
    LIST = "list"
    PLACEHOLDER = "placeholder"


def select_screen(view_state: ViewState, items_empty: bool) -> Screen:
    """Pick the screen for a state.

    A fetch in progress keeps the list visible once it has items, so paging
    never hides content behind a full-screen spinner.
    """
    if view_state.is_idle or (view_state.is_loading and items_empty):
        return Screen.LOADING
    if view_state.is_error:
        return Screen.ERROR
    if view_state.is_loaded or (view_state.is_loading and not items_empty):
        return Screen.LIST
    return Screen.PLACEHOLDER
