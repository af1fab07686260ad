"""View models and pure rendering decisions."""

from .list_rows import ItemRow, LoadingMoreRow, RowUpdatePlan, build_list_rows, plan_row_updates
from .live_view_model import LiveListSnapshot, LiveViewModel
from .screen_selector import Screen, select_screen

__all__ = [
    "ItemRow",
    "LiveListSnapshot",
    "LiveViewModel",
    "LoadingMoreRow",
    "RowUpdatePlan",
    "Screen",
    "build_list_rows",
    "plan_row_updates",
    "select_screen",
]
