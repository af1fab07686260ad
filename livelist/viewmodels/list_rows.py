"""Row layout for the live list and identity-based update planning."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from livelist.domain import LiveItem


@dataclass(frozen=True)
class ItemRow:
    index: int
    item: LiveItem


@dataclass(frozen=True)
class LoadingMoreRow:
    pass


ListRow = Union[ItemRow, LoadingMoreRow]


@dataclass(frozen=True)
class RowUpdatePlan:
    reset: bool
    to_append: Tuple[ItemRow, ...] = field(default_factory=tuple)


def build_list_rows(items: Sequence[LiveItem], next_id: Optional[str]) -> List[ListRow]:
    rows: List[ListRow] = [ItemRow(index, item) for index, item in enumerate(items)]
    # Shown whenever another page exists, even if it is not being fetched yet
    if next_id is not None:
        rows.append(LoadingMoreRow())
    return rows


def plan_row_updates(
    rendered_ids: Sequence[str], items: Sequence[LiveItem]
) -> RowUpdatePlan:
    """Work out how to bring the rendered rows in line with ``items``.

    When the rendered ids are a prefix of the new ids only the tail needs to be
    appended. Anything else (refresh, reorder, removal) rebuilds the list.
    """
    new_ids = [item.id for item in items]
    prefix = len(rendered_ids)

    if prefix <= len(new_ids) and list(rendered_ids) == new_ids[:prefix]:
        tail = tuple(ItemRow(i, items[i]) for i in range(prefix, len(items)))
        return RowUpdatePlan(reset=False, to_append=tail)

    return RowUpdatePlan(
        reset=True,
        to_append=tuple(ItemRow(i, item) for i, item in enumerate(items)),
    )
