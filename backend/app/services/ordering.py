"""
Positional ordering for eras and timeline events.

Items carry a zero-based ``order``. New items are appended after the current
maximum and reorders are applied as partial updates.
"""

from typing import Callable, Iterable, Optional, Sequence, TypeVar

from app.models import Era, TimelineEvent

OrderedT = TypeVar("OrderedT", Era, TimelineEvent)


def next_order(items: Iterable[OrderedT]) -> int:
    """Position for a new item: one past the highest existing order, or 0."""
    orders = [item.order for item in items]
    return max(orders) + 1 if orders else 0


def sort_by_order(items: Iterable[OrderedT]) -> list[OrderedT]:
    """Stable ascending sort on ``order``; ties keep their stored sequence."""
    return sorted(items, key=lambda item: item.order)


def apply_order(
    items: Sequence[OrderedT],
    ordered_ids: Sequence[str],
    in_scope: Optional[Callable[[OrderedT], bool]] = None,
) -> list[OrderedT]:
    """
    Reconcile a caller-supplied id sequence with the stored items.

    Each id is mapped to its index in ``ordered_ids``. Matching items take that
    index as their new ``order``; items that are not listed, or that fall outside
    ``in_scope``, keep theirs. Unknown ids are ignored. The result is sorted.

    :param items: The stored collection
    :param ordered_ids: Ids in their desired display order
    :param in_scope: Optional predicate restricting which items may move
    :return: A new, sorted list
    """
    positions = {item_id: index for index, item_id in enumerate(ordered_ids)}

    reordered = []
    for item in items:
        if item.id in positions and (in_scope is None or in_scope(item)):
            item = item.model_copy(update={"order": positions[item.id]})
        reordered.append(item)

    return sort_by_order(reordered)
