"""Aggregate count helpers over interaction tables.

Every helper issues exactly one ``COUNT`` query. The ``*_grouped`` variants
take a list of item ids and group by item, so list endpoints attach counts
to every row without a query per row.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import InstrumentedAttribute, Session

__all__ = [
    "count_matching",
    "count_by_value",
    "count_grouped",
    "count_grouped_by_value",
]


def count_matching(
    db: Session,
    item_column: InstrumentedAttribute[Any],
    item_id: Any,
    *criteria: Any,
) -> int:
    """Return how many rows have ``item_column == item_id`` and satisfy ``criteria``."""
    return db.query(func.count()).filter(item_column == item_id, *criteria).scalar() or 0


def count_by_value(
    db: Session,
    item_column: InstrumentedAttribute[Any],
    value_column: InstrumentedAttribute[Any],
    item_id: Any,
    *criteria: Any,
) -> dict[Hashable, int]:
    """Return ``{value: count}`` for one item, grouped by ``value_column``.

    Values with no rows are simply absent from the mapping.
    """
    rows = (
        db.query(value_column, func.count())
        .filter(item_column == item_id, *criteria)
        .group_by(value_column)
        .all()
    )
    return {value: count for value, count in rows}


def count_grouped(
    db: Session,
    item_column: InstrumentedAttribute[Any],
    item_ids: Iterable[Any],
    *criteria: Any,
) -> dict[Any, int]:
    """Return ``{item_id: count}`` for many items in a single grouped query.

    Every requested id is present in the result; ids without rows map to 0.
    """
    ids = list(dict.fromkeys(item_ids))
    result: dict[Any, int] = {item_id: 0 for item_id in ids}
    if not ids:
        return result

    rows = (
        db.query(item_column, func.count())
        .filter(item_column.in_(ids), *criteria)
        .group_by(item_column)
        .all()
    )
    for item_id, count in rows:
        result[item_id] = count
    return result


def count_grouped_by_value(
    db: Session,
    item_column: InstrumentedAttribute[Any],
    value_column: InstrumentedAttribute[Any],
    item_ids: Iterable[Any],
    *criteria: Any,
) -> dict[Any, dict[Hashable, int]]:
    """Return ``{item_id: {value: count}}`` for many items in a single query."""
    ids = list(dict.fromkeys(item_ids))
    result: dict[Any, dict[Hashable, int]] = {item_id: {} for item_id in ids}
    if not ids:
        return result

    rows = (
        db.query(item_column, value_column, func.count())
        .filter(item_column.in_(ids), *criteria)
        .group_by(item_column, value_column)
        .all()
    )
    for item_id, value, count in rows:
        result[item_id][value] = count
    return result
