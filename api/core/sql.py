"""
SQL building helpers shared by the entity repositories.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from core import errors


@dataclass(frozen=True)
class PartialUpdate:
    set_cols: str
    values: list[Any]

    @property
    def next_placeholder(self) -> str:
        """Placeholder for the first parameter appended after the SET values."""
        return f"${len(self.values) + 1}"


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    *,
    allowed: Iterable[str] | None = None,
) -> PartialUpdate:
    """
    Compile the SET clause of an UPDATE for only the fields present in `data`.

    `js_to_sql` translates API field names to column names; fields missing
    from it are used as-is. When `allowed` is given, any other field is
    rejected instead of being trusted as a column name.

        >>> sql_for_partial_update({"name": "Acme", "numEmployees": 12},
        ...                        {"numEmployees": "num_employees"})
        PartialUpdate(set_cols='"name"=$1, "num_employees"=$2', values=['Acme', 12])

    A `None` value sets the column to NULL; leaving the key out leaves the
    column unchanged. The caller binds its own WHERE parameters starting at
    `next_placeholder`.
    """
    keys = list(data.keys())
    if not keys:
        raise errors.ValidationError("No data")

    if allowed is not None:
        permitted = set(allowed)
        unknown = [key for key in keys if key not in permitted]
        if unknown:
            raise errors.ValidationError(f"Cannot update field(s): {', '.join(unknown)}")

    cols = [f'"{js_to_sql.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]
    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data[key] for key in keys],
    )
