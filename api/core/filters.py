"""
Building blocks for the search-filter resolvers.

A resolver is an ordered table of `FilterRule`s. The first rule whose
`matches` accepts the criteria builds the query; later rules are never
consulted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from core import errors

logger = logging.getLogger(__name__)

Criteria = Mapping[str, str]


@dataclass(frozen=True)
class FilterQuery:
    """
    WHERE/ORDER BY fragments plus their positional arguments ($1..$n).

    `empty_is_error` tells the caller to raise NotFoundError instead of
    returning an empty list when nothing matches.
    """

    where: str
    args: tuple[Any, ...]
    order_by: str
    empty_is_error: bool = False


@dataclass(frozen=True)
class FilterRule:
    name: str
    matches: Callable[[Criteria], bool]
    build: Callable[[Criteria], FilterQuery]


def present(criteria: Criteria, key: str) -> bool:
    value = criteria.get(key)
    if value is None:
        return False
    return str(value).strip() != ""


def parse_int(criteria: Criteria, key: str) -> int:
    raw = str(criteria.get(key, "")).strip()
    try:
        return int(raw)
    except ValueError as exc:
        raise errors.ValidationError(f"{key} must be an integer") from exc


def reject_unknown(criteria: Criteria, allowed: Sequence[str]) -> None:
    unknown = [key for key in criteria if key not in allowed]
    if unknown:
        raise errors.ValidationError(f"Filters allowed are: {', '.join(allowed)}")


def first_match(rules: Sequence[FilterRule], criteria: Criteria) -> FilterRule | None:
    for rule in rules:
        if rule.matches(criteria):
            logger.debug("Filter rule %s matched %s", rule.name, sorted(criteria))
            return rule
    return None


def like_pattern(value: str) -> str:
    # Unanchored substring; LIKE wildcards in the input are matched literally.
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
