"""
Company search filters.

Recognized criteria: minEmployees, maxEmployees, nameLike. Exactly one
predicate is applied; the employee bounds take precedence over nameLike.
"""

from __future__ import annotations

from core import errors
from core.filters import (
    Criteria,
    FilterQuery,
    FilterRule,
    first_match,
    like_pattern,
    parse_int,
    present,
    reject_unknown,
)

FILTER_KEYS = ("minEmployees", "maxEmployees", "nameLike")

ORDER_BY = "name"


def _min_only(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="num_employees >= $1",
        args=(parse_int(criteria, "minEmployees"),),
        order_by=ORDER_BY,
    )


def _max_only(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="num_employees <= $1",
        args=(parse_int(criteria, "maxEmployees"),),
        order_by=ORDER_BY,
    )


def _between(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="num_employees BETWEEN $1 AND $2",
        args=(parse_int(criteria, "minEmployees"), parse_int(criteria, "maxEmployees")),
        order_by=ORDER_BY,
    )


def _name_like(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="name ILIKE $1",
        args=(like_pattern(str(criteria["nameLike"]).strip()),),
        order_by=ORDER_BY,
    )


RULES: tuple[FilterRule, ...] = (
    FilterRule(
        "min_employees",
        lambda c: present(c, "minEmployees") and not present(c, "maxEmployees"),
        _min_only,
    ),
    FilterRule(
        "max_employees",
        lambda c: present(c, "maxEmployees") and not present(c, "minEmployees"),
        _max_only,
    ),
    FilterRule(
        "employees_between",
        lambda c: present(c, "minEmployees") and present(c, "maxEmployees"),
        _between,
    ),
    FilterRule("name_like", lambda c: present(c, "nameLike"), _name_like),
)


def resolve(criteria: Criteria) -> FilterQuery | None:
    """
    Turn company search criteria into a query, or None for "no filter".

    Raises ValidationError for unknown keys, non-numeric bounds and
    minEmployees > maxEmployees.
    """
    reject_unknown(criteria, FILTER_KEYS)

    if present(criteria, "minEmployees") and present(criteria, "maxEmployees"):
        if parse_int(criteria, "minEmployees") > parse_int(criteria, "maxEmployees"):
            raise errors.ValidationError("minEmployees must be smaller than maxEmployees")

    rule = first_match(RULES, criteria)
    if rule is None:
        return None
    return rule.build(criteria)
