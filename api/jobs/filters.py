"""
Job search filters.

Recognized criteria: title, minSalary, hasEquity ("true" / "false").

Rules are evaluated in order and the first match wins:

1. title + minSalary  -> exact title, salary >= min, by salary
2. title              -> title contains (case-insensitive)
3. minSalary + equity -> salary >= min and equity > 0, by salary
4. minSalary          -> salary >= min, by salary
5. hasEquity=true     -> equity > 0, by equity descending
6. hasEquity=false    -> equity is zero or unset

Rules 1-4 are targeted searches and report "no jobs" as NotFoundError.
Rules 5-6 browse the catalog, so an empty result is a valid answer.
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

FILTER_KEYS = ("title", "minSalary", "hasEquity")

HAS_EQUITY_VALUES = ("true", "false")


def _has_equity(criteria: Criteria, value: str) -> bool:
    return present(criteria, "hasEquity") and str(criteria["hasEquity"]).strip() == value


def _title(criteria: Criteria) -> str:
    return str(criteria["title"]).strip()


def _title_and_min_salary(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="salary >= $1 AND title = $2",
        args=(parse_int(criteria, "minSalary"), _title(criteria)),
        order_by="salary",
        empty_is_error=True,
    )


def _title_like(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="title ILIKE $1",
        args=(like_pattern(_title(criteria)),),
        order_by="title, id",
        empty_is_error=True,
    )


def _min_salary_with_equity(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="salary >= $1 AND equity > 0",
        args=(parse_int(criteria, "minSalary"),),
        order_by="salary",
        empty_is_error=True,
    )


def _min_salary(criteria: Criteria) -> FilterQuery:
    return FilterQuery(
        where="salary >= $1",
        args=(parse_int(criteria, "minSalary"),),
        order_by="salary",
        empty_is_error=True,
    )


def _with_equity(_: Criteria) -> FilterQuery:
    return FilterQuery(where="equity > 0", args=(), order_by="equity DESC")


def _without_equity(_: Criteria) -> FilterQuery:
    return FilterQuery(where="(equity = 0 OR equity IS NULL)", args=(), order_by="id")


RULES: tuple[FilterRule, ...] = (
    FilterRule(
        "title_and_min_salary",
        lambda c: present(c, "title") and present(c, "minSalary"),
        _title_and_min_salary,
    ),
    FilterRule("title", lambda c: present(c, "title"), _title_like),
    FilterRule(
        "min_salary_with_equity",
        lambda c: present(c, "minSalary") and _has_equity(c, "true"),
        _min_salary_with_equity,
    ),
    FilterRule("min_salary", lambda c: present(c, "minSalary"), _min_salary),
    FilterRule("with_equity", lambda c: _has_equity(c, "true"), _with_equity),
    FilterRule("without_equity", lambda c: _has_equity(c, "false"), _without_equity),
)


def resolve(criteria: Criteria) -> FilterQuery | None:
    """
    Turn job search criteria into a query, or None when no criteria are given.
    """
    reject_unknown(criteria, FILTER_KEYS)

    if present(criteria, "hasEquity") and str(criteria["hasEquity"]).strip() not in HAS_EQUITY_VALUES:
        raise errors.ValidationError("hasEquity must be either true or false")

    rule = first_match(RULES, criteria)
    if rule is not None:
        return rule.build(criteria)

    if criteria:
        # Keys were sent but none carried a usable value.
        raise errors.ValidationError("hasEquity must be either true or false")
    return None
