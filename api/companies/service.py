"""
Company business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from core import errors
from jobs import service as jobs_service

from . import filters, repository, schemas

logger = logging.getLogger(__name__)


def _to_company(row: dict) -> schemas.Company:
    return schemas.Company(
        handle=str(row["handle"]),
        name=str(row["name"]),
        description=str(row.get("description") or ""),
        numEmployees=row.get("numEmployees"),
        logoUrl=row.get("logoUrl"),
    )


async def create(payload: schemas.CompanyNew) -> schemas.Company:
    if await repository.handle_exists(payload.handle):
        raise errors.ValidationError(f"Duplicate company: {payload.handle}")

    row = await repository.insert_company(
        handle=payload.handle,
        name=payload.name,
        description=payload.description,
        num_employees=payload.numEmployees,
        logo_url=payload.logoUrl,
    )
    logger.info("Created company %s", payload.handle)
    return _to_company(row)


async def find_all() -> list[schemas.Company]:
    return [_to_company(row) for row in await repository.list_companies()]


async def find(criteria: Mapping[str, str]) -> list[schemas.Company]:
    """
    Companies matching the search criteria, ordered by name.

    An empty criteria mapping lists every company.
    """
    query = filters.resolve(criteria)
    if query is None:
        return await find_all()

    # No matches is an empty list, never NotFoundError.
    return [_to_company(row) for row in await repository.search_companies(query)]


async def get(handle: str) -> schemas.CompanyDetail:
    row = await repository.get_company(handle)
    if row is None:
        raise errors.NotFoundError(f"No company: {handle}")

    # Separate statement; not a snapshot of the company row above.
    jobs = await jobs_service.list_for_company(handle)
    company = _to_company(row)
    return schemas.CompanyDetail(
        **company.model_dump(),
        jobs=[schemas.CompanyJob(**job.model_dump(exclude={"companyHandle"})) for job in jobs],
    )


async def update(handle: str, data: Mapping[str, Any]) -> schemas.Company:
    row = await repository.update_company(handle, data)
    if row is None:
        raise errors.NotFoundError(f"No company: {handle}")
    logger.info("Updated company %s (%s)", handle, ", ".join(data.keys()))
    return _to_company(row)


async def remove(handle: str) -> None:
    deleted = await repository.delete_company(handle)
    if not deleted:
        raise errors.NotFoundError(f"No company: {handle}")
    logger.info("Deleted company %s", handle)
