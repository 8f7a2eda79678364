"""
Job business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from core import errors

from . import filters, repository, schemas

logger = logging.getLogger(__name__)


def _to_job(row: dict) -> schemas.Job:
    # NUMERIC comes back from asyncpg as Decimal and stays exact.
    return schemas.Job(
        id=int(row["id"]),
        title=str(row["title"]),
        salary=row.get("salary"),
        equity=row.get("equity"),
        companyHandle=str(row["companyHandle"]),
    )


async def create(payload: schemas.JobNew) -> schemas.Job:
    row = await repository.insert_job(
        title=payload.title,
        salary=payload.salary,
        equity=payload.equity,
        company_handle=payload.companyHandle,
    )
    job = _to_job(row)
    logger.info("Created job %s for company %s", job.id, job.companyHandle)
    return job


async def find_all() -> list[schemas.Job]:
    return [_to_job(row) for row in await repository.list_jobs()]


async def find(criteria: Mapping[str, str]) -> list[schemas.Job]:
    """
    Jobs matching the search criteria. See `jobs.filters` for precedence
    and for which searches treat "no jobs" as NotFoundError.
    """
    query = filters.resolve(criteria)
    if query is None:
        return await find_all()

    rows = await repository.search_jobs(query)
    if not rows and query.empty_is_error:
        raise errors.NotFoundError("No jobs match the given filters.")
    return [_to_job(row) for row in rows]


async def get(job_id: int) -> schemas.Job:
    row = await repository.get_job(job_id)
    if row is None:
        raise errors.NotFoundError(f"No job: {job_id}")
    return _to_job(row)


async def list_for_company(company_handle: str) -> list[schemas.Job]:
    return [_to_job(row) for row in await repository.list_jobs_for_company(company_handle)]


async def update(job_id: int, data: Mapping[str, Any]) -> schemas.Job:
    row = await repository.update_job(job_id, data)
    if row is None:
        raise errors.NotFoundError(f"No job: {job_id}")
    logger.info("Updated job %s (%s)", job_id, ", ".join(data.keys()))
    return _to_job(row)


async def remove(job_id: int) -> None:
    deleted = await repository.delete_job(job_id)
    if not deleted:
        raise errors.NotFoundError(f"No job: {job_id}")
    logger.info("Deleted job %s", job_id)
