"""
Job persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import asyncpg

from core import db, errors
from core.filters import FilterQuery
from core.sql import sql_for_partial_update

# API field name -> column name.
JS_TO_SQL = {
    "companyHandle": "company_handle",
}

# id and companyHandle never change after creation.
UPDATABLE_FIELDS = ("title", "salary", "equity")

JOB_COLUMNS = """
    id,
    title,
    salary,
    equity,
    company_handle AS "companyHandle"
"""


async def insert_job(
    *,
    title: str,
    salary: int | None,
    equity: Decimal | None,
    company_handle: str,
) -> dict:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}
            """,
            title,
            salary,
            equity,
            company_handle,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ValidationError(f"No company: {company_handle}") from exc
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise errors.ValidationError(f"Invalid job: {exc}") from exc
    if row is None:
        raise RuntimeError("Failed to create job.")
    return row


async def list_jobs() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        ORDER BY id
        """
    )


async def search_jobs(query: FilterQuery) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        WHERE {query.where}
        ORDER BY {query.order_by}
        """,
        *query.args,
    )


async def list_jobs_for_company(company_handle: str) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        company_handle,
    )


async def get_job(job_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )


async def update_job(job_id: int, data: Mapping[str, Any]) -> dict | None:
    update = sql_for_partial_update(data, JS_TO_SQL, allowed=UPDATABLE_FIELDS)
    return await db.fetch_one(
        f"""
        UPDATE jobs
        SET {update.set_cols}
        WHERE id = {update.next_placeholder}
        RETURNING {JOB_COLUMNS}
        """,
        *update.values,
        job_id,
    )


async def delete_job(job_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE
        FROM jobs
        WHERE id = $1
        RETURNING id
        """,
        job_id,
    )
    return row is not None
