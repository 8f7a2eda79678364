"""
Company persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import asyncpg

from core import db, errors
from core.filters import FilterQuery
from core.sql import sql_for_partial_update

# API field name -> column name.
JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

UPDATABLE_FIELDS = ("name", "description", "numEmployees", "logoUrl")

COMPANY_COLUMNS = """
    handle,
    name,
    description,
    num_employees AS "numEmployees",
    logo_url AS "logoUrl"
"""


async def handle_exists(handle: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT handle
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )
    return row is not None


async def insert_company(
    *,
    handle: str,
    name: str,
    description: str,
    num_employees: int | None,
    logo_url: str | None,
) -> dict:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}
            """,
            handle,
            name,
            description,
            num_employees,
            logo_url,
        )
    except asyncpg.UniqueViolationError as exc:
        # Lost a race with a concurrent insert of the same handle.
        raise errors.ValidationError(f"Duplicate company: {handle}") from exc
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise errors.ValidationError(f"Invalid company: {exc}") from exc
    if row is None:
        raise RuntimeError("Failed to create company.")
    return row


async def list_companies() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {COMPANY_COLUMNS}
        FROM companies
        ORDER BY name
        """
    )


async def search_companies(query: FilterQuery) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {COMPANY_COLUMNS}
        FROM companies
        WHERE {query.where}
        ORDER BY {query.order_by}
        """,
        *query.args,
    )


async def get_company(handle: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {COMPANY_COLUMNS}
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def update_company(handle: str, data: Mapping[str, Any]) -> dict | None:
    update = sql_for_partial_update(data, JS_TO_SQL, allowed=UPDATABLE_FIELDS)
    return await db.fetch_one(
        f"""
        UPDATE companies
        SET {update.set_cols}
        WHERE handle = {update.next_placeholder}
        RETURNING {COMPANY_COLUMNS}
        """,
        *update.values,
        handle,
    )


async def delete_company(handle: str) -> bool:
    row = await db.fetch_one(
        """
        DELETE
        FROM companies
        WHERE handle = $1
        RETURNING handle
        """,
        handle,
    )
    return row is not None
