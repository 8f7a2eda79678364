"""
Company API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from auth import dependencies as auth_dependencies
from auth.guard import IdentityPayload
from core import errors

from . import schemas, service

router = APIRouter()


@router.post("/companies", status_code=status.HTTP_201_CREATED)
async def create_company(
    payload: schemas.CompanyNew,
    _: IdentityPayload = Depends(auth_dependencies.require_admin),
) -> dict:
    company = await service.create(payload)
    return {"company": company}


@router.get("/companies")
async def list_companies(request: Request) -> dict:
    """
    List companies, optionally filtered by minEmployees, maxEmployees or nameLike.
    """
    criteria = dict(request.query_params)
    if not criteria:
        return {"companies": await service.find_all()}

    errors.validate_model(schemas.CompanyFilter, criteria)
    return {"companies": await service.find(criteria)}


@router.get("/companies/{handle}")
async def get_company(handle: str) -> dict:
    return {"company": await service.get(handle)}


@router.patch("/companies/{handle}")
async def update_company(
    handle: str,
    payload: schemas.CompanyUpdate,
    _: IdentityPayload = Depends(auth_dependencies.require_admin),
) -> dict:
    # Only the fields the client sent; an explicit null clears the column.
    data = payload.model_dump(exclude_unset=True)
    company = await service.update(handle, data)
    return {"company": company}


@router.delete("/companies/{handle}")
async def delete_company(
    handle: str,
    _: IdentityPayload = Depends(auth_dependencies.require_admin),
) -> dict:
    await service.remove(handle)
    return {"deleted": handle}
