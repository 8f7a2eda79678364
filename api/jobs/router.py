"""
Job API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from auth import dependencies as auth_dependencies
from auth.guard import IdentityPayload
from core import errors

from . import schemas, service

router = APIRouter()


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: schemas.JobNew,
    _: IdentityPayload = Depends(auth_dependencies.require_admin),
) -> dict:
    job = await service.create(payload)
    return {"job": job}


@router.get("/jobs")
async def list_jobs(request: Request) -> dict:
    """
    List jobs, optionally filtered by title, minSalary or hasEquity.
    """
    criteria = dict(request.query_params)
    if not criteria:
        return {"jobs": await service.find_all()}

    errors.validate_model(schemas.JobFilter, criteria)
    return {"jobs": await service.find(criteria)}


@router.get("/jobs/{job_id}")
async def get_job(job_id: int) -> dict:
    return {"job": await service.get(job_id)}


@router.patch("/jobs/{job_id}")
async def update_job(
    job_id: int,
    payload: schemas.JobUpdate,
    _: IdentityPayload = Depends(auth_dependencies.require_admin),
) -> dict:
    data = payload.model_dump(exclude_unset=True)
    job = await service.update(job_id, data)
    return {"job": job}


@router.delete("/jobs/{job_id}")
async def delete_job(
    job_id: int,
    _: IdentityPayload = Depends(auth_dependencies.require_admin),
) -> dict:
    await service.remove(job_id)
    return {"deleted": job_id}
