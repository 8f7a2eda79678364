"""
Company API schemas (request/response models).
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CompanyNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str = ""
    numEmployees: int | None = Field(default=None, ge=0)
    logoUrl: str | None = None


class CompanyUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    numEmployees: int | None = Field(default=None, ge=0)
    logoUrl: str | None = None


class CompanyFilter(BaseModel):
    model_config = ConfigDict(extra="forbid")

    minEmployees: int | None = Field(default=None, ge=0)
    maxEmployees: int | None = Field(default=None, ge=0)
    nameLike: str | None = Field(default=None, min_length=1)


class CompanyJob(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class Company(BaseModel):
    handle: str
    name: str
    description: str
    numEmployees: int | None = None
    logoUrl: str | None = None


class CompanyDetail(Company):
    jobs: list[CompanyJob] = Field(default_factory=list)
