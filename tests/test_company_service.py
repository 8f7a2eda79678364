"""
Tests for companies/service.py against the in-memory database fake.
"""

import asyncio
from decimal import Decimal

import asyncpg
import pytest

from companies import schemas, service
from core import errors

C1 = {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": "http://c1.img"}
C2 = {"handle": "c2", "name": "C2", "description": "Desc2", "numEmployees": 2, "logoUrl": None}
C3 = {"handle": "c3", "name": "C3", "description": "Desc3", "numEmployees": 300, "logoUrl": None}


class TestCreate:
    def test_inserts_new_company(self, fake_db):
        fake_db.queue_one(None, C1)
        payload = schemas.CompanyNew(
            handle="c1",
            name="C1",
            description="Desc1",
            numEmployees=1,
            logoUrl="http://c1.img",
        )

        company = asyncio.run(service.create(payload))

        assert company.model_dump() == C1
        assert "INSERT INTO companies" in fake_db.last_sql
        assert fake_db.last_args == ("c1", "C1", "Desc1", 1, "http://c1.img")

    def test_duplicate_handle_rejected(self, fake_db):
        fake_db.queue_one({"handle": "c1"})
        payload = schemas.CompanyNew(handle="c1", name="C1")

        with pytest.raises(errors.ValidationError) as exc_info:
            asyncio.run(service.create(payload))

        assert exc_info.value.detail == "Duplicate company: c1"
        assert len(fake_db.calls) == 1

    def test_concurrent_duplicate_is_bad_request(self, fake_db):
        fake_db.queue_one(None, asyncpg.UniqueViolationError("duplicate key value"))
        payload = schemas.CompanyNew(handle="c1", name="C1")

        with pytest.raises(errors.ValidationError) as exc_info:
            asyncio.run(service.create(payload))

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Duplicate company: c1"

    def test_other_constraint_violation_is_bad_request(self, fake_db):
        fake_db.queue_one(None, asyncpg.CheckViolationError("num_employees_check"))
        payload = schemas.CompanyNew(handle="c1", name="C1")

        with pytest.raises(errors.ValidationError) as exc_info:
            asyncio.run(service.create(payload))

        assert exc_info.value.status_code == 400


class TestFind:
    def test_find_all_ordered_by_name(self, fake_db):
        fake_db.queue_all([C1, C2, C3])

        companies = asyncio.run(service.find_all())

        assert [c.handle for c in companies] == ["c1", "c2", "c3"]
        assert "ORDER BY name" in fake_db.last_sql

    def test_between_bounds(self, fake_db):
        fake_db.queue_all([C3])

        companies = asyncio.run(service.find({"minEmployees": "10", "maxEmployees": "1000"}))

        assert [c.handle for c in companies] == ["c3"]
        assert "WHERE num_employees BETWEEN $1 AND $2" in fake_db.last_sql
        assert "ORDER BY name" in fake_db.last_sql
        assert fake_db.last_args == (10, 1000)

    def test_no_matches_is_empty_list(self, fake_db):
        fake_db.queue_all([])

        assert asyncio.run(service.find({"nameLike": "zzz"})) == []

    def test_inverted_bounds_never_reach_database(self, fake_db):
        with pytest.raises(errors.ValidationError):
            asyncio.run(service.find({"minEmployees": "50", "maxEmployees": "10"}))

        assert fake_db.calls == []

    def test_empty_criteria_lists_everything(self, fake_db):
        fake_db.queue_all([C1])

        companies = asyncio.run(service.find({}))

        assert len(companies) == 1
        assert "WHERE" not in fake_db.last_sql


class TestGet:
    def test_includes_jobs(self, fake_db):
        fake_db.queue_one(C1)
        fake_db.queue_all(
            [{"id": 1, "title": "j1", "salary": 100, "equity": Decimal("0.1"), "companyHandle": "c1"}]
        )

        company = asyncio.run(service.get("c1"))

        assert company.handle == "c1"
        assert [job.model_dump() for job in company.jobs] == [
            {"id": 1, "title": "j1", "salary": 100, "equity": Decimal("0.1")}
        ]
        assert fake_db.calls[1][2] == ("c1",)

    def test_company_without_jobs(self, fake_db):
        fake_db.queue_one(C2)

        company = asyncio.run(service.get("c2"))

        assert company.jobs == []

    def test_missing_company(self, fake_db):
        with pytest.raises(errors.NotFoundError) as exc_info:
            asyncio.run(service.get("nope"))

        assert exc_info.value.detail == "No company: nope"
        assert len(fake_db.calls) == 1


class TestUpdate:
    def test_builds_partial_update(self, fake_db):
        fake_db.queue_one({**C1, "name": "New", "numEmployees": 10})

        company = asyncio.run(service.update("c1", {"name": "New", "numEmployees": 10}))

        assert company.name == "New"
        sql = fake_db.last_sql
        assert 'SET "name"=$1, "num_employees"=$2' in sql
        assert "WHERE handle = $3" in sql
        assert fake_db.last_args == ("New", 10, "c1")

    def test_null_clears_column(self, fake_db):
        fake_db.queue_one({**C1, "logoUrl": None})

        asyncio.run(service.update("c1", {"logoUrl": None}))

        assert 'SET "logo_url"=$1' in fake_db.last_sql
        assert fake_db.last_args == (None, "c1")

    def test_handle_is_not_updatable(self, fake_db):
        with pytest.raises(errors.ValidationError):
            asyncio.run(service.update("c1", {"handle": "c9"}))

        assert fake_db.calls == []

    def test_empty_update_rejected(self, fake_db):
        with pytest.raises(errors.ValidationError):
            asyncio.run(service.update("c1", {}))

    def test_missing_company(self, fake_db):
        with pytest.raises(errors.NotFoundError):
            asyncio.run(service.update("nope", {"name": "x"}))


class TestRemove:
    def test_deletes(self, fake_db):
        fake_db.queue_one({"handle": "c1"})

        assert asyncio.run(service.remove("c1")) is None
        assert "DELETE" in fake_db.last_sql

    def test_missing_company(self, fake_db):
        with pytest.raises(errors.NotFoundError):
            asyncio.run(service.remove("nope"))
