"""
Tests for the Strawberry schema: error codes and field wiring
"""

from datetime import UTC, datetime

import pytest

from jobboard.graphql.schema import schema, validate_schema

from ..conftest import COMPANY_A, COMPANY_B, USER_A, USER_B, stored_created_at

CREATE_JOB = """
mutation CreateJob($input: CreateJobInput!) {
  job: createJob(input: $input) { id date title company { id name } }
}
"""

DELETE_JOB = """
mutation DeleteJob($id: ID!) {
  job: deleteJob(id: $id) { id }
}
"""

UPDATE_JOB = """
mutation UpdateJob($input: UpdateJobInput!) {
  job: updateJob(input: $input) { id title description }
}
"""

JOB_BY_ID = """
query JobById($id: ID!) {
  job(id: $id) { id title description date company { id name } }
}
"""

COMPANY_BY_ID = """
query CompanyById($id: ID!) {
  company(id: $id) { id name jobs { id title } }
}
"""


def error_codes(result):
    return [error.extensions["code"] for error in result.errors or []]


class TestSchemaDefinition:
    @pytest.mark.unit
    def test_validates(self):
        validate_schema()

    @pytest.mark.unit
    def test_private_fields_are_hidden(self):
        sdl = schema.as_str()

        assert "createdAt" not in sdl
        assert "companyId" not in sdl
        assert "date: String!" in sdl
        assert "createJob(input: CreateJobInput!): Job" in sdl


class TestQueries:
    @pytest.mark.asyncio
    async def test_unknown_job_is_not_found(self, seeded, anonymous):
        result = await schema.execute(
            JOB_BY_ID, variable_values={"id": "missing"}, context_value={"auth": anonymous}
        )

        assert result.data == {"job": None}
        assert error_codes(result) == ["NOT_FOUND"]
        assert result.errors[0].message == "No Job found with id missing"

    @pytest.mark.asyncio
    async def test_unknown_company_is_not_found(self, seeded, anonymous):
        result = await schema.execute(
            COMPANY_BY_ID, variable_values={"id": "missing"}, context_value={"auth": anonymous}
        )

        assert result.data == {"company": None}
        assert error_codes(result) == ["NOT_FOUND"]

    @pytest.mark.asyncio
    async def test_company_with_no_jobs(self, seeded, anonymous):
        result = await schema.execute(
            COMPANY_BY_ID, variable_values={"id": COMPANY_B}, context_value={"auth": anonymous}
        )

        assert result.errors is None
        assert result.data == {"company": {"id": COMPANY_B, "name": "Company Two", "jobs": []}}


class TestMutations:
    @pytest.mark.asyncio
    async def test_create_job_requires_auth(self, seeded, anonymous):
        result = await schema.execute(
            CREATE_JOB,
            variable_values={"input": {"title": "T", "description": "D"}},
            context_value={"auth": anonymous},
        )

        assert result.data == {"job": None}
        assert error_codes(result) == ["NOT_AUTHORIZED"]

    @pytest.mark.asyncio
    async def test_create_update_delete(self, seeded, anonymous, auth_context_for):
        user_a = {"auth": auth_context_for(USER_A, COMPANY_A)}
        user_b = {"auth": auth_context_for(USER_B, COMPANY_B)}

        before = datetime.now(UTC).date().isoformat()
        created = await schema.execute(
            CREATE_JOB,
            variable_values={"input": {"title": "T", "description": "D"}},
            context_value=user_a,
        )
        after = datetime.now(UTC).date().isoformat()
        assert created.errors is None
        job = created.data["job"]
        assert job["company"] == {"id": COMPANY_A, "name": "Company One"}
        assert job["date"] in {before, after}
        assert job["date"] == (await stored_created_at(job["id"]))[:10]

        hijack = await schema.execute(
            UPDATE_JOB,
            variable_values={"input": {"id": job["id"], "title": "Mine now"}},
            context_value=user_b,
        )
        assert error_codes(hijack) == ["NOT_FOUND"]

        updated = await schema.execute(
            UPDATE_JOB,
            variable_values={"input": {"id": job["id"], "title": "Renamed", "description": None}},
            context_value=user_a,
        )
        assert updated.data == {"job": {"id": job["id"], "title": "Renamed", "description": None}}

        not_owned = await schema.execute(
            DELETE_JOB, variable_values={"id": job["id"]}, context_value=user_b
        )
        assert error_codes(not_owned) == ["NOT_FOUND"]

        deleted = await schema.execute(
            DELETE_JOB, variable_values={"id": job["id"]}, context_value=user_a
        )
        assert deleted.data == {"job": {"id": job["id"]}}

        gone = await schema.execute(
            JOB_BY_ID, variable_values={"id": job["id"]}, context_value={"auth": anonymous}
        )
        assert error_codes(gone) == ["NOT_FOUND"]
