"""Unit tests for GetCurrentUserUseCase."""

from uuid import uuid4

import pytest

from study.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from study.domain.service import JWTService
from study.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_identity_comes_from_token_claims(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id, "ada@student.example.edu")

        user = await use_case.execute(GetCurrentUserRequest(token=token))

        assert user.user_id == user_id
        assert user.email == "ada@student.example.edu"

    @pytest.mark.asyncio
    async def test_non_uuid_subject_is_rejected(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token("not-a-uuid")

        with pytest.raises(JWTError, match="subject"):
            await use_case.execute(GetCurrentUserRequest(token=token))
