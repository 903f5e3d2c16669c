"""Tests for InitializeSystemUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.initialize_system import InitializeSystemUseCase
from src.core.exceptions import SetupError


class TestInitializeSystemUseCase:
    async def test_success_redirects_to_login(self):
        client = AsyncMock()
        client.force_seed.return_value = "Banco de dados inicializado com sucesso!"

        result = await InitializeSystemUseCase(client).execute()

        client.force_seed.assert_awaited_once_with()
        assert result.message == "Banco de dados inicializado com sucesso!"
        assert result.redirect_to == "/login"
        assert result.redirect_after == 2.0

    async def test_failure_propagates(self):
        client = AsyncMock()
        client.force_seed.side_effect = SetupError("Banco de dados já contém usuários")

        with pytest.raises(SetupError) as exc_info:
            await InitializeSystemUseCase(client).execute()

        assert exc_info.value.message == "Banco de dados já contém usuários"
