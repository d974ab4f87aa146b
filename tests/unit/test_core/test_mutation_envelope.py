"""Unit tests for the client mutation id envelope."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from content_service.core.relay import run_client_mutation


@dataclass
class RenameInput:
    name: str
    client_mutation_id: str | None = None


@dataclass
class RenamePayload:
    name: str
    client_mutation_id: str | None = None


class RenameFailedError(Exception):
    pass


class TestRunClientMutation:
    """clientMutationId is copied from input to payload unchanged."""

    async def test_echoes_client_mutation_id(self):
        payload = await run_client_mutation(
            RenameInput(name="new", client_mutation_id="abc-123"),
            lambda data: {"name": data.name.upper()},
            RenamePayload,
        )

        assert payload == RenamePayload(name="NEW", client_mutation_id="abc-123")

    async def test_absent_id_stays_absent(self):
        payload = await run_client_mutation(
            RenameInput(name="x"),
            lambda data: {"name": data.name},
            RenamePayload,
        )

        assert payload.client_mutation_id is None

    async def test_async_mutate(self):
        async def mutate(data: RenameInput) -> dict[str, str]:
            return {"name": data.name * 2}

        payload = await run_client_mutation(
            RenameInput(name="ab", client_mutation_id="  odd value  "),
            mutate,
            RenamePayload,
        )

        assert payload.name == "abab"
        assert payload.client_mutation_id == "  odd value  "

    async def test_mutation_errors_propagate(self):
        async def mutate(_data: RenameInput) -> dict[str, str]:
            raise RenameFailedError("nope")

        with pytest.raises(RenameFailedError):
            await run_client_mutation(RenameInput(name="x", client_mutation_id="1"), mutate, RenamePayload)
