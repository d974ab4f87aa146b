"""Tests for GraphQL mutations."""
from __future__ import annotations

from content_service.core.relay import to_global_id
from content_service.features.content.models import Option
from content_service.features.graphql.schema import schema

UPDATE_OPTION = """
    mutation Update($input: UpdateOptionInput!) {
        updateOption(input: $input) {
            clientMutationId
            option { id optionName optionValue }
        }
    }
"""


async def test_update_option(graphql_context):
    option_id = to_global_id("Option", 2)

    result = await schema.execute(
        UPDATE_OPTION,
        variable_values={
            "input": {"id": option_id, "value": "Renamed Blog", "clientMutationId": "m-1"},
        },
        context_value=graphql_context,
    )

    assert result.errors is None
    payload = result.data["updateOption"]
    assert payload["clientMutationId"] == "m-1"
    assert payload["option"] == {
        "id": option_id,
        "optionName": "blogname",
        "optionValue": "Renamed Blog",
    }
    stored = await graphql_context.session.get(Option, 2)
    assert stored.option_value == "Renamed Blog"


async def test_client_mutation_id_is_optional(graphql_context):
    result = await schema.execute(
        UPDATE_OPTION,
        variable_values={"input": {"id": to_global_id("Option", 1), "value": "x"}},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["updateOption"]["clientMutationId"] is None


async def test_wrong_kind_is_rejected(graphql_context):
    result = await schema.execute(
        UPDATE_OPTION,
        variable_values={"input": {"id": to_global_id("Post", 1), "value": "x"}},
        context_value=graphql_context,
    )

    assert result.data is None
    error = result.errors[0]
    assert error.extensions["code"] == "invalid-argument"
    assert error.extensions["status"] == 422
    assert "Post" in error.message


async def test_missing_option(graphql_context):
    result = await schema.execute(
        UPDATE_OPTION,
        variable_values={"input": {"id": to_global_id("Option", 999), "value": "x"}},
        context_value=graphql_context,
    )

    error = result.errors[0]
    assert error.extensions["code"] == "option-not-found"
    assert error.extensions["status"] == 404
    assert error.message == "Option 999 not found"
