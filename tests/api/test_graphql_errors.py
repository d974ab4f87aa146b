"""Tests for GraphQL error formatting and masking."""
from __future__ import annotations

from content_service.core.pagination import CursorCodec
from content_service.core.relay import to_global_id
from content_service.core.relay.opaque import encode_opaque
from content_service.core.settings import clear_all_caches
from content_service.features.content import ContentRepository
from content_service.features.graphql.error_handler import INTERNAL_ERROR_MESSAGE
from content_service.features.graphql.schema import schema

NODE_QUERY = "query Node($id: ID!) { node(id: $id) { id } }"

OPTIONS_QUERY = """
    query Options($first: Int, $after: String) {
        viewer {
            options(first: $first, after: $after) { edges { node { optionName } } }
        }
    }
"""


class BrokenRepository(ContentRepository):
    """Repository whose option listing fails with an unexpected error."""

    async def list_options(self):
        msg = "database exploded"
        raise RuntimeError(msg)


async def test_malformed_id(graphql_context):
    result = await schema.execute(
        NODE_QUERY,
        variable_values={"id": "%%%"},
        context_value=graphql_context,
    )

    error = result.errors[0]
    assert error.extensions["code"] == "malformed-identifier"
    assert error.extensions["status"] == 422
    assert error.path == ["node"]


async def test_missing_separator(graphql_context):
    result = await schema.execute(
        NODE_QUERY,
        variable_values={"id": encode_opaque("Post42")},
        context_value=graphql_context,
    )

    assert result.errors[0].extensions["code"] == "malformed-identifier"


async def test_unknown_tag(graphql_context):
    result = await schema.execute(
        NODE_QUERY,
        variable_values={"id": to_global_id("Comment", 1)},
        context_value=graphql_context,
    )

    error = result.errors[0]
    assert error.extensions["code"] == "unknown-tag"
    assert error.message == "Unknown node type: 'Comment'"


async def test_invalid_cursor(graphql_context):
    result = await schema.execute(
        OPTIONS_QUERY,
        variable_values={"after": "not-a-cursor"},
        context_value=graphql_context,
    )

    error = result.errors[0]
    assert error.extensions["code"] == "invalid-cursor"
    assert error.message == "Invalid cursor supplied for 'after'"


async def test_foreign_cursor(graphql_context):
    result = await schema.execute(
        OPTIONS_QUERY,
        variable_values={"after": to_global_id("Post", 1)},
        context_value=graphql_context,
    )

    assert result.errors[0].extensions["code"] == "invalid-cursor"


async def test_negative_first(graphql_context):
    result = await schema.execute(
        OPTIONS_QUERY,
        variable_values={"first": -1},
        context_value=graphql_context,
    )

    error = result.errors[0]
    assert error.extensions["code"] == "invalid-argument"
    assert "first" in error.message


async def test_valid_cursor_has_no_errors(graphql_context):
    result = await schema.execute(
        OPTIONS_QUERY,
        variable_values={"after": CursorCodec.encode(0)},
        context_value=graphql_context,
    )

    assert result.errors is None


async def test_internal_error_masked_in_production(graphql_context, monkeypatch):
    monkeypatch.setenv("APP_ENVIRONMENT", "production")
    clear_all_caches()
    graphql_context.content = BrokenRepository(graphql_context.session)

    result = await schema.execute(OPTIONS_QUERY, context_value=graphql_context)

    error = result.errors[0]
    assert error.message == INTERNAL_ERROR_MESSAGE
    assert error.extensions == {"code": "INTERNAL_ERROR"}
    assert "exploded" not in str(error.formatted)


async def test_internal_error_debug_outside_production(graphql_context, monkeypatch):
    monkeypatch.setenv("APP_ENVIRONMENT", "development")
    clear_all_caches()
    graphql_context.content = BrokenRepository(graphql_context.session)

    result = await schema.execute(OPTIONS_QUERY, context_value=graphql_context)

    error = result.errors[0]
    assert error.extensions["code"] == "INTERNAL_ERROR"
    assert error.extensions["debug"] == {
        "exception_type": "RuntimeError",
        "exception_message": "database exploded",
    }


async def test_syntax_error_passes_through(graphql_context):
    result = await schema.execute("query { viewer {", context_value=graphql_context)

    assert result.errors
    assert result.errors[0].original_error is None
