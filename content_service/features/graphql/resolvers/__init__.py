"""Root Query and Mutation types."""

from content_service.features.graphql.resolvers.mutations import Mutation
from content_service.features.graphql.resolvers.queries import Query

__all__ = ["Mutation", "Query"]
