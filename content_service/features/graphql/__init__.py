"""GraphQL API for the content graph.

- schema: Strawberry schema (Query, Mutation, node types, extensions)
- router: FastAPI router serving the schema
- context: per-request GraphQLContext
"""
