"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from ..store import PersonStore, get_person_store
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(store: PersonStore | None = None) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Args:
        store: Person store handed to resolvers; defaults to the shared store
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": store or get_person_store(),
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.debug,
        context_getter=get_context,
    )
