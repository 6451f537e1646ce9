"""Remote schema loading through GraphQL introspection.

Handles HTTP communication, error handling, and building a client schema
from the introspection result.
"""

from typing import Any

import httpx
from graphql import GraphQLSchema, build_client_schema, get_introspection_query

from .errors import IntrospectionError


def fetch_introspection(
    url: str,
    headers: dict[str, str] | None = None,
    *,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Run the introspection query against an endpoint.

    Args:
        url: GraphQL endpoint URL
        headers: Extra request headers (e.g., authorization)
        timeout: Request timeout in seconds
        transport: Optional httpx transport, mainly for testing

    Returns:
        The 'data' portion of the response

    Raises:
        IntrospectionError: If the request fails or the response contains errors
    """
    request_headers = {"Content-Type": "application/json"}
    request_headers.update(headers or {})

    payload = {"query": get_introspection_query(descriptions=True)}
    try:
        with httpx.Client(
            timeout=timeout, headers=request_headers, transport=transport
        ) as client:
            response = client.post(url, json=payload)
            response.raise_for_status()
            result = response.json()
    except httpx.HTTPError as e:
        raise IntrospectionError(f"Introspection request to {url} failed: {e}") from e

    if result.get("errors"):
        error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
        raise IntrospectionError(f"GraphQL errors: {error_messages}", result["errors"])

    data = result.get("data")
    if not data or "__schema" not in data:
        raise IntrospectionError(f"No introspection data returned from {url}")
    return data


def fetch_schema(
    url: str,
    headers: dict[str, str] | None = None,
    *,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> GraphQLSchema:
    """Introspect a remote endpoint and build its schema."""
    data = fetch_introspection(url, headers, timeout=timeout, transport=transport)
    return build_client_schema(data)
