"""Shared fixtures for gql-stitch tests."""

import pytest
from graphql import build_schema

from gql_stitch.core.config import GeneratorConfig, PluginDescriptor

SCHEMA_SDL = """
interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  name: String
  friends: [User]
}

type Bot implements Node {
  id: ID!
  model: String
}

type Org implements Node {
  id: ID!
  title: String
}

union SearchResult = User | Org

interface Orphan {
  id: ID!
}

enum Color {
  RED
  GREEN
}

type Query {
  user: User
  node(id: ID!): Node
  search: [SearchResult]
  orphan: Orphan
}
"""


@pytest.fixture
def schema():
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def doc_var_config():
    """Config with a plugin that emits fragment document variables."""
    return GeneratorConfig(
        plugins=[PluginDescriptor(name="python-operations", emits_document_value=True)]
    )


@pytest.fixture
def schema_sdl():
    return SCHEMA_SDL
