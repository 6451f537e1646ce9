"""Schema loading and possible-type expansion.

Schemas are read from SDL files (a single file, a directory tree, or a
.zip/.tar.gz/.tgz archive of either) or introspected from a remote endpoint.
"""

import os
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

from graphql import (
    GraphQLError,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLType,
    build_schema,
    get_nullable_type,
    is_abstract_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
)

from .errors import SchemaError
from .introspection import fetch_schema

SCHEMA_EXTENSIONS = (".graphqls", ".graphql")
ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")


def get_possible_types(
    schema: GraphQLSchema, graphql_type: GraphQLType
) -> list[GraphQLObjectType]:
    """Expand a type into the concrete object types it may resolve to.

    Object types expand to themselves, interfaces and unions to their
    implementations in schema order. Scalars, enums and input types have no
    possible types.
    """
    if is_non_null_type(graphql_type):
        return get_possible_types(schema, get_nullable_type(graphql_type))
    if is_list_type(graphql_type):
        return get_possible_types(schema, graphql_type.of_type)
    if is_object_type(graphql_type):
        return [graphql_type]
    if is_abstract_type(graphql_type):
        return list(schema.get_possible_types(graphql_type))
    return []


def is_archive(path: Path) -> bool:
    return path.is_file() and path.name.lower().endswith(ARCHIVE_SUFFIXES)


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    name = archive_path.name.lower()
    if name.endswith(".zip"):
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            tar_ref.extractall(temp_dir, filter="data")
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


def collect_schema_files(schema_path: str) -> list[str]:
    """Collect all SDL files from path."""
    files = []
    if os.path.isfile(schema_path):
        if schema_path.endswith(SCHEMA_EXTENSIONS):
            files.append(schema_path)
    else:
        for root, _, filenames in os.walk(schema_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_EXTENSIONS):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def build_schema_from_files(files: list[str]) -> GraphQLSchema:
    """Concatenate SDL files and build one schema from them."""
    if not files:
        raise SchemaError("No schema files found")
    sources = []
    for file_path in files:
        with open(file_path) as f:
            sources.append(f.read())
    try:
        return build_schema("\n".join(sources))
    except (GraphQLError, TypeError) as e:
        raise SchemaError(f"Invalid schema: {e}") from e


def load_schema(source: str, headers: dict[str, str] | None = None) -> GraphQLSchema:
    """Load a schema from a URL, archive, SDL file or directory."""
    if source.startswith(("http://", "https://")):
        return fetch_schema(source, headers=headers)

    path = Path(source)
    if not path.exists():
        raise SchemaError(f"Schema source not found: {source}")

    if is_archive(path):
        temp_dir = extract_archive(path)
        try:
            return build_schema_from_files(collect_schema_files(temp_dir))
        finally:
            shutil.rmtree(temp_dir)

    return build_schema_from_files(collect_schema_files(str(path)))
