"""Fragment registry builder.

Scans every document of a generation run once and records, per fragment
name, the generated file that will export it and the symbol names it
produces there:

    registry = build_fragment_registry(schema, documents, config)
    registry["UserFields"].import_names
    # ('UserFieldsFragmentDoc', 'UserFieldsFragment')

An unknown type condition aborts the scan immediately. Fragments sharing a
name are allowed when their printed bodies are identical; conflicting
bodies are collected over the whole scan and reported in one error.
"""

from collections.abc import Callable, Iterable

from graphql import FragmentDefinitionNode, GraphQLSchema, print_ast

from .config import GeneratorConfig
from .errors import DuplicateFragmentError, UnknownFragmentTypeError
from .imports import OutputPathBuilder
from .ir import DocumentRecord, FragmentRegistry, FragmentRegistryEntry
from .naming import NamingConvention
from .schema import get_possible_types


def fragment_import_names(
    name: str,
    possible_types: list[str],
    naming: NamingConvention,
    include_document_variable: bool,
) -> tuple[str, ...]:
    """Symbol names a fragment produces in its generated file.

    Args:
        name: The fragment name
        possible_types: Concrete type names of the type condition, in order
        naming: The naming convention in effect
        include_document_variable: Whether a document variable is exported

    Returns:
        Ordered, distinct symbol names. A single possible type yields one
        fragment type; several yield one type per possible type; none
        yields no fragment type.
    """
    names: list[str] = []
    if include_document_variable:
        names.append(naming.fragment_variable_name(name))

    if len(possible_types) == 1:
        names.append(naming.fragment_type_name(name))
    else:
        for type_name in possible_types:
            names.append(naming.fragment_type_name(name, type_name))

    return tuple(dict.fromkeys(names))


def build_fragment_registry(
    schema: GraphQLSchema,
    documents: Iterable[DocumentRecord],
    config: GeneratorConfig,
    *,
    naming: NamingConvention | None = None,
    generate_file_path: Callable[[str], str] | None = None,
) -> FragmentRegistry:
    """Build the registry of every fragment defined across ``documents``.

    Args:
        schema: Schema the fragments are validated against
        documents: Parsed documents, in generation order
        config: Generator configuration
        naming: Naming convention (defaults to one derived from config)
        generate_file_path: Maps a document location to its generated file
            path (defaults to an OutputPathBuilder derived from config)

    Returns:
        A read-only registry, ordered by first appearance

    Raises:
        UnknownFragmentTypeError: On the first fragment whose type condition
            is not defined in the schema
        DuplicateFragmentError: If fragments share a name but differ in body
    """
    if naming is None:
        naming = NamingConvention.from_config(config)
    if generate_file_path is None:
        generate_file_path = OutputPathBuilder.from_config(config)
    include_document_variable = config.includes_document_variables

    entries: dict[str, FragmentRegistryEntry] = {}
    duplicate_names: dict[str, None] = {}

    for record in documents:
        fragments = record.fragments
        if not fragments:
            continue
        file_path = generate_file_path(record.location)

        for fragment in fragments:
            name = fragment.name.value
            on_type = fragment.type_condition.name.value
            schema_type = schema.get_type(on_type)
            if schema_type is None:
                raise UnknownFragmentTypeError(name, on_type)

            existing = entries.get(name)
            if existing is not None:
                if not _same_definition(existing.definition, fragment):
                    duplicate_names[name] = None
                continue

            possible_types = [t.name for t in get_possible_types(schema, schema_type)]
            entries[name] = FragmentRegistryEntry(
                file_path=file_path,
                import_names=fragment_import_names(
                    name, possible_types, naming, include_document_variable
                ),
                on_type=on_type,
                definition=fragment,
            )

    if duplicate_names:
        raise DuplicateFragmentError(list(duplicate_names))

    return FragmentRegistry(entries)


def _same_definition(a: FragmentDefinitionNode, b: FragmentDefinitionNode) -> bool:
    """Compare fragments by their printed form, ignoring source locations."""
    return print_ast(a) == print_ast(b)
