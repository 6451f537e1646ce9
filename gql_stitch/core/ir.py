"""Intermediate Representation (IR) for fragment stitching.

This module defines dataclasses describing registered fragments and the
per-output-file results of resolving them. Every container is insertion
ordered so that generated output is reproducible.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
)


@dataclass(frozen=True)
class DocumentRecord:
    """A parsed source document and where it was loaded from."""
    document: DocumentNode
    location: str

    @property
    def fragments(self) -> list[FragmentDefinitionNode]:
        """Fragment definitions of the document, in definition order."""
        return [
            d for d in self.document.definitions
            if isinstance(d, FragmentDefinitionNode)
        ]

    @property
    def has_operations(self) -> bool:
        return any(
            isinstance(d, OperationDefinitionNode) for d in self.document.definitions
        )


@dataclass(frozen=True)
class FragmentRegistryEntry:
    """Everything known about one fragment name within a generation run."""
    file_path: str  # Generated file exporting the fragment's artifacts
    import_names: tuple[str, ...]
    on_type: str
    definition: FragmentDefinitionNode


class FragmentRegistry(Mapping[str, FragmentRegistryEntry]):
    """Read-only, insertion-ordered mapping of fragment name to entry.

    Instances are produced by ``build_fragment_registry`` once a scan has
    completed successfully and are never modified afterwards.
    """

    def __init__(self, entries: Mapping[str, FragmentRegistryEntry] | None = None):
        self._entries: dict[str, FragmentRegistryEntry] = dict(entries or {})

    def __getitem__(self, name: str) -> FragmentRegistryEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FragmentRegistry({list(self._entries)!r})"


@dataclass(frozen=True)
class ExternalFragment:
    """A fragment an output file uses but does not define.

    ``depth`` is 0 when the output document spreads the fragment directly and
    counts spread hops otherwise.
    """
    name: str
    depth: int
    on_type: str
    definition: FragmentDefinitionNode
    is_external: bool = True


@dataclass(frozen=True)
class ImportSource:
    """A generated file and the symbols to import from it."""
    path: str
    names: tuple[str, ...]


@dataclass
class ResolvedFragments:
    """Fragment metadata and import statements for one output file."""
    external_fragments: list[ExternalFragment] = field(default_factory=list)
    fragment_import_statements: list[str] = field(default_factory=list)


@dataclass
class OutputFile:
    """One generated file planned by the preset."""
    filename: str
    source: DocumentRecord
    external_fragments: list[ExternalFragment] = field(default_factory=list)
    fragment_import_statements: list[str] = field(default_factory=list)
    schema_import_statement: str | None = None

    @property
    def import_statements(self) -> list[str]:
        """Schema import (if any) followed by fragment imports."""
        statements = []
        if self.schema_import_statement:
            statements.append(self.schema_import_statement)
        statements.extend(self.fragment_import_statements)
        return statements
