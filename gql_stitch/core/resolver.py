"""Import / reference planner.

Turns the fragments an output file depends on into the metadata downstream
type emission needs and the import statements the file must contain.

Only directly spread fragments (depth 0) are imported. A fragment that is
reached through another fragment is exported alongside the type of the
fragment that spreads it, so importing it a second time would be redundant.
Changing this policy changes the correctness of generated code.
"""

from collections.abc import Callable, Iterable, Mapping

from graphql import GraphQLSchema, Node

from .config import GeneratorConfig
from .imports import ImportStatementGenerator
from .ir import (
    DocumentRecord,
    ExternalFragment,
    FragmentRegistry,
    FragmentRegistryEntry,
    ImportSource,
    ResolvedFragments,
)
from .naming import NamingConvention
from .registry import build_fragment_registry
from .usage import extract_external_fragments_in_use

ImportStatementFn = Callable[..., str]
UsageResolverFn = Callable[[Node, Mapping[str, FragmentRegistryEntry]], Mapping[str, int]]


class FragmentResolver:
    """Resolves external fragments and their imports for output files.

    One resolver serves every output file of a run; it only reads the
    registry and keeps no state between calls.
    """

    def __init__(
        self,
        registry: FragmentRegistry,
        generate_import_statement: ImportStatementFn | None = None,
        base_output_dir: str = "",
        usage_resolver: UsageResolverFn = extract_external_fragments_in_use,
    ):
        self.registry = registry
        self.generate_import_statement = generate_import_statement or ImportStatementGenerator()
        self.base_output_dir = base_output_dir
        self.usage_resolver = usage_resolver

    def resolve(self, generated_file_path: str, document: Node) -> ResolvedFragments:
        """Resolve the fragments used by ``document``.

        Args:
            generated_file_path: Path of the file generated for the document
            document: The document AST

        Returns:
            External fragments in discovery order and the import statements
        """
        depth_map = self.usage_resolver(document, self.registry)
        return self.plan(generated_file_path, depth_map)

    def plan(
        self, generated_file_path: str, depth_map: Mapping[str, int]
    ) -> ResolvedFragments:
        """Build fragment metadata and imports from a name -> depth mapping."""
        external_fragments: list[ExternalFragment] = []
        # fragment file -> ordered set of import names
        import_groups: dict[str, dict[str, None]] = {}

        for name, depth in depth_map.items():
            entry = self.registry.get(name)
            if entry is None:
                continue

            if depth == 0:
                group = import_groups.setdefault(entry.file_path, {})
                group.update(dict.fromkeys(entry.import_names))

            external_fragments.append(
                ExternalFragment(
                    name=name,
                    depth=depth,
                    on_type=entry.on_type,
                    definition=entry.definition,
                )
            )

        fragment_import_statements = [
            self.generate_import_statement(
                base_output_dir=self.base_output_dir,
                relative_output_path=generated_file_path,
                import_source=ImportSource(path=file_path, names=tuple(names)),
            )
            for file_path, names in import_groups.items()
        ]

        return ResolvedFragments(
            external_fragments=external_fragments,
            fragment_import_statements=fragment_import_statements,
        )


def build_fragment_resolver(
    schema: GraphQLSchema,
    documents: Iterable[DocumentRecord],
    config: GeneratorConfig,
    *,
    base_output_dir: str = "",
    naming: NamingConvention | None = None,
    generate_file_path: Callable[[str], str] | None = None,
    generate_import_statement: ImportStatementFn | None = None,
) -> FragmentResolver:
    """Build the registry for a run and return a resolver bound to it."""
    registry = build_fragment_registry(
        schema,
        documents,
        config,
        naming=naming,
        generate_file_path=generate_file_path,
    )
    return FragmentResolver(
        registry,
        generate_import_statement=generate_import_statement,
        base_output_dir=base_output_dir,
    )
