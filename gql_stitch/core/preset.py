"""Near-operation-file preset.

Plans one generated file next to every source document that defines
operations or fragments, resolving the fragments each file borrows from
the others.
"""

from graphql import GraphQLSchema

from .config import GeneratorConfig
from .imports import ImportStatementGenerator, OutputPathBuilder, schema_import_statement
from .ir import DocumentRecord, OutputFile
from .naming import NamingConvention
from .registry import build_fragment_registry
from .resolver import FragmentResolver


class NearOperationFilePreset:
    """Plans generated files for a set of documents.

    Example:
        preset = NearOperationFilePreset(schema, documents, config, "src/")
        for output in preset.build_output_files():
            print(output.filename, output.fragment_import_statements)
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        documents: list[DocumentRecord],
        config: GeneratorConfig | None = None,
        base_output_dir: str = "",
    ):
        self.schema = schema
        self.documents = documents
        self.config = config or GeneratorConfig()
        self.base_output_dir = base_output_dir

        self.naming = NamingConvention.from_config(self.config)
        self.generate_file_path = OutputPathBuilder.from_config(self.config)
        self.registry = build_fragment_registry(
            schema,
            documents,
            self.config,
            naming=self.naming,
            generate_file_path=self.generate_file_path,
        )
        self.resolver = FragmentResolver(
            self.registry,
            generate_import_statement=ImportStatementGenerator(),
            base_output_dir=base_output_dir,
        )

    def build_output_files(self) -> list[OutputFile]:
        """Plan every output file, in document order."""
        outputs = []
        for record in self.documents:
            if not (record.has_operations or record.fragments):
                continue
            outputs.append(self.build_output_file(record))
        return outputs

    def build_output_file(self, record: DocumentRecord) -> OutputFile:
        filename = self.generate_file_path(record.location)
        resolved = self.resolver.resolve(filename, record.document)

        schema_import = None
        if self.config.base_types_path:
            schema_import = schema_import_statement(
                self.base_output_dir, filename, self.config.base_types_path
            )

        return OutputFile(
            filename=filename,
            source=record,
            external_fragments=resolved.external_fragments,
            fragment_import_statements=resolved.fragment_import_statements,
            schema_import_statement=schema_import,
        )
