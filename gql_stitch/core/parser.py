"""GraphQL document parser using graphql-core.

Parses operation/fragment documents (.graphql, .gql) into DocumentRecords.
"""

import os
from pathlib import Path

from graphql import parse

from .ir import DocumentRecord

DOCUMENT_EXTENSIONS = (".graphql", ".gql")


class DocumentParser:
    """Parses GraphQL document files into DocumentRecords.

    Locations are POSIX paths relative to the parsed root, so that output
    paths derived from them stay relative as well.
    """

    def __init__(self, documents_path: str):
        """Initialize a parser with a path to a document file or directory."""
        self.documents_path = documents_path

    def parse_all(self) -> list[DocumentRecord]:
        """Parse all document files, in sorted path order."""
        records = []
        for file_path in self._collect_document_files():
            with open(file_path) as f:
                content = f.read()
            try:
                ast = parse(content)
            except Exception as e:
                print(f"Error parsing {file_path}: {e}")
                raise
            records.append(DocumentRecord(document=ast, location=self._location(file_path)))
        return records

    def _collect_document_files(self) -> list[str]:
        """Collect all document files from path."""
        files = []
        if os.path.isfile(self.documents_path):
            if self.documents_path.endswith(DOCUMENT_EXTENSIONS):
                files.append(self.documents_path)
        else:
            for root, _, filenames in os.walk(self.documents_path):
                for filename in filenames:
                    if filename.endswith(DOCUMENT_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _location(self, file_path: str) -> str:
        if os.path.isfile(self.documents_path):
            return Path(file_path).name
        return Path(os.path.relpath(file_path, self.documents_path)).as_posix()


def parse_document(source: str, location: str) -> DocumentRecord:
    """Parse an in-memory document."""
    return DocumentRecord(document=parse(source), location=location)
