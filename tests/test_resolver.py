"""Tests for the import / reference planner."""

import pytest
from graphql import parse

from gql_stitch.core.config import GeneratorConfig
from gql_stitch.core.ir import FragmentRegistry, FragmentRegistryEntry, ImportSource
from gql_stitch.core.parser import parse_document
from gql_stitch.core.resolver import FragmentResolver, build_fragment_resolver


def fragment_node(source: str):
    return parse(source).definitions[0]


def entry(file_path, import_names, on_type="User", name="F"):
    return FragmentRegistryEntry(
        file_path=file_path,
        import_names=tuple(import_names),
        on_type=on_type,
        definition=fragment_node(f"fragment {name} on {on_type} {{ id }}"),
    )


class RecordingImportGenerator:
    """Import statement generator that records its calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, *, base_output_dir, relative_output_path, import_source):
        self.calls.append((base_output_dir, relative_output_path, import_source))
        return f"{import_source.path}: {', '.join(import_source.names)}"


@pytest.fixture
def registry():
    return FragmentRegistry({
        "A": entry("shared.py", ["ADoc", "AFragment", "Common"], name="A"),
        "B": entry("shared.py", ["Common", "BFragment"], name="B"),
        "C": entry("other.py", ["CFragment"], on_type="Org", name="C"),
        "D": entry("deep.py", ["DFragment"], name="D"),
    })


@pytest.fixture
def generator():
    return RecordingImportGenerator()


class TestPlan:
    """Tests for FragmentResolver.plan."""

    def test_groups_by_file_and_dedupes(self, registry, generator):
        resolver = FragmentResolver(registry, generator, base_output_dir="out")
        result = resolver.plan("query_generated.py", {"A": 0, "C": 0, "B": 0})

        assert result.fragment_import_statements == [
            "shared.py: ADoc, AFragment, Common, BFragment",
            "other.py: CFragment",
        ]
        assert generator.calls[0] == (
            "out",
            "query_generated.py",
            ImportSource(path="shared.py", names=("ADoc", "AFragment", "Common", "BFragment")),
        )

    def test_external_fragments_in_depth_map_order(self, registry, generator):
        resolver = FragmentResolver(registry, generator)
        result = resolver.plan("q.py", {"C": 0, "A": 0, "D": 1})

        assert [(f.name, f.depth, f.on_type) for f in result.external_fragments] == [
            ("C", 0, "Org"),
            ("A", 0, "User"),
            ("D", 1, "User"),
        ]
        assert all(f.is_external for f in result.external_fragments)
        assert result.external_fragments[0].definition is registry["C"].definition

    def test_transitive_fragments_not_imported(self, registry, generator):
        resolver = FragmentResolver(registry, generator)
        result = resolver.plan("q.py", {"A": 0, "D": 1})

        assert [f.name for f in result.external_fragments] == ["A", "D"]
        assert result.fragment_import_statements == ["shared.py: ADoc, AFragment, Common"]
        assert all(call[2].path != "deep.py" for call in generator.calls)

    def test_only_transitive(self, registry, generator):
        resolver = FragmentResolver(registry, generator)
        result = resolver.plan("q.py", {"D": 2})

        assert [f.name for f in result.external_fragments] == ["D"]
        assert result.fragment_import_statements == []
        assert generator.calls == []

    def test_unregistered_names_skipped(self, registry, generator):
        resolver = FragmentResolver(registry, generator)
        result = resolver.plan("q.py", {"Unknown": 0, "C": 0})

        assert [f.name for f in result.external_fragments] == ["C"]
        assert result.fragment_import_statements == ["other.py: CFragment"]

    def test_fresh_results_per_call(self, registry, generator):
        resolver = FragmentResolver(registry, generator)
        first = resolver.plan("a.py", {"A": 0})
        second = resolver.plan("b.py", {"C": 0})

        assert [f.name for f in first.external_fragments] == ["A"]
        assert [f.name for f in second.external_fragments] == ["C"]
        assert first.fragment_import_statements != second.fragment_import_statements


class TestResolve:
    """Tests for resolving documents end to end."""

    def test_default_usage_resolver(self, schema):
        documents = [
            parse_document("fragment Inner on User { name }", "inner.graphql"),
            parse_document("fragment Outer on User { id ...Inner }", "outer.graphql"),
            parse_document("query Q { user { ...Outer } }", "q.graphql"),
        ]
        resolver = build_fragment_resolver(schema, documents, GeneratorConfig())
        result = resolver.resolve("q_generated.py", documents[2].document)

        assert [(f.name, f.depth) for f in result.external_fragments] == [
            ("Outer", 0),
            ("Inner", 1),
        ]
        assert result.fragment_import_statements == [
            "from .outer_generated import OuterFragment"
        ]

    def test_custom_usage_resolver(self, registry, generator):
        resolver = FragmentResolver(
            registry, generator, usage_resolver=lambda document, reg: {"B": 0}
        )
        result = resolver.resolve("q.py", parse("{ __typename }"))
        assert result.fragment_import_statements == ["shared.py: Common, BFragment"]
