"""Tests for output paths and import statements."""

import ast

import pytest

from gql_stitch.core.config import GeneratorConfig
from gql_stitch.core.imports import (
    ImportStatementGenerator,
    OutputPathBuilder,
    module_safe,
    relative_module,
    render_import,
    schema_import_statement,
)
from gql_stitch.core.ir import ImportSource
from gql_stitch.core.parser import parse_document
from gql_stitch.core.preset import NearOperationFilePreset


class TestOutputPathBuilder:
    """Tests for generated file paths."""

    def test_next_to_document(self):
        build = OutputPathBuilder()
        assert build("queries/user.graphql") == "queries/user_generated.py"
        assert build("A.graphql") == "A_generated.py"

    def test_folder(self):
        build = OutputPathBuilder(folder="__generated__")
        assert build("queries/user.graphql") == "queries/__generated__/user_generated.py"

    def test_module_safe_stem(self):
        build = OutputPathBuilder()
        assert build("my-doc.query.graphql") == "my_doc_query_generated.py"
        assert module_safe("a-b.c d") == "a_b_c_d"

    def test_module_safe_directories(self):
        build = OutputPathBuilder(folder="__generated__")
        assert build("shared-frags/v1.2/user.graphql") == (
            "shared_frags/v1_2/__generated__/user_generated.py"
        )
        assert build("../common/user.graphql") == "../common/__generated__/user_generated.py"

    def test_from_config(self):
        build = OutputPathBuilder.from_config(GeneratorConfig(extension=".gen.py", folder="gen"))
        assert build.generate_file_path("user.gql") == "gen/user.gen.py"


class TestRelativeModule:
    """Tests for relative module computation."""

    @pytest.mark.parametrize(
        "from_file,to_file,expected",
        [
            ("b_generated.py", "a_generated.py", ".a_generated"),
            ("queries/q.py", "queries/f.py", ".f"),
            ("a/b/x.py", "a/c/y.py", "..c.y"),
            ("a/b/x.py", "y.py", "...y"),
            ("x.py", "fragments/f.py", ".fragments.f"),
            ("q.py", "shared-frags/user_generated.py", ".shared_frags.user_generated"),
            ("app/q.py", "lib-v2/f.py", "..lib_v2.f"),
        ],
    )
    def test_relative_module(self, from_file, to_file, expected):
        assert relative_module(from_file, to_file) == expected


class TestImportStatements:
    """Tests for rendered import statements."""

    def test_render_import(self):
        assert render_import(".a", ["X", "Y"]) == "from .a import X, Y"

    def test_generator(self):
        generator = ImportStatementGenerator()
        statement = generator(
            base_output_dir="src",
            relative_output_path="queries/get_user_generated.py",
            import_source=ImportSource(
                path="fragments/user_generated.py",
                names=("UserFieldsFragmentDoc", "UserFieldsFragment"),
            ),
        )
        assert statement == (
            "from ..fragments.user_generated import UserFieldsFragmentDoc, UserFieldsFragment"
        )

    def test_schema_import_relative(self):
        statement = schema_import_statement("", "queries/user_generated.py", "types.py")
        assert statement == "from ..types import *"

    def test_schema_import_module(self):
        statement = schema_import_statement("", "queries/user_generated.py", "myapp.types")
        assert statement == "from myapp.types import *"

    def test_dashed_directory_is_importable(self, schema):
        documents = [
            parse_document("fragment F on User { id }", "shared-frags/user.graphql"),
            parse_document("query Q { user { ...F } }", "q.graphql"),
        ]
        preset = NearOperationFilePreset(schema, documents)
        fragment_file, query_file = preset.build_output_files()

        assert fragment_file.filename == "shared_frags/user_generated.py"
        assert query_file.fragment_import_statements == [
            "from .shared_frags.user_generated import FFragment"
        ]
        ast.parse("\n".join(query_file.fragment_import_statements))
