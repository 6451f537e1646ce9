"""Core modules for fragment import stitching."""

from .config import DocumentMode, GeneratorConfig, PluginDescriptor
from .errors import (
    ConfigError,
    DuplicateFragmentError,
    IntrospectionError,
    SchemaError,
    StitchError,
    UnknownFragmentTypeError,
)
from .imports import ImportStatementGenerator, OutputPathBuilder, schema_import_statement
from .introspection import fetch_schema
from .ir import (
    DocumentRecord,
    ExternalFragment,
    FragmentRegistry,
    FragmentRegistryEntry,
    ImportSource,
    OutputFile,
    ResolvedFragments,
)
from .naming import NamingConvention, pascal_case
from .parser import DocumentParser, parse_document
from .preset import NearOperationFilePreset
from .registry import build_fragment_registry, fragment_import_names
from .resolver import FragmentResolver, build_fragment_resolver
from .schema import get_possible_types, load_schema
from .usage import extract_external_fragments_in_use
from .writer import PreambleWriter

__all__ = [
    # Config
    "DocumentMode",
    "GeneratorConfig",
    "PluginDescriptor",
    # Errors
    "ConfigError",
    "DuplicateFragmentError",
    "IntrospectionError",
    "SchemaError",
    "StitchError",
    "UnknownFragmentTypeError",
    # IR types
    "DocumentRecord",
    "ExternalFragment",
    "FragmentRegistry",
    "FragmentRegistryEntry",
    "ImportSource",
    "OutputFile",
    "ResolvedFragments",
    # Loading
    "DocumentParser",
    "parse_document",
    "fetch_schema",
    "get_possible_types",
    "load_schema",
    # Naming and paths
    "NamingConvention",
    "pascal_case",
    "ImportStatementGenerator",
    "OutputPathBuilder",
    "schema_import_statement",
    # Registry and resolution
    "build_fragment_registry",
    "fragment_import_names",
    "extract_external_fragments_in_use",
    "FragmentResolver",
    "build_fragment_resolver",
    # Preset and output
    "NearOperationFilePreset",
    "PreambleWriter",
]
