"""Generator configuration.

Configuration is usually written the way GraphQL codegen configs are, with
camelCase keys, so every field also accepts its camelCase alias:

    {
        "documentMode": "graphQLTag",
        "plugins": [{"name": "python-operations", "emitsDocumentValue": true}],
        "fragmentVariableSuffix": "FragmentDoc"
    }
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigError


class DocumentMode(str, Enum):
    """How generated documents are represented at runtime."""
    GRAPHQL_TAG = "graphQLTag"
    DOCUMENT_NODE = "documentNode"
    DOCUMENT_NODE_IMPORT_FRAGMENTS = "documentNodeImportFragments"
    EXTERNAL = "external"
    STRING = "string"


# Modes where fragments are not exported as document variables
NODE_BASED_MODES = frozenset({
    DocumentMode.DOCUMENT_NODE,
    DocumentMode.DOCUMENT_NODE_IMPORT_FRAGMENTS,
    DocumentMode.EXTERNAL,
})


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class PluginDescriptor(_ConfigModel):
    """A plugin taking part in the generation run.

    ``emits_document_value`` declares that the plugin produces a runtime
    document variable (e.g. ``UserFieldsFragmentDoc``) for every fragment.
    """
    name: str
    emits_document_value: bool = False


class GeneratorConfig(_ConfigModel):
    """Settings that influence generated symbol names and output paths."""
    plugins: list[PluginDescriptor] = []
    document_mode: DocumentMode = DocumentMode.GRAPHQL_TAG

    # Naming
    types_prefix: str = ""
    types_suffix: str = ""
    dedupe_operation_suffix: bool = False
    omit_operation_suffix: bool = False
    fragment_variable_prefix: str = ""
    fragment_variable_suffix: str = "FragmentDoc"
    transform_underscore: bool = False

    # Output paths
    extension: str = "_generated.py"
    folder: str = ""
    base_types_path: str | None = None

    @property
    def emits_document_values(self) -> bool:
        """True if any declared plugin produces document variables."""
        return any(plugin.emits_document_value for plugin in self.plugins)

    @property
    def includes_document_variables(self) -> bool:
        """True if fragment document variables should be imported."""
        return self.emits_document_values and self.document_mode not in NODE_BASED_MODES

    @classmethod
    def from_file(cls, path: str | Path) -> "GeneratorConfig":
        """Load a JSON configuration file."""
        try:
            return cls.model_validate_json(Path(path).read_text())
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratorConfig":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
