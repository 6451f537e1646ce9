"""Errors raised while building the fragment registry or loading inputs."""


class StitchError(Exception):
    """Base class for all gql-stitch errors."""


class SchemaError(StitchError):
    """Raised when the schema cannot satisfy a document or cannot be loaded."""


class UnknownFragmentTypeError(SchemaError):
    """Raised when a fragment is declared on a type the schema does not define."""

    def __init__(self, fragment_name: str, type_name: str):
        self.fragment_name = fragment_name
        self.type_name = type_name
        super().__init__(
            f'Fragment "{fragment_name}" is set on non-existing type "{type_name}"!'
        )


class IntrospectionError(SchemaError):
    """Raised when a remote schema cannot be introspected."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class DuplicateFragmentError(StitchError):
    """Raised when fragments share a name but differ in content.

    All conflicting names found during a scan are reported together.
    """

    def __init__(self, names: list[str]):
        self.names = tuple(names)
        super().__init__(
            f'Multiple fragments with the name(s) "{", ".join(self.names)}" were found.'
        )


class ConfigError(StitchError):
    """Raised when a generator configuration is malformed."""
