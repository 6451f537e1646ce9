"""Naming convention for generated fragment symbols.

Mirrors the default codegen convention: names are PascalCased, underscores
are kept as word separators unless ``transform_underscore`` is set, and type
symbols carry the configured types prefix/suffix.
"""

import re

from .config import GeneratorConfig

_WORD_BOUNDARIES = [
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
]
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """Split camelCase, PascalCase and separated text into words."""
    for pattern in _WORD_BOUNDARIES:
        text = pattern.sub(r"\1 \2", text)
    return [w for w in _SEPARATORS.split(text) if w]


def pascal_case(text: str, transform_underscore: bool = False) -> str:
    """Convert text to PascalCase.

    With ``transform_underscore`` False, underscore separated segments are
    converted one by one and joined back with underscores, so
    ``userFields_User_Fragment`` stays ``UserFields_User_Fragment``.
    """
    if not transform_underscore:
        return "_".join(pascal_case(part, True) for part in text.split("_"))
    return "".join(w[:1].upper() + w[1:].lower() for w in split_words(text))


class NamingConvention:
    """Computes generated symbol names for fragments."""

    def __init__(
        self,
        types_prefix: str = "",
        types_suffix: str = "",
        dedupe_operation_suffix: bool = False,
        omit_operation_suffix: bool = False,
        fragment_variable_prefix: str = "",
        fragment_variable_suffix: str = "FragmentDoc",
        transform_underscore: bool = False,
    ):
        self.types_prefix = types_prefix
        self.types_suffix = types_suffix
        self.dedupe_operation_suffix = dedupe_operation_suffix
        self.omit_operation_suffix = omit_operation_suffix
        self.fragment_variable_prefix = fragment_variable_prefix
        self.fragment_variable_suffix = fragment_variable_suffix
        self.transform_underscore = transform_underscore

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "NamingConvention":
        return cls(
            types_prefix=config.types_prefix,
            types_suffix=config.types_suffix,
            dedupe_operation_suffix=config.dedupe_operation_suffix,
            omit_operation_suffix=config.omit_operation_suffix,
            fragment_variable_prefix=config.fragment_variable_prefix,
            fragment_variable_suffix=config.fragment_variable_suffix,
            transform_underscore=config.transform_underscore,
        )

    def convert_name(
        self,
        name: str,
        *,
        prefix: str = "",
        suffix: str = "",
        use_types_prefix: bool = True,
        use_types_suffix: bool = True,
    ) -> str:
        """Apply the convention to ``prefix + name + suffix``.

        Args:
            name: The GraphQL name (fragment, operation or type)
            prefix: Text prepended before conversion
            suffix: Text appended before conversion
            use_types_prefix: Prepend the configured types prefix
            use_types_suffix: Append the configured types suffix

        Returns:
            The generated symbol name
        """
        converted = pascal_case(f"{prefix}{name}{suffix}", self.transform_underscore)
        if use_types_prefix:
            converted = self.types_prefix + converted
        if use_types_suffix:
            converted += self.types_suffix
        return converted

    def fragment_suffix(self, name: str) -> str:
        """Suffix for fragment type symbols, "Fragment" unless deduped or omitted."""
        if self.omit_operation_suffix:
            return ""
        if self.dedupe_operation_suffix and name.lower().endswith("fragment"):
            return ""
        return "Fragment"

    def fragment_variable_name(self, name: str) -> str:
        """Name of the runtime document variable generated for a fragment."""
        suffix = self.fragment_variable_suffix
        if self.omit_operation_suffix:
            suffix = ""
        elif (
            self.dedupe_operation_suffix
            and name.lower().endswith("fragment")
            and suffix.lower().startswith("fragment")
        ):
            suffix = suffix[len("fragment"):]
        return self.convert_name(
            name,
            prefix=self.fragment_variable_prefix,
            suffix=suffix,
            use_types_prefix=False,
            use_types_suffix=False,
        )

    def fragment_type_name(self, name: str, possible_type: str | None = None) -> str:
        """Name of the type generated for a fragment.

        When ``possible_type`` is given, the name is specialized for that
        concrete type (``UserFields_User_Fragment``).
        """
        fragment_suffix = self.fragment_suffix(name)
        if possible_type is None:
            return self.convert_name(name, suffix=fragment_suffix)
        return self.convert_name(name, suffix=f"_{possible_type}_{fragment_suffix}")
