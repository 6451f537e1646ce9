"""Output path derivation and import statement rendering.

Generated files live next to their source documents (optionally in a
sub folder), so a document at ``queries/user.graphql`` produces
``queries/user_generated.py``. Imports between generated files are emitted
as relative Python imports.
"""

import posixpath
from pathlib import PurePosixPath

from jinja2 import Environment, PackageLoader

from .config import GeneratorConfig
from .ir import ImportSource

_env = Environment(
    loader=PackageLoader("gql_stitch", "templates"),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def module_safe(name: str) -> str:
    """Make a file stem usable as a Python module name."""
    return name.replace(".", "_").replace("-", "_").replace(" ", "_")


def _module_safe_parts(parts) -> list[str]:
    return [part if part in (".", "..", "/") else module_safe(part) for part in parts]


class OutputPathBuilder:
    """Maps a document location to the path of its generated file."""

    def __init__(self, extension: str = "_generated.py", folder: str = ""):
        self.extension = extension
        self.folder = folder

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "OutputPathBuilder":
        return cls(extension=config.extension, folder=config.folder)

    def __call__(self, location: str) -> str:
        return self.generate_file_path(location)

    def generate_file_path(self, location: str) -> str:
        source = PurePosixPath(location)
        # Strip the document extension only (.graphql/.gql)
        stem = module_safe(source.stem if source.suffix else source.name)
        directory = source.parent
        if self.folder:
            directory = directory / self.folder
        # Directories become packages of the relative imports
        directory = PurePosixPath(*_module_safe_parts(directory.parts))
        return posixpath.normpath(str(directory / f"{stem}{self.extension}"))


def relative_module(from_file: str, to_file: str) -> str:
    """Relative module path importing ``to_file`` from ``from_file``.

    Example:
        relative_module("a/b/x.py", "a/c/y.py")  # "..c.y"
    """
    from_dir = posixpath.dirname(posixpath.normpath(from_file)) or "."
    relative = posixpath.relpath(posixpath.normpath(to_file), from_dir)
    parts = list(PurePosixPath(relative).parts)

    levels = 1
    while parts and parts[0] == "..":
        levels += 1
        parts.pop(0)

    if parts and parts[-1].endswith(".py"):
        parts[-1] = parts[-1][: -len(".py")]
    return "." * levels + ".".join(_module_safe_parts(parts))


def render_import(module: str, names: list[str] | tuple[str, ...]) -> str:
    """Render a ``from module import names`` statement."""
    template = _env.get_template("import_statement.py.j2")
    return template.render(module=module, names=list(names)).strip()


class ImportStatementGenerator:
    """Renders import statements between generated files."""

    def __call__(
        self,
        *,
        base_output_dir: str,
        relative_output_path: str,
        import_source: ImportSource,
    ) -> str:
        return self.generate(
            base_output_dir=base_output_dir,
            relative_output_path=relative_output_path,
            import_source=import_source,
        )

    def generate(
        self,
        *,
        base_output_dir: str,
        relative_output_path: str,
        import_source: ImportSource,
    ) -> str:
        """Render the import of ``import_source.names`` into an output file.

        Args:
            base_output_dir: Directory generated paths are relative to
            relative_output_path: The importing file
            import_source: The exporting file and the names to import

        Returns:
            The statement text, e.g. ``from .user_generated import UserFieldsFragment``
        """
        from_file = posixpath.join(base_output_dir, relative_output_path)
        to_file = posixpath.join(base_output_dir, import_source.path)
        return render_import(relative_module(from_file, to_file), import_source.names)


def schema_import_statement(
    base_output_dir: str, relative_output_path: str, base_types_path: str
) -> str:
    """Import of the schema base types module.

    ``base_types_path`` is either a file inside the output tree
    (``types.py``), imported relatively, or a dotted module path
    (``myapp.graphql.types``), imported absolutely.
    """
    if base_types_path.endswith(".py") or "/" in base_types_path:
        from_file = posixpath.join(base_output_dir, relative_output_path)
        to_file = posixpath.join(base_output_dir, base_types_path)
        module = relative_module(from_file, to_file)
    else:
        module = base_types_path
    return render_import(module, ["*"])
