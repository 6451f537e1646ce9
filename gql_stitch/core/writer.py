"""Writes the import preamble of planned output files.

Renders Jinja2 templates to produce a Python module per output file holding
its fragment imports and a table of the external fragments it uses.

Supports custom templates via the template_dir parameter:
    writer = PreambleWriter(output_dir, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import ast
import os
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from .ir import OutputFile


class PreambleWriter:
    """Renders and writes preamble modules for planned output files.

    Available templates to override:
        - preamble.py.j2 - the module written per output file
        - import_statement.py.j2 - a single import statement
    """

    TEMPLATE_NAME = "preamble.py.j2"

    def __init__(self, output_dir: str, template_dir: str | None = None):
        """Initialize the writer.

        Args:
            output_dir: Directory where generated files will be written
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.output_dir = output_dir
        self.template_dir = template_dir

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_stitch", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["repr"] = repr

    def render(self, output: OutputFile) -> str:
        """Render the preamble module for one output file."""
        template = self.env.get_template(self.TEMPLATE_NAME)
        content = template.render(
            source=output.source.location,
            import_statements=output.import_statements,
            external_fragments=output.external_fragments,
        )

        # Validate Python syntax
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise ValueError(
                f"Generated invalid Python for {output.filename}: {e}\n"
                f"Template: {self.TEMPLATE_NAME}"
            ) from e
        return content

    def write(self, output: OutputFile) -> str:
        """Render and write one output file. Returns the written path."""
        content = self.render(output)
        full_path = os.path.join(self.output_dir, output.filename)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w") as f:
            f.write(content)
        return full_path

    def write_all(self, outputs: list[OutputFile]) -> list[str]:
        return [self.write(output) for output in outputs]
