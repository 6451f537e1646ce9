"""Cross-file fragment import stitching for GraphQL code generation."""

__version__ = "0.1.0"
