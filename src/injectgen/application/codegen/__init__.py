"""Structured source composition."""

from injectgen.application.codegen.source_builder import SourceBuilder

__all__ = ["SourceBuilder"]
