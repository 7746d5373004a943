"""Public API: generate constructor extensions from Python source.

Thin composition of the AST declaration source, the generator pipeline
and an emission sink.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from injectgen.application.services.generator import ConstructorGenerator
from injectgen.domain.model.configuration import GeneratorConfig
from injectgen.infrastructure.adapters.ast_source import ASTDeclarationSource
from injectgen.infrastructure.adapters.sinks import DirectorySink

if TYPE_CHECKING:
    import threading

    from injectgen.domain.model.report import GenerationReport
    from injectgen.domain.model.synthesis import GeneratedSource
    from injectgen.domain.ports.emission_sink import EmissionSinkPort


def generate_source(
    source: str,
    module_name: str,
    config: GeneratorConfig | None = None,
) -> tuple[GeneratedSource, ...]:
    """Generate extensions for the classes in a module's source text.

    Args:
        source: Python source
        module_name: Fully qualified name of the module
        config: Generator configuration. Uses defaults if None.

    Returns:
        One GeneratedSource per class with injected members

    Raises:
        ParsingError: On syntax errors
    """
    config = config or GeneratorConfig()
    unit = ASTDeclarationSource(config=config).parse_source(source, module_name)
    return ConstructorGenerator(config).generate_unit(unit)


def generate_file(
    path: Path,
    root_path: Path | None = None,
    config: GeneratorConfig | None = None,
) -> tuple[GeneratedSource, ...]:
    """Generate extensions for the classes of one file.

    Args:
        path: Python file
        root_path: Import root for the module name. None = file's directory.
        config: Generator configuration. Uses defaults if None.

    Raises:
        ParsingError: If the file cannot be read or parsed
    """
    config = config or GeneratorConfig()
    unit = ASTDeclarationSource(root_path, config).parse_file(path)
    return ConstructorGenerator(config).generate_unit(unit)


def generate_directory(
    path: Path,
    sink: EmissionSinkPort | None = None,
    config: GeneratorConfig | None = None,
    cancel: threading.Event | None = None,
) -> GenerationReport:
    """Generate and emit extensions for every class under a directory.

    Args:
        path: Import root to scan
        sink: Destination. None = write beside each declaring file.
        config: Generator configuration. Uses defaults if None.
        cancel: Set to stop between type declarations

    Returns:
        GenerationReport

    Raises:
        ParsingError: If any file cannot be parsed
        GenerationCancelledError: If cancel was set during the run
        EmissionError: If a generated file cannot be written
    """
    config = config or GeneratorConfig()
    units = ASTDeclarationSource(Path(path), config).parse_directory(Path(path))
    return ConstructorGenerator(config).emit_all(units, sink or DirectorySink(), cancel)
