"""injectgen - constructor synthesis for annotated Python classes."""

__version__ = "0.1.0"

from injectgen.application.services.generator import ConstructorGenerator
from injectgen.domain.model.configuration import GeneratorConfig
from injectgen.domain.model.enums import StubPolicy
from injectgen.markers import Inject, partial_constructor
from injectgen.presentation.api import generate_directory, generate_file, generate_source

__all__ = [
    "ConstructorGenerator",
    "GeneratorConfig",
    "Inject",
    "StubPolicy",
    "__version__",
    "generate_directory",
    "generate_file",
    "generate_source",
    "partial_constructor",
]
