"""Domain exceptions."""

from injectgen.domain.exceptions.base import InjectGenError
from injectgen.domain.exceptions.parsing import ParsingError
from injectgen.domain.exceptions.synthesis import (
    AmbiguousConstructorStubError,
    EmissionError,
    GenerationCancelledError,
)

__all__ = [
    "InjectGenError",
    "ParsingError",
    "AmbiguousConstructorStubError",
    "EmissionError",
    "GenerationCancelledError",
]
