"""Domain model: declarations, markers and synthesis results."""

from injectgen.domain.model.configuration import DEFAULT_MARKER_ALIASES, GeneratorConfig
from injectgen.domain.model.constructor_stub import ConstructorStub
from injectgen.domain.model.enums import MemberKind, StubPolicy, TypeKind, Visibility
from injectgen.domain.model.import_ import Import
from injectgen.domain.model.location import Location
from injectgen.domain.model.marker import (
    INJECT_MARKER,
    PARTIAL_CONSTRUCTOR_MARKER,
    MarkerOccurrence,
)
from injectgen.domain.model.member import Member, QualifyingMember
from injectgen.domain.model.report import GenerationReport
from injectgen.domain.model.source_unit import SourceUnit
from injectgen.domain.model.symbol_table import SymbolTable
from injectgen.domain.model.synthesis import (
    ConstructorParameter,
    GeneratedSource,
    SynthesisResult,
)
from injectgen.domain.model.type_declaration import TypeDeclaration

__all__ = [
    "ConstructorParameter",
    "ConstructorStub",
    "DEFAULT_MARKER_ALIASES",
    "GeneratedSource",
    "GenerationReport",
    "GeneratorConfig",
    "INJECT_MARKER",
    "Import",
    "Location",
    "MarkerOccurrence",
    "Member",
    "MemberKind",
    "PARTIAL_CONSTRUCTOR_MARKER",
    "QualifyingMember",
    "SourceUnit",
    "StubPolicy",
    "SymbolTable",
    "SynthesisResult",
    "TypeDeclaration",
    "TypeKind",
    "Visibility",
]
