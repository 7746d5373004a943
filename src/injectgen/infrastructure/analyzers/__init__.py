"""AST analyzers building the declaration model."""

from injectgen.infrastructure.analyzers.annotation_analyzer import AnnotationAnalyzer
from injectgen.infrastructure.analyzers.class_analyzer import ClassAnalyzer, is_candidate
from injectgen.infrastructure.analyzers.constructor_analyzer import ConstructorStubAnalyzer
from injectgen.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from injectgen.infrastructure.analyzers.marker_analyzer import MarkerAnalyzer
from injectgen.infrastructure.analyzers.member_analyzer import MemberAnalyzer

__all__ = [
    "AnnotationAnalyzer",
    "ClassAnalyzer",
    "ConstructorStubAnalyzer",
    "ImportAnalyzer",
    "MarkerAnalyzer",
    "MemberAnalyzer",
    "is_candidate",
]
