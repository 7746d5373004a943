"""Pipeline services."""

from injectgen.application.services.constructor_matcher import ConstructorMatcher
from injectgen.application.services.generator import ConstructorGenerator
from injectgen.application.services.marker_resolver import MarkerResolver
from injectgen.application.services.member_collector import MemberCollector
from injectgen.application.services.source_synthesizer import SourceSynthesizer

__all__ = [
    "ConstructorGenerator",
    "ConstructorMatcher",
    "MarkerResolver",
    "MemberCollector",
    "SourceSynthesizer",
]
