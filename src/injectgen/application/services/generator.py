"""Constructor generator: runs the synthesis pipeline per type declaration.

Adapter output → MemberCollector → ConstructorMatcher → SourceSynthesizer.
Type declarations share no state, so multi-type runs may fan out across
worker threads. Cancellation is observed only between whole types.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from injectgen.application.services.constructor_matcher import ConstructorMatcher
from injectgen.application.services.marker_resolver import MarkerResolver
from injectgen.application.services.member_collector import MemberCollector
from injectgen.application.services.source_synthesizer import SourceSynthesizer
from injectgen.domain.exceptions.synthesis import (
    AmbiguousConstructorStubError,
    GenerationCancelledError,
)
from injectgen.domain.model.configuration import GeneratorConfig
from injectgen.domain.model.enums import StubPolicy
from injectgen.domain.model.report import GenerationReport

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterable
    from pathlib import Path

    from injectgen.domain.model.constructor_stub import ConstructorStub
    from injectgen.domain.model.source_unit import SourceUnit
    from injectgen.domain.model.synthesis import GeneratedSource
    from injectgen.domain.model.type_declaration import TypeDeclaration
    from injectgen.domain.ports.emission_sink import EmissionSinkPort
    from injectgen.domain.ports.symbol_resolver import SymbolResolverPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _WorkItem:
    declaration: TypeDeclaration
    resolver: SymbolResolverPort
    path: Path | None


@dataclass(frozen=True, slots=True)
class _Outcome:
    qualified_name: str
    source: GeneratedSource | None
    cancelled: bool = False


class ConstructorGenerator:
    """Synthesizes constructors for type declarations.

    Stateless between calls; safe to share across threads.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize generator.

        Args:
            config: Generator configuration. Uses defaults if None.
        """
        self._config = config or GeneratorConfig()
        marker_resolver = MarkerResolver()
        self._collector = MemberCollector(marker_resolver, self._config.inject_marker)
        self._matcher = ConstructorMatcher(
            marker_resolver, self._config.partial_constructor_marker
        )
        self._synthesizer = SourceSynthesizer(self._config)

    @property
    def config(self) -> GeneratorConfig:
        """Active configuration."""
        return self._config

    def generate(
        self,
        declaration: TypeDeclaration,
        resolver: SymbolResolverPort,
        declaring_file: Path | None = None,
    ) -> GeneratedSource | None:
        """Generate the constructor extension for one type.

        Args:
            declaration: Type declaration snapshot
            resolver: Symbol resolution context of the declaration
            declaring_file: File of the declaration, passed to the sink

        Returns:
            GeneratedSource, None if no member carries the inject marker

        Raises:
            AmbiguousConstructorStubError: Several stubs match and the
                policy is StubPolicy.ERROR
        """
        members = self._collector.collect(declaration, resolver)
        if not members:
            logger.debug("%s: no injected members, skipped", declaration.qualified_name)
            return None

        names = frozenset(member.name for member in members)
        stub = self._select_stub(
            declaration, self._matcher.matching_stubs(declaration, names, resolver)
        )

        source = self._synthesizer.synthesize(declaration, members, stub, declaring_file)
        logger.debug(
            "%s: constructor with %d parameter(s)%s → %s",
            declaration.qualified_name,
            len(members),
            f", merged '{stub.name}'" if stub is not None else "",
            source.file_name,
        )
        return source

    def generate_unit(self, unit: SourceUnit) -> tuple[GeneratedSource, ...]:
        """Generate extensions for every type of one source unit."""
        return self.generate_all((unit,)).generated

    def generate_all(
        self,
        units: Iterable[SourceUnit],
        cancel: threading.Event | None = None,
    ) -> GenerationReport:
        """Generate extensions for all types of all units.

        Results keep input order regardless of worker scheduling.

        Args:
            units: Parsed source units
            cancel: Set to stop between type declarations

        Returns:
            GenerationReport

        Raises:
            GenerationCancelledError: If cancel was set before all types ran
            AmbiguousConstructorStubError: See generate()
        """
        items = [
            _WorkItem(declaration, unit.resolver, unit.path)
            for unit in units
            for declaration in unit.declarations
        ]

        if self._config.max_workers is None or len(items) < 2:
            outcomes = [self._run(item, cancel) for item in items]
        else:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
                outcomes = list(executor.map(lambda item: self._run(item, cancel), items))

        completed = [outcome for outcome in outcomes if not outcome.cancelled]
        if len(completed) != len(outcomes):
            logger.info("Generation cancelled after %d of %d type(s)", len(completed), len(items))
            raise GenerationCancelledError(len(completed))

        report = GenerationReport(
            generated=tuple(o.source for o in completed if o.source is not None),
            skipped=tuple(o.qualified_name for o in completed if o.source is None),
        )
        logger.info(
            "Generated %d constructor(s) for %d type(s), %d skipped",
            report.generated_count,
            report.total,
            len(report.skipped),
        )
        return report

    def emit_all(
        self,
        units: Iterable[SourceUnit],
        sink: EmissionSinkPort,
        cancel: threading.Event | None = None,
    ) -> GenerationReport:
        """Generate and hand every source to the sink.

        Nothing is emitted when the run fails or is cancelled.
        """
        report = self.generate_all(units, cancel)
        for source in report.generated:
            sink.add_source(source)
        return report

    def _run(self, item: _WorkItem, cancel: threading.Event | None) -> _Outcome:
        if cancel is not None and cancel.is_set():
            return _Outcome(item.declaration.qualified_name, None, cancelled=True)
        source = self.generate(item.declaration, item.resolver, item.path)
        return _Outcome(item.declaration.qualified_name, source)

    def _select_stub(
        self,
        declaration: TypeDeclaration,
        matches: tuple[ConstructorStub, ...],
    ) -> ConstructorStub | None:
        if not matches:
            return None

        if len(matches) > 1:
            names = tuple(stub.name for stub in matches)
            if self._config.ambiguous_stub_policy is StubPolicy.ERROR:
                raise AmbiguousConstructorStubError(declaration.qualified_name, names)
            logger.debug(
                "%s: %d partial constructors match, using '%s', ignoring %s",
                declaration.qualified_name,
                len(matches),
                names[0],
                ", ".join(names[1:]),
            )

        return matches[0]
