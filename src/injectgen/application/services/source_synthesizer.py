"""Source synthesizer: composes the constructor extension module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectgen.application.codegen.source_builder import SourceBuilder
from injectgen.domain.model.configuration import GeneratorConfig
from injectgen.domain.model.synthesis import (
    ConstructorParameter,
    GeneratedSource,
    SynthesisResult,
)

if TYPE_CHECKING:
    from pathlib import Path

    from injectgen.domain.model.constructor_stub import ConstructorStub
    from injectgen.domain.model.member import QualifyingMember
    from injectgen.domain.model.type_declaration import TypeDeclaration

GENERATED_BANNER = "# <auto-generated> by injectgen. Do not edit."


class SourceSynthesizer:
    """Builds constructor source for one type.

    The extension re-opens the type under its own simple name (nested in
    shells for enclosing classes) inside a module for its namespace. No
    semantic validation: name clashes and unresolvable annotations surface
    when the generated module is compiled.

    Stateless - identical input yields byte-identical output.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config or GeneratorConfig()

    def build_result(
        self,
        declaration: TypeDeclaration,
        members: tuple[QualifyingMember, ...],
        stub: ConstructorStub | None,
    ) -> SynthesisResult:
        """Assemble parameters, assignments and merged body.

        Args:
            declaration: Type being extended
            members: Qualifying members in collection order (non-empty)
            stub: Matched partial constructor, None if there is none

        Returns:
            SynthesisResult

        Raises:
            ValueError: If members is empty, or the stub's receiver shares
                a name with an injected member (FAIL-FIRST)
        """
        if not members:
            raise ValueError(f"{declaration.qualified_name}: no members to inject")

        receiver = stub.receiver if stub is not None else "self"
        return SynthesisResult(
            qualified_name=declaration.qualified_name,
            parameters=tuple(
                ConstructorParameter(declared_type=member.declared_type, name=member.name)
                for member in members
            ),
            assignments=tuple(f"{receiver}.{member.name} = {member.name}" for member in members),
            trailing_body=stub.body_statements() if stub is not None else (),
            receiver=receiver,
        )

    def render(self, declaration: TypeDeclaration, result: SynthesisResult) -> str:
        """Render a synthesis result as module source text.

        Args:
            declaration: Type being extended
            result: Constructor to render

        Returns:
            Source text of the extension module
        """
        builder = SourceBuilder(self._config.indent_width)

        if self._config.emit_header:
            builder.line(GENERATED_BANNER)
            if declaration.namespace is not None:
                builder.line(f"# namespace: {declaration.namespace}")
        builder.line("from __future__ import annotations")
        builder.blank(2)

        self._render_shell(builder, declaration, result, declaration.containing_types)
        return builder.render()

    def synthesize(
        self,
        declaration: TypeDeclaration,
        members: tuple[QualifyingMember, ...],
        stub: ConstructorStub | None,
        declaring_file: Path | None = None,
    ) -> GeneratedSource:
        """Compose the generated source for one type.

        Args:
            declaration: Type being extended
            members: Qualifying members in collection order (non-empty)
            stub: Matched partial constructor, None if there is none
            declaring_file: File of the original declaration

        Returns:
            GeneratedSource with suggested file name and text
        """
        result = self.build_result(declaration, members, stub)
        return GeneratedSource(
            file_name=f"{declaration.nested_name}{self._config.file_suffix}",
            text=self.render(declaration, result),
            declaring_file=declaring_file,
        )

    def _render_shell(
        self,
        builder: SourceBuilder,
        declaration: TypeDeclaration,
        result: SynthesisResult,
        outer: tuple[str, ...],
    ) -> None:
        if outer:
            with builder.block(f"class {outer[0]}:"):
                self._render_shell(builder, declaration, result, outer[1:])
            return

        with builder.block(f"{declaration.kind.keyword} {declaration.name}:"):
            self._render_constructor(builder, result)

    def _render_constructor(self, builder: SourceBuilder, result: SynthesisResult) -> None:
        parameters = (str(parameter) for parameter in result.parameters)
        signature = ", ".join((result.receiver, *parameters))
        with builder.block(f"def __init__({signature}) -> None:"):
            builder.lines(result.assignments)
            builder.lines(result.trailing_body)
