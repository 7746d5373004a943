"""End-to-end: Python source → generated constructor modules that run."""

import ast
from pathlib import Path
from typing import Any

import pytest

from injectgen import GeneratorConfig, StubPolicy, generate_directory, generate_source
from injectgen.application.reporters.console import ConsoleConfig, ConsoleReporter
from injectgen.domain.exceptions.synthesis import AmbiguousConstructorStubError
from injectgen.domain.model.synthesis import GeneratedSource
from injectgen.infrastructure.adapters.sinks import InMemorySink

APP = '''\
"""Application services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from injectgen import markers
from injectgen.markers import Inject, partial_constructor

if TYPE_CHECKING:
    from app.clock import Clock


class Widget:
    name: Annotated[str, Inject()]


class Service:
    a: Annotated[int, Inject()]
    b: Annotated[str, markers.Inject]
    untouched: int = 0

    @partial_constructor
    def _init(self, a):
        """Record the first argument."""
        log(a)


class Excluded:
    a: Annotated[int, Inject()]
    b: Annotated[str, Inject()]

    @partial_constructor
    def _init(self, c):
        log(c)


class Clocked:
    @property
    def clock(self) -> Annotated[Clock, Inject()]:
        return self._clock

    retries: "Annotated[int, Inject()]"

    _start = partial_constructor(lambda self, clock: log(clock))


@dataclass
class Settings:
    debug: Annotated[bool, Inject()]


class Outer:
    class Inner:
        value: Annotated[float, Inject()]


class Plain:
    x: list[int]
'''


def run(source: GeneratedSource, name: str, *args: Any) -> tuple[Any, list[Any]]:
    """Execute generated module, construct `name`, return instance and log calls."""
    calls: list[Any] = []
    namespace: dict[str, Any] = {"log": calls.append}
    exec(compile(source.text, source.file_name, "exec"), namespace)
    cls = namespace
    for part in name.split("."):
        cls = cls[part] if isinstance(cls, dict) else getattr(cls, part)
    return cls(*args), calls


@pytest.fixture(scope="module")
def sources() -> dict[str, GeneratedSource]:
    return {source.file_name: source for source in generate_source(APP, "app.services")}


class TestGeneratedModules:
    """Generated text for every candidate class."""

    def test_one_file_per_qualifying_class(self, sources: dict[str, GeneratedSource]) -> None:
        assert list(sources) == [
            "Widget.g.py",
            "Service.g.py",
            "Excluded.g.py",
            "Clocked.g.py",
            "Settings.g.py",
            "Outer.Inner.g.py",
        ]

    def test_all_valid_python(self, sources: dict[str, GeneratedSource]) -> None:
        for source in sources.values():
            ast.parse(source.text)

    def test_namespace_header(self, sources: dict[str, GeneratedSource]) -> None:
        assert all("# namespace: app.services\n" in s.text for s in sources.values())


class TestConstructorBehaviour:
    """Generated constructors assign members and run merged stubs."""

    def test_widget(self, sources: dict[str, GeneratedSource]) -> None:
        widget, _ = run(sources["Widget.g.py"], "Widget", "x")
        assert widget.name == "x"

    def test_service_runs_stub_after_assignments(
        self, sources: dict[str, GeneratedSource]
    ) -> None:
        service, calls = run(sources["Service.g.py"], "Service", 1, "two")
        assert (service.a, service.b) == (1, "two")
        assert calls == [1]
        assert "untouched" not in sources["Service.g.py"].text

    def test_stub_with_unknown_parameter_is_left_out(
        self, sources: dict[str, GeneratedSource]
    ) -> None:
        excluded, calls = run(sources["Excluded.g.py"], "Excluded", 1, "two")
        assert (excluded.a, excluded.b) == (1, "two")
        assert calls == []

    def test_property_and_string_annotation_in_source_order(
        self, sources: dict[str, GeneratedSource]
    ) -> None:
        text = sources["Clocked.g.py"].text
        assert "def __init__(self, clock: Clock, retries: int) -> None:" in text
        clocked, calls = run(sources["Clocked.g.py"], "Clocked", "tick", 3)
        assert clocked.retries == 3
        assert calls == ["tick"]

    def test_dataclass(self, sources: dict[str, GeneratedSource]) -> None:
        settings, _ = run(sources["Settings.g.py"], "Settings", True)
        assert settings.debug is True

    def test_nested(self, sources: dict[str, GeneratedSource]) -> None:
        inner, _ = run(sources["Outer.Inner.g.py"], "Outer.Inner", 1.5)
        assert inner.value == 1.5


class TestIdentity:
    """Markers are recognized by identity, not by name."""

    def test_foreign_inject_ignored(self) -> None:
        code = (
            "from typing import Annotated\n"
            "from otherlib import Inject\n"
            "class Widget:\n"
            "    name: Annotated[str, Inject()]\n"
        )
        assert generate_source(code, "app") == ()

    def test_foreign_partial_constructor_ignored(self) -> None:
        code = (
            "from typing import Annotated\n"
            "from injectgen import Inject\n"
            "from otherlib import partial_constructor\n"
            "class Widget:\n"
            "    name: Annotated[str, Inject()]\n"
            "    @partial_constructor\n"
            "    def _init(self, name):\n"
            "        log(name)\n"
        )
        (source,) = generate_source(code, "app")
        assert "log(name)" not in source.text

    def test_aliased_import(self) -> None:
        code = (
            "import typing as t\n"
            "from injectgen.markers import Inject as Wire\n"
            "class Widget:\n"
            "    name: t.Annotated[str, Wire()]\n"
        )
        (source,) = generate_source(code, "app")
        assert "self.name = name" in source.text


class TestAmbiguity:
    """Several partial constructors match."""

    CODE = (
        "from typing import Annotated\n"
        "from injectgen import Inject, partial_constructor\n"
        "class Widget:\n"
        "    name: Annotated[str, Inject()]\n"
        "    _first = partial_constructor(lambda self, name: log('first'))\n"
        "    _second = partial_constructor(lambda self: log('second'))\n"
    )

    def test_first_wins(self) -> None:
        (source,) = generate_source(self.CODE, "app")
        assert "log('first')" in source.text
        assert "log('second')" not in source.text

    def test_error_policy(self) -> None:
        config = GeneratorConfig(ambiguous_stub_policy=StubPolicy.ERROR)
        with pytest.raises(AmbiguousConstructorStubError):
            generate_source(self.CODE, "app", config)


class TestDirectoryRun:
    """Whole-tree generation with parallel workers and reporting."""

    def test_parallel_directory_run(self, tmp_path: Path) -> None:
        package = tmp_path / "app"
        package.mkdir()
        (package / "__init__.py").write_text("", encoding="utf-8")
        (package / "services.py").write_text(APP, encoding="utf-8")

        sink = InMemorySink()
        report = generate_directory(tmp_path, sink, GeneratorConfig(max_workers=4))

        assert report.generated_count == 6
        assert report.skipped == ("app.services.Plain",)
        assert sink.text("Widget.g.py").count("self.name = name") == 1

        output = ConsoleReporter(ConsoleConfig(color=False)).report(report)
        assert "6 generated, 1 skipped, 7 examined" in output

    def test_idempotent_rerun(self, tmp_path: Path) -> None:
        (tmp_path / "services.py").write_text(APP, encoding="utf-8")
        generate_directory(tmp_path)
        first = {p.name: p.read_text(encoding="utf-8") for p in tmp_path.glob("*.g.py")}
        generate_directory(tmp_path)
        second = {p.name: p.read_text(encoding="utf-8") for p in tmp_path.glob("*.g.py")}
        assert first == second
        assert len(first) == 6


class TestReceiverName:
    """Stubs whose instance parameter is not called self."""

    def test_method_stub(self) -> None:
        code = (
            "from typing import Annotated\n"
            "from injectgen import Inject, partial_constructor\n"
            "class Service:\n"
            "    a: Annotated[int, Inject()]\n"
            "    @partial_constructor\n"
            "    def _init(this, a):\n"
            "        this.doubled = a * 2\n"
        )
        (source,) = generate_source(code, "app")
        service, _ = run(source, "Service", 3)
        assert (service.a, service.doubled) == (3, 6)

    def test_lambda_stub(self) -> None:
        code = (
            "from typing import Annotated\n"
            "from injectgen import Inject, partial_constructor\n"
            "class Service:\n"
            "    a: Annotated[int, Inject()]\n"
            "    _init = partial_constructor(lambda s, a: log(s.a + a))\n"
        )
        (source,) = generate_source(code, "app")
        _, calls = run(source, "Service", 4)
        assert calls == [8]
