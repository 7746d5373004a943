"""Tests for presentation/api.py."""

import threading
from pathlib import Path

import pytest

import injectgen
from injectgen import GeneratorConfig, generate_directory, generate_file, generate_source
from injectgen.domain.exceptions.parsing import ParsingError
from injectgen.domain.exceptions.synthesis import GenerationCancelledError
from injectgen.infrastructure.adapters.sinks import InMemorySink

WIDGETS = """\
from typing import Annotated

from injectgen import Inject


class Widget:
    name: Annotated[str, Inject()]
"""


class TestPublicSurface:
    """Package-level exports."""

    def test_version(self) -> None:
        assert injectgen.__version__ == "0.1.0"

    def test_exports(self) -> None:
        for name in injectgen.__all__:
            assert hasattr(injectgen, name)


class TestGenerateSource:
    """Tests for generate_source."""

    def test_generates(self) -> None:
        (source,) = generate_source(WIDGETS, "app.widgets")
        assert source.file_name == "Widget.g.py"
        assert "# namespace: app.widgets" in source.text

    def test_config_applied(self) -> None:
        (source,) = generate_source(
            WIDGETS, "app.widgets", GeneratorConfig(emit_header=False, file_suffix="_ctor.py")
        )
        assert source.file_name == "Widget_ctor.py"
        assert source.text.startswith("from __future__ import annotations")

    def test_no_candidates(self) -> None:
        assert generate_source("class Plain:\n    pass\n", "app") == ()

    def test_syntax_error(self) -> None:
        with pytest.raises(ParsingError):
            generate_source("class :", "app")


class TestGenerateFile:
    """Tests for generate_file."""

    def test_generates(self, tmp_path: Path) -> None:
        path = tmp_path / "app" / "widgets.py"
        path.parent.mkdir()
        path.write_text(WIDGETS, encoding="utf-8")
        (source,) = generate_file(path, root_path=tmp_path)
        assert "# namespace: app.widgets" in source.text
        assert source.declaring_file == path


class TestGenerateDirectory:
    """Tests for generate_directory."""

    def test_writes_beside_sources(self, tmp_path: Path) -> None:
        (tmp_path / "widgets.py").write_text(WIDGETS, encoding="utf-8")
        report = generate_directory(tmp_path)
        assert report.generated_count == 1
        assert (tmp_path / "Widget.g.py").is_file()

    def test_rerun_skips_generated_files(self, tmp_path: Path) -> None:
        (tmp_path / "widgets.py").write_text(WIDGETS, encoding="utf-8")
        generate_directory(tmp_path)
        report = generate_directory(tmp_path)
        assert report.total == 1

    def test_custom_sink(self, tmp_path: Path) -> None:
        (tmp_path / "widgets.py").write_text(WIDGETS, encoding="utf-8")
        sink = InMemorySink()
        generate_directory(tmp_path, sink)
        assert list(sink.sources) == ["Widget.g.py"]
        assert not (tmp_path / "Widget.g.py").exists()

    def test_cancelled(self, tmp_path: Path) -> None:
        (tmp_path / "widgets.py").write_text(WIDGETS, encoding="utf-8")
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(GenerationCancelledError):
            generate_directory(tmp_path, InMemorySink(), cancel=cancel)
