"""Tests for domain/exceptions."""

from pathlib import Path

import pytest

from injectgen.domain.exceptions import (
    AmbiguousConstructorStubError,
    EmissionError,
    GenerationCancelledError,
    InjectGenError,
    ParsingError,
)


class TestHierarchy:
    """Every domain error is an InjectGenError."""

    @pytest.mark.parametrize(
        "error",
        [
            ParsingError(Path("a.py"), "bad"),
            AmbiguousConstructorStubError("app.Widget", ("_a", "_b")),
            EmissionError(Path("A.g.py"), "bad"),
            GenerationCancelledError(0),
        ],
    )
    def test_is_injectgen_error(self, error: Exception) -> None:
        assert isinstance(error, InjectGenError)


class TestParsingError:
    """Tests for ParsingError."""

    def test_message(self) -> None:
        error = ParsingError(Path("a.py"), "syntax error")
        assert error.path == Path("a.py")
        assert str(error) == "Failed to parse a.py: syntax error"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            ParsingError(Path("a.py"), "")

    def test_path_required(self) -> None:
        with pytest.raises(TypeError, match="path"):
            ParsingError(None, "bad")  # type: ignore[arg-type]

    def test_line_and_module_context(self) -> None:
        error = ParsingError(Path("a.py"), "invalid syntax", module_name="app.a", line=3)
        assert (error.module_name, error.line) == ("app.a", 3)
        assert str(error) == "Failed to parse a.py:3 (module app.a): invalid syntax"

    def test_context_defaults_to_none(self) -> None:
        error = ParsingError(Path("a.py"), "bad")
        assert error.module_name is None
        assert error.line is None

    def test_line_below_one_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be >= 1"):
            ParsingError(Path("a.py"), "bad", line=0)


class TestSynthesisErrors:
    """Tests for synthesis and emission errors."""

    def test_ambiguous_lists_stubs(self) -> None:
        error = AmbiguousConstructorStubError("app.Widget", ("_a", "_b"))
        assert error.stub_names == ("_a", "_b")
        assert "app.Widget" in str(error)
        assert "_a, _b" in str(error)

    def test_ambiguous_needs_two_stubs(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            AmbiguousConstructorStubError("app.Widget", ("_a",))

    def test_emission_error(self) -> None:
        error = EmissionError(Path("out/A.g.py"), "disk full")
        assert error.reason == "disk full"
        assert "out/A.g.py" in str(error)

    def test_cancelled_counts_completed(self) -> None:
        assert GenerationCancelledError(3).completed == 3

    def test_cancelled_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="completed"):
            GenerationCancelledError(-1)
