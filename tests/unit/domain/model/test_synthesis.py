"""Tests for domain/model/synthesis.py."""

from pathlib import Path

import pytest

from injectgen.domain.model.synthesis import (
    ConstructorParameter,
    GeneratedSource,
    SynthesisResult,
)


def params(*names: str) -> tuple[ConstructorParameter, ...]:
    return tuple(ConstructorParameter(declared_type="int", name=name) for name in names)


class TestConstructorParameter:
    """Tests for ConstructorParameter."""

    def test_str(self) -> None:
        assert str(ConstructorParameter(declared_type="list[int]", name="items")) == (
            "items: list[int]"
        )

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            ConstructorParameter(declared_type="int", name="")


class TestSynthesisResult:
    """Tests for SynthesisResult invariants."""

    def test_valid(self) -> None:
        result = SynthesisResult(
            qualified_name="app.Service",
            parameters=params("a", "b"),
            assignments=("self.a = a", "self.b = b"),
            trailing_body=("log(a)",),
        )
        assert result.parameter_names == ("a", "b")

    def test_requires_a_parameter(self) -> None:
        with pytest.raises(ValueError, match="at least one parameter"):
            SynthesisResult(qualified_name="app.Service", parameters=(), assignments=())

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            SynthesisResult(
                qualified_name="app.Service",
                parameters=params("a", "b"),
                assignments=("self.a = a",),
            )

    def test_assignment_must_match_parameter(self) -> None:
        with pytest.raises(ValueError, match="must be 'self.b = b'"):
            SynthesisResult(
                qualified_name="app.Service",
                parameters=params("a", "b"),
                assignments=("self.a = a", "self.b = a"),
            )

    def test_assignment_order_must_match(self) -> None:
        with pytest.raises(ValueError, match="must be 'self.a = a'"):
            SynthesisResult(
                qualified_name="app.Service",
                parameters=params("a", "b"),
                assignments=("self.b = b", "self.a = a"),
            )

    def test_custom_receiver(self) -> None:
        result = SynthesisResult(
            qualified_name="app.Service",
            parameters=params("a"),
            assignments=("this.a = a",),
            receiver="this",
        )
        assert result.receiver == "this"

    def test_assignment_must_use_receiver(self) -> None:
        with pytest.raises(ValueError, match="must be 'this.a = a'"):
            SynthesisResult(
                qualified_name="app.Service",
                parameters=params("a"),
                assignments=("self.a = a",),
                receiver="this",
            )

    def test_receiver_colliding_with_parameter_raises(self) -> None:
        with pytest.raises(ValueError, match="collides"):
            SynthesisResult(
                qualified_name="app.Service",
                parameters=params("a"),
                assignments=("a.a = a",),
                receiver="a",
            )


class TestGeneratedSource:
    """Tests for GeneratedSource."""

    def test_valid(self) -> None:
        source = GeneratedSource("Widget.g.py", "class Widget:\n    pass\n", Path("a.py"))
        assert source.declaring_file == Path("a.py")

    def test_path_separator_raises(self) -> None:
        with pytest.raises(ValueError, match="path separators"):
            GeneratedSource("pkg/Widget.g.py", "x = 1\n")

    def test_empty_text_raises(self) -> None:
        with pytest.raises(ValueError, match="text"):
            GeneratedSource("Widget.g.py", "")
