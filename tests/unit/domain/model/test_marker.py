"""Tests for domain/model/marker.py."""

import pytest

from injectgen.domain.model.marker import (
    INJECT_MARKER,
    PARTIAL_CONSTRUCTOR_MARKER,
    MarkerOccurrence,
)


class TestMarkerIdentities:
    """Marker identities are a stable contract."""

    def test_inject_marker(self) -> None:
        assert INJECT_MARKER == "injectgen.markers.Inject"

    def test_partial_constructor_marker(self) -> None:
        assert PARTIAL_CONSTRUCTOR_MARKER == "injectgen.markers.partial_constructor"


class TestMarkerOccurrence:
    """Tests for MarkerOccurrence."""

    def test_reference_and_expression(self) -> None:
        occurrence = MarkerOccurrence(expression="markers.Inject()", reference="markers.Inject")
        assert occurrence.reference == "markers.Inject"
        assert occurrence.location is None

    def test_unresolvable_reference_is_none(self) -> None:
        occurrence = MarkerOccurrence(expression="MARKERS[0]")
        assert occurrence.reference is None

    def test_empty_expression_raises(self) -> None:
        with pytest.raises(ValueError, match="expression must not be empty"):
            MarkerOccurrence(expression="")

    def test_empty_reference_raises(self) -> None:
        with pytest.raises(ValueError, match="reference"):
            MarkerOccurrence(expression="Inject()", reference="")

    def test_is_frozen(self) -> None:
        occurrence = MarkerOccurrence(expression="Inject()", reference="Inject")
        with pytest.raises(AttributeError):
            occurrence.reference = "Other"  # type: ignore[misc]
