"""Tests for domain/model/member.py."""

import pytest

from injectgen.domain.model.enums import MemberKind
from injectgen.domain.model.member import Member, QualifyingMember
from tests.factories import make_marker


class TestMember:
    """Tests for Member."""

    def test_defaults(self) -> None:
        member = Member(name="name", declared_type="str")
        assert member.kind is MemberKind.FIELD
        assert member.markers == ()

    def test_property_kind(self) -> None:
        member = Member(
            name="clock",
            declared_type="Clock",
            markers=(make_marker(),),
            kind=MemberKind.PROPERTY,
        )
        assert member.kind is MemberKind.PROPERTY
        assert len(member.markers) == 1

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            Member(name="", declared_type="str")

    def test_invalid_identifier_raises(self) -> None:
        with pytest.raises(ValueError, match="not a valid identifier"):
            Member(name="not-a-name", declared_type="str")

    def test_empty_type_raises(self) -> None:
        with pytest.raises(ValueError, match="declared type"):
            Member(name="name", declared_type="")


class TestQualifyingMember:
    """Tests for QualifyingMember."""

    def test_fields(self) -> None:
        member = QualifyingMember(name="repo", declared_type="Repository")
        assert (member.name, member.declared_type) == ("repo", "Repository")

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            QualifyingMember(name="", declared_type="str")

    def test_empty_type_raises(self) -> None:
        with pytest.raises(ValueError, match="declared_type"):
            QualifyingMember(name="name", declared_type="")
