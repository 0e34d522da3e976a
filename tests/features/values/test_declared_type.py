"""Tests for declared type tag resolution."""

from __future__ import annotations

import logging

import pytest
from pytest_mock import MockerFixture

from devprops.features.values import DeclaredType

WIRE_TAGS: dict[str, DeclaredType] = {
    "xs:boolean": DeclaredType.BOOLEAN,
    "xs:double": DeclaredType.DOUBLE,
    "xs:float": DeclaredType.FLOAT,
    "xs:integer": DeclaredType.INTEGER,
    "xs:nonNegativeInteger": DeclaredType.NON_NEGATIVE_INTEGER,
    "xs:long": DeclaredType.LONG,
    "xs:enumeration": DeclaredType.ENUMERATION,
}


@pytest.mark.parametrize(("tag", "expected"), list(WIRE_TAGS.items()))
def test_from_tag_resolves_wire_identifiers(tag: str, expected: DeclaredType) -> None:
    """Every wire identifier maps onto its member and back."""
    member = DeclaredType.from_tag(tag)
    assert member is expected
    assert member.tag == tag


def test_unknown_has_no_tag() -> None:
    """The unknown member carries no wire identifier."""
    assert DeclaredType.UNKNOWN.tag is None
    assert DeclaredType.from_tag(None) is DeclaredType.UNKNOWN


def test_from_tag_is_case_sensitive() -> None:
    """Identifiers must match exactly."""
    assert DeclaredType.from_tag("XS:INTEGER") is DeclaredType.UNKNOWN


def test_unrecognised_tag_emits_debug_event(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown tags are recorded as a structured debug event, not an error."""
    caplog.set_level(logging.DEBUG, logger="devprops")

    assert DeclaredType.from_tag("xs:string") is DeclaredType.UNKNOWN

    records = [r for r in caplog.records if getattr(r, "value_event", None) == "value.type.unknown"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert getattr(records[0], "type_tag") == "xs:string"


def test_known_tag_does_not_log(mocker: MockerFixture) -> None:
    """Resolving a known tag stays silent."""
    mock_logger = mocker.patch("devprops.features.values.domain.declared_type.logger")

    _ = DeclaredType.from_tag("xs:long")

    mock_logger.debug.assert_not_called()
