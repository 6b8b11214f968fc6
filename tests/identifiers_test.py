"""
Tests for user identifier validation.
"""
import pytest

from domain.exceptions import InvalidIdentifierError
from domain.services.identifiers import parse_user_id

VALID = "5b1f0a6e-3c2d-4e8f-9a7b-1c2d3e4f5a6b"


def test_canonical_uuid_is_returned_unchanged():
    assert parse_user_id(VALID) == VALID


def test_uppercase_and_unhyphenated_forms_are_canonicalized():
    assert parse_user_id(VALID.upper()) == VALID
    assert parse_user_id(VALID.replace("-", "")) == VALID


@pytest.mark.parametrize("raw", ["not-a-valid-id", "123", "", "   ", "65a1b2c3d4e5f6a7b8c9d0e1", None, 42])
def test_malformed_references_raise(raw):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_user_id(raw)
    assert exc_info.value.raw_id == raw
