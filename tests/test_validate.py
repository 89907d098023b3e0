import pytest

from boursokit.validate import validate_account_id

VALID_ID = "e51f635524a7d506e4d4a7a8088b6278"


def test_valid_id_is_returned():
    assert validate_account_id(VALID_ID) == VALID_ID


def test_surrounding_whitespace_is_tolerated_and_kept():
    padded = f"  {VALID_ID}\n"
    assert validate_account_id(padded) == padded


@pytest.mark.parametrize("value", ["", "PEA", VALID_ID[:-1], VALID_ID + "0", "   "])
def test_wrong_length_is_rejected(value):
    with pytest.raises(ValueError, match="Account id must be 32 characters long"):
        validate_account_id(value)


def test_inner_whitespace_counts():
    with pytest.raises(ValueError):
        validate_account_id(VALID_ID[:16] + " " + VALID_ID[16:])