"""Reading the login virtual pad and typing a password on it."""

from __future__ import annotations

import re
from typing import Sequence

from boursokit.pad_digits import get_number_for_svg

PAD_SIZE = 10

_KEY_RE = re.compile(
    r'(?ms)<button.*?data-matrix-key="(?P<matrix_key>[A-Z]{3})"'
    r'.*?src="(?P<svg>data:image.*?)">.*?</button>'
)
_CHALLENGE_RE = re.compile(
    r'(?m)data-matrix-random-challenge\]"\)\.val\("(?P<challenge_id>.*?)"\)'
)
_DIGITS = "0123456789"


def password_to_virtual_pad_keys(virtual_pad_ids: Sequence[str], password: str) -> list[str]:
    """Translate each digit of the password into the pad key showing that digit.

    `virtual_pad_ids` holds the key for digit n at index n. Raises ValueError
    for a character that is not a decimal digit.
    """
    keys: list[str] = []
    for char in password:
        if char not in _DIGITS:
            raise ValueError(f"Invalid character in password: {char}")
        keys.append(virtual_pad_ids[int(char)])
    return keys


def extract_data_matrix_keys(html: str) -> list[str]:
    """Return the ten pad keys of the virtual pad page, ordered by the digit they show.

    A digit the page does not show is left as an empty string. Raises
    ValueError when a key shows an unknown image.
    """
    keys = [""] * PAD_SIZE
    for match in _KEY_RE.finditer(html):
        svg = match["svg"]
        number = get_number_for_svg(svg)
        if number is None:
            raise ValueError(
                f"Could not find number for svg: {svg}.\n"
                "It seems like the Bourso login page has changed, please contact an admin."
            )
        keys[number] = match["matrix_key"]
    return keys


def extract_challenge_token(html: str) -> str:
    """Return the random challenge token embedded in the virtual pad page.

    Raises ValueError when the page holds no challenge.
    """
    match = _CHALLENGE_RE.search(html)
    if match is None:
        raise ValueError("Failed to extract the challenge token from the response")
    return match["challenge_id"].strip()