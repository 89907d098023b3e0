import pytest

from boursokit.pad_digits import DIGIT_SVGS
from boursokit.virtual_pad import (
    extract_challenge_token,
    extract_data_matrix_keys,
    password_to_virtual_pad_keys,
)

CHALLENGE = "THIS-STRING_represents0the1random__ElXSl-qJoXCKnqTBiew"

# Buttons in page order: (matrix key, digit shown by its image).
_BUTTONS = [
    ("WZE", 0),
    ("YCL", 9),
    ("ANP", 6),
    ("LGK", 2),
    ("TLT", 3),
    ("FIG", 8),
    ("ISV", 4),
    ("UCA", 7),
    ("RNI", 5),
    ("UVQ", 1),
]


def _button(index: int, key: str, svg: str) -> str:
    return f"""
                <li data-matrix-list-item data-matrix-list-item-index="{index}">
                    <button type="button"
                            data-matrix-key="{key}"
                            class="sasmap__key"
                            >
                            <img alt="" class="sasmap__img" src="{svg}">
                    </button>
                </li>"""


def _page(buttons, challenge=CHALLENGE) -> str:
    items = "".join(
        _button(index, key, DIGIT_SVGS[digit]) for index, (key, digit) in enumerate(buttons)
    )
    script = ""
    if challenge is not None:
        script = f"""
        <script>
            $(function () {{
                $("[data-matrix-random-challenge]").val("{challenge}")
            }})
        </script>"""
    return f"""<div class="login-matrix">
    <div class="login-a11y">
        <div class="c-switch"><input id="switch-1" type="checkbox" data-matrix-toggle-sound ><button
     role="checkbox" type="button" class="c-switch__button-wrapper" aria-checked="false"
    data-switch="switch-1"
        ><span class="c-switch__inner"></span><span class="c-switch__button"></span></button></div>
    </div>
    <div class="sasmap" data-matrix data-matrix-harmony
        data-matrix-random-challenge-selector="[data-matrix-random-challenge]">
        <ul class="password-input">{items}
        </ul>{script}
    </div>
</div>"""


VIRTUAL_PAD_RES = _page(_BUTTONS)


def test_extract_data_matrix_keys():
    keys = extract_data_matrix_keys(VIRTUAL_PAD_RES)
    assert keys == ["WZE", "UVQ", "LGK", "TLT", "ISV", "RNI", "ANP", "UCA", "FIG", "YCL"]


def test_password_to_virtual_pad_keys():
    keys = extract_data_matrix_keys(VIRTUAL_PAD_RES)
    translated = password_to_virtual_pad_keys(keys, "123654")
    assert translated == ["UVQ", "LGK", "TLT", "ANP", "RNI", "ISV"]


def test_extract_challenge_token():
    assert extract_challenge_token(VIRTUAL_PAD_RES) == CHALLENGE


def test_challenge_token_is_trimmed():
    page = _page(_BUTTONS, challenge="  abc  ")
    assert extract_challenge_token(page) == "abc"


def test_missing_challenge_raises():
    with pytest.raises(ValueError):
        extract_challenge_token(_page(_BUTTONS, challenge=None))


def test_missing_digits_are_empty():
    keys = extract_data_matrix_keys(_page(_BUTTONS[:3]))
    assert keys == ["WZE", "", "", "", "", "", "ANP", "", "", "YCL"]


def test_unknown_svg_raises():
    page = _page(_BUTTONS).replace(DIGIT_SVGS[4], "data:image/svg+xml;base64, AAAA")
    with pytest.raises(ValueError, match="Could not find number for svg"):
        extract_data_matrix_keys(page)


def test_non_digit_password_raises():
    keys = extract_data_matrix_keys(VIRTUAL_PAD_RES)
    with pytest.raises(ValueError, match="Invalid character in password: a"):
        password_to_virtual_pad_keys(keys, "12a4")


def test_every_digit_maps_back():
    keys = extract_data_matrix_keys(VIRTUAL_PAD_RES)
    translated = password_to_virtual_pad_keys(keys, "0123456789")
    assert translated == keys


def test_empty_password_gives_no_keys():
    assert password_to_virtual_pad_keys(["A"] * 10, "") == []