# tests/unit/application/test_language_code.py
import pytest

from locale_hub.application.services._languages import validate_language_code
from locale_hub.core.exceptions import ValidationError


@pytest.mark.parametrize("code", ["en", "zh-CN", "zh-Hant-TW", "ja", "pt-BR"])
def test_valid_codes_pass(code):
    assert validate_language_code(code) == code


def test_surrounding_whitespace_is_stripped():
    assert validate_language_code("  fr ") == "fr"


@pytest.mark.parametrize("code", ["", "   ", "!!", "en-!!"])
def test_invalid_codes_raise_validation_error(code):
    with pytest.raises(ValidationError):
        validate_language_code(code)
