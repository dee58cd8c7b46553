"""
Tests for the error resolution rules.

Pure functions only: key extraction, table lookup, the JSON syntax
override and the logging decision.
"""

import json
from types import MappingProxyType

import pytest

from error_translator.application.dtos import ErrorMappingEntry
from error_translator.domain.entities import (
    DEFAULT_BAD_REQUEST,
    DEFAULT_INTERNAL_ERROR,
    ResolvedResponse,
)
from error_translator.domain.resolution import (
    extract_error_key,
    is_json_syntax_error,
    resolve_error,
)


def _json_error() -> json.JSONDecodeError:
    try:
        json.loads("stam")
    except json.JSONDecodeError as exc:
        return exc
    raise AssertionError("json.loads accepted malformed input")


def _table(**entries: tuple[int, str]) -> MappingProxyType:
    return MappingProxyType(
        {key: ErrorMappingEntry(code=code, message=message) for key, (code, message) in entries.items()}
    )


class LegacyError(Exception):
    """Error carrying its text only in a ``msg`` attribute."""

    def __init__(self, msg: str) -> None:
        super().__init__()
        self.msg = msg


class MessageError(Exception):
    """Error carrying an explicit ``message`` attribute."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"wrapped: {message}")


class DictMessageError(Exception):
    """Error whose ``message`` attribute is structured data."""

    def __init__(self) -> None:
        self.message = {"detail": "x"}
        super().__init__("structured failure")


class DetailError(Exception):
    """Error shaped like an HTTP exception, keyed by ``detail``."""

    def __init__(self, detail) -> None:
        self.detail = detail
        super().__init__(f"418: {detail}")


class InvalidJsonReport(Exception):
    """Validation error reporting a JSON decode failure as its first item."""

    def __init__(self, error_type: str = "json_invalid") -> None:
        super().__init__("1 validation error")
        self._errors = [{"type": error_type, "loc": ("body", 0), "msg": "JSON decode error"}]

    def errors(self):
        return self._errors


class TestExtractErrorKey:
    """The lookup key is the error's message text."""

    def test_exception_text(self) -> None:
        assert extract_error_key(ValueError("error1")) == "error1"

    def test_message_attribute_preferred(self) -> None:
        assert extract_error_key(MessageError("error1")) == "error1"

    def test_msg_fallback(self) -> None:
        assert extract_error_key(LegacyError("error2")) == "error2"

    def test_no_text(self) -> None:
        assert extract_error_key(RuntimeError()) is None

    def test_non_string_message_ignored(self) -> None:
        assert extract_error_key(DictMessageError()) == "structured failure"

    def test_detail_preferred_over_text(self) -> None:
        assert extract_error_key(DetailError("error1")) == "error1"

    def test_non_string_detail_ignored(self) -> None:
        assert extract_error_key(DetailError(["a"])) == "418: ['a']"


class TestJsonSyntaxDetection:
    """Only syntax-class errors about JSON positions qualify."""

    def test_json_decode_error(self) -> None:
        assert is_json_syntax_error(_json_error())

    def test_syntax_error_with_position_marker(self) -> None:
        exc = SyntaxError("Unexpected token s in JSON at position 0")

        assert is_json_syntax_error(exc)

    def test_syntax_error_without_marker(self) -> None:
        assert not is_json_syntax_error(SyntaxError("invalid syntax"))

    def test_marker_on_other_error_class(self) -> None:
        assert not is_json_syntax_error(ValueError("bad in JSON at position 3"))

    def test_json_invalid_validation_report(self) -> None:
        assert is_json_syntax_error(InvalidJsonReport())

    def test_other_validation_report(self) -> None:
        assert not is_json_syntax_error(InvalidJsonReport("missing"))


class TestResolveError:
    """Precedence between mapping, JSON override and the 500 default."""

    def test_mapped_error(self) -> None:
        resolution = resolve_error(ValueError("error1"), _table(error1=(400, "stam1")))

        assert resolution.response.code == 400
        assert resolution.response.message == "stam1"
        assert resolution.should_log is False

    def test_unmapped_error_is_logged_500(self) -> None:
        resolution = resolve_error(ValueError("other error"), _table(error1=(400, "stam1")))

        assert resolution.response == DEFAULT_INTERNAL_ERROR
        assert resolution.key == "other error"
        assert resolution.should_log is True

    def test_json_error_becomes_400(self) -> None:
        resolution = resolve_error(_json_error(), _table(error1=(400, "stam1")))

        assert resolution.response == DEFAULT_BAD_REQUEST
        assert resolution.should_log is False

    def test_float_code_written_as_int(self) -> None:
        resolution = resolve_error(ValueError("gone"), _table(gone=(410.0, "Gone")))

        assert resolution.response.code == 410
        assert isinstance(resolution.response.code, int)

    def test_json_error_mapped_to_non_500_keeps_mapping(self) -> None:
        exc = SyntaxError("Unexpected token s in JSON at position 0")
        table = _table(**{"Unexpected token s in JSON at position 0": (422, "bad json")})

        resolution = resolve_error(exc, table)

        assert resolution.response.code == 422
        assert resolution.response.message == "bad json"


    def test_structured_message_resolves_to_500(self) -> None:
        resolution = resolve_error(DictMessageError(), _table(error1=(400, "stam1")))

        assert resolution.response == DEFAULT_INTERNAL_ERROR
        assert resolution.should_log is True

    def test_invalid_json_report_becomes_400(self) -> None:
        resolution = resolve_error(InvalidJsonReport(), _table(error1=(400, "stam1")))

        assert resolution.response == DEFAULT_BAD_REQUEST
        assert resolution.should_log is False

    def test_fallback_used_when_unmapped(self) -> None:
        fallback = ResolvedResponse(code=404, message="Not Found")

        resolution = resolve_error(DetailError("missing"), _table(error1=(400, "stam1")), fallback)

        assert resolution.response == fallback
        assert resolution.should_log is False

    def test_mapping_wins_over_fallback(self) -> None:
        fallback = ResolvedResponse(code=418, message="teapot")

        resolution = resolve_error(DetailError("error1"), _table(error1=(409, "stam1")), fallback)

        assert resolution.response.code == 409


class TestExplicit500Precedence:
    """An explicit mapping to 500 behaves like the default for override and logging."""

    def test_explicit_500_is_logged_with_mapped_message(self) -> None:
        resolution = resolve_error(ValueError("db down"), _table(**{"db down": (500, "Try later")}))

        assert resolution.response.code == 500
        assert resolution.response.message == "Try later"
        assert resolution.should_log is True

    def test_explicit_500_overridden_for_json_syntax_error(self) -> None:
        exc = SyntaxError("Unexpected token s in JSON at position 0")
        table = _table(**{"Unexpected token s in JSON at position 0": (500, "mapped")})

        resolution = resolve_error(exc, table)

        assert resolution.response == DEFAULT_BAD_REQUEST
        assert resolution.should_log is False


@pytest.mark.parametrize("code", [400, 401, 404, 503])
def test_non_500_mappings_never_logged(code: int) -> None:
    resolution = resolve_error(ValueError("k"), _table(k=(code, "m")))

    assert resolution.should_log is False
