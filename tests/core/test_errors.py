"""Tests for error types and codes."""

import pytest

from hhoutline.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    OutlineError,
    ParserError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.CONFIG_FILE_NOT_FOUND, 2000),
            (ErrorCode.PARSER_GRAMMAR_UNAVAILABLE, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestOutlineError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = OutlineError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = OutlineError(
            code=ErrorCode.INTERNAL_ERROR,
            message="Something broke",
        )

        # When
        result = str(error)

        # Then
        assert result == "[9001] INTERNAL_ERROR: Something broke"

    def test_given_subclass_when_raised_then_caught_as_base(self) -> None:
        """Every error type is an OutlineError."""
        with pytest.raises(OutlineError):
            raise ParserError.grammar_unavailable("hack", "missing")


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            (
                "parse_error",
                {"path": "/foo", "reason": "bad yaml"},
                ErrorCode.CONFIG_PARSE_ERROR,
            ),
            (
                "invalid_value",
                {"field": "outline.indent", "value": -1, "reason": "negative"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
            ("file_not_found", {"path": "/missing"}, ErrorCode.CONFIG_FILE_NOT_FOUND),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        """Factory methods produce errors with correct error codes."""
        # Given
        factory_method = getattr(ConfigError, factory)

        # When
        error = factory_method(**kwargs)

        # Then
        assert error.code == expected_code

    def test_given_parse_error_when_created_then_path_in_details(self) -> None:
        """Parse error includes file path in details."""
        # Given
        path = "/config.yaml"
        reason = "invalid syntax"

        # When
        error = ConfigError.parse_error(path, reason)

        # Then
        assert error.details["path"] == path
        assert reason in error.message


class TestParserError:
    """ParserError tests."""

    def test_given_grammar_unavailable_when_created_then_names_grammar(self) -> None:
        """Grammar errors carry the grammar name and reason."""
        # When
        error = ParserError.grammar_unavailable("hack", "not bundled")

        # Then
        assert error.code == ErrorCode.PARSER_GRAMMAR_UNAVAILABLE
        assert error.details == {"grammar": "hack", "reason": "not bundled"}
        assert "hack" in error.message


class TestInternalError:
    """InternalError tests."""

    def test_given_unexpected_error_when_created_then_includes_extras(self) -> None:
        """Unexpected error captures arbitrary extra details."""
        # Given
        message = "boom"
        extras = {"foo": "bar", "count": 42}

        # When
        error = InternalError.unexpected(message, **extras)

        # Then
        assert error.details == extras
        assert error.code == ErrorCode.INTERNAL_ERROR
