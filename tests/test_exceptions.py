"""Tests for the layerenv exception hierarchy.

These tests verify:
1. Exception structure (code, message, details)
2. Inheritance hierarchy
3. String representation
4. Dictionary conversion for JSON serialization
"""

import pytest

from layerenv.exceptions import (
    ErrorCode,
    LayerEnvError,
    LoadError,
    LookupFailure,
    MissingKeyError,
    NotInitializedError,
    SourceEmptyError,
    SourceNotFoundError,
    StateError,
    ValueParseError,
)


class TestLayerEnvError:
    """Tests for base LayerEnvError class."""

    def test_basic_construction(self):
        """Test basic exception construction."""
        error = LayerEnvError(ErrorCode.SOURCE_EMPTY, "Test message")

        assert error.code == ErrorCode.SOURCE_EMPTY
        assert error.message == "Test message"
        assert error.details == {}

    def test_str_without_details(self):
        """Test string representation without details."""
        error = LayerEnvError(ErrorCode.NOT_INITIALIZED, "Test message")
        assert str(error) == "NOT_INITIALIZED: Test message"

    def test_str_with_details(self):
        """Test string representation with details."""
        error = LayerEnvError(ErrorCode.MISSING_KEY, "Test message", details={"foo": "bar"})

        result = str(error)
        assert result.startswith("MISSING_KEY: Test message")
        assert "foo" in result
        assert "bar" in result

    def test_args_contains_message(self):
        """Test that Exception.args contains the message."""
        error = LayerEnvError(ErrorCode.VALUE_PARSE, "The error message")
        assert "The error message" in error.args

    def test_to_dict(self):
        """Test conversion to dictionary."""
        error = LayerEnvError(ErrorCode.SOURCE_EMPTY, "Test message", details={"key": "value"})

        assert error.to_dict() == {
            "code": "SOURCE_EMPTY",
            "message": "Test message",
            "details": {"key": "value"},
        }


class TestLoadErrors:
    """Tests for source loading errors."""

    def test_source_not_found(self):
        """Test SourceNotFoundError fields."""
        error = SourceNotFoundError(".env.local", {"kind": "override"})

        assert error.code == ErrorCode.SOURCE_NOT_FOUND
        assert error.source == ".env.local"
        assert error.details == {"source": ".env.local", "kind": "override"}
        assert ".env.local" in error.message

    def test_source_empty(self):
        """Test SourceEmptyError fields."""
        error = SourceEmptyError("<primary>")

        assert error.code == ErrorCode.SOURCE_EMPTY
        assert error.to_dict()["details"] == {"source": "<primary>"}

    @pytest.mark.parametrize("error_class", [SourceNotFoundError, SourceEmptyError])
    def test_load_errors_are_suppressible(self, error_class):
        """Test load errors are the suppressible kind."""
        error = error_class("x")
        assert isinstance(error, LoadError)
        assert isinstance(error, LayerEnvError)
        assert error.suppressible is True


class TestAlwaysSurfacedErrors:
    """Tests for errors that optional loads never swallow."""

    def test_not_initialized(self):
        """Test NotInitializedError fields."""
        error = NotInitializedError()

        assert isinstance(error, StateError)
        assert error.code == ErrorCode.NOT_INITIALIZED
        assert error.suppressible is False

    def test_missing_key(self):
        """Test MissingKeyError is both a LookupFailure and a KeyError."""
        error = MissingKeyError("HOST")

        assert isinstance(error, LookupFailure)
        assert isinstance(error, KeyError)
        assert error.name == "HOST"
        assert str(error).startswith("MISSING_KEY: HOST variable not found")

    def test_value_parse(self):
        """Test ValueParseError is both a LookupFailure and a ValueError."""
        error = ValueParseError("PORT", "eighty", "int")

        assert isinstance(error, LookupFailure)
        assert isinstance(error, ValueError)
        assert error.details == {"name": "PORT", "value": "eighty", "target": "int"}
        assert error.suppressible is False

    def test_can_be_caught_as_base(self):
        """Test every error can be caught as LayerEnvError."""
        with pytest.raises(LayerEnvError):
            raise ValueParseError("PORT", "eighty", "int")
