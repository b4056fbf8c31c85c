"""Unit tests for service error types."""

from attractions.utils.errors import (
    AttractionIndexError,
    BaseServiceError,
    ErrorCategory,
    ErrorSeverity,
)


class TestBaseServiceError:
    """Test cases for BaseServiceError."""

    def test_defaults(self):
        """Test default classification and user message."""
        error = BaseServiceError("boom", "SOMETHING_FAILED")

        assert str(error) == "boom"
        assert error.severity == ErrorSeverity.MEDIUM
        assert error.category == ErrorCategory.BUSINESS_LOGIC
        assert error.user_message == "An error occurred while processing your request."
        assert error.details == {}

    def test_to_dict(self):
        """Test the structured representation used in logs."""
        error = BaseServiceError(
            "boom",
            "SOMETHING_FAILED",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.INFRASTRUCTURE,
            details={"key": "value"},
        )

        payload = error.to_dict()

        assert payload["error_id"] == error.error_id
        assert payload["error_code"] == "SOMETHING_FAILED"
        assert payload["severity"] == "HIGH"
        assert payload["category"] == "INFRASTRUCTURE"
        assert payload["details"] == {"key": "value"}
        assert "timestamp" in payload

    def test_unique_error_ids(self):
        """Test that every error instance gets its own id."""
        assert BaseServiceError("a", "A").error_id != BaseServiceError("a", "A").error_id


class TestAttractionIndexError:
    """Test cases for AttractionIndexError."""

    def test_fields(self):
        """Test message, code and position details."""
        error = AttractionIndexError(5, 3)

        assert error.index == 5
        assert error.size == 3
        assert error.error_code == "ATTRACTION_INDEX_OUT_OF_RANGE"
        assert error.category == ErrorCategory.VALIDATION
        assert "5" in error.message and "3" in error.message

    def test_hierarchy(self):
        """Test that the error is both a service error and an IndexError."""
        error = AttractionIndexError(0, 0)

        assert isinstance(error, BaseServiceError)
        assert isinstance(error, IndexError)
