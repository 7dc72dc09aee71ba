"""
Tests for the ValidationResult value type
Run with: pytest tests/test_validation.py -v
"""

import pytest
from igaming.core.errors import ValidationError
from igaming.core.validation import ValidationResult


class TestValidationResult:

    def test_success(self):
        result = ValidationResult.success()
        assert result.valid
        assert not result.is_invalid
        assert result.message is None
        assert bool(result)

    def test_failure(self):
        result = ValidationResult.failure("Bet must be greater than zero")
        assert not result.valid
        assert result.is_invalid
        assert result.message == "Bet must be greater than zero"
        assert not bool(result)

    def test_message_only_on_failure(self):
        with pytest.raises(ValueError):
            ValidationResult(valid=True, message="unexpected")
        with pytest.raises(ValueError):
            ValidationResult(valid=False)

    def test_immutable(self):
        result = ValidationResult.success()
        with pytest.raises(AttributeError):
            result.valid = False

    def test_raise_if_invalid(self):
        ValidationResult.success().raise_if_invalid()

        with pytest.raises(ValidationError, match="Minimum bet"):
            ValidationResult.failure("Minimum bet is $10.00").raise_if_invalid()
