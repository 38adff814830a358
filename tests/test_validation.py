"""
Tests for utils/validation.py — create-item payload checks.
"""
import pytest

from utils.errors import ValidationError
from utils.validation import is_non_blank, is_valid_price, validate_item_candidate


class TestIsValidPrice:
    @pytest.mark.parametrize("value", [0, 0.0, 1, 99.99, 1_000_000])
    def test_valid(self, value):
        assert is_valid_price(value) is True

    @pytest.mark.parametrize("value", [-1, -0.01, "10", None, True, False, float("nan"), float("inf"), 10 ** 400, [1]])
    def test_invalid(self, value):
        assert is_valid_price(value) is False


class TestIsNonBlank:
    def test_values(self):
        assert is_non_blank("a")
        assert not is_non_blank("   ")
        assert not is_non_blank("")
        assert not is_non_blank(None)
        assert not is_non_blank(5)


class TestValidateItemCandidate:
    def test_returns_cleaned_fields(self):
        result = validate_item_candidate(
            {"name": "  Test Item  ", "category": " Test Category ", "price": 100}
        )
        assert result == {"name": "Test Item", "category": "Test Category", "price": 100.0}

    def test_ignores_extra_fields(self):
        result = validate_item_candidate(
            {"name": "A", "category": "B", "price": 1, "id": 5}
        )
        assert "id" not in result

    @pytest.mark.parametrize("candidate", [
        None,
        {},
        {"name": "Test Item"},
        {"name": "", "category": "C", "price": 1},
        {"name": "   ", "category": "C", "price": 1},
        {"name": "N", "category": "  ", "price": 1},
        {"name": "N", "category": "C"},
        {"name": "N", "category": "C", "price": "invalid"},
        {"name": "N", "category": "C", "price": "100"},
        {"name": "N", "category": "C", "price": True},
        {"name": 5, "category": "C", "price": 1},
    ])
    def test_missing_or_wrong_type_rejected(self, candidate):
        with pytest.raises(ValidationError, match="required"):
            validate_item_candidate(candidate)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            validate_item_candidate({"name": "N", "category": "C", "price": -100})

    @pytest.mark.parametrize("price", [float("inf"), float("nan"), 10 ** 400])
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(ValidationError, match="non-negative"):
            validate_item_candidate({"name": "N", "category": "C", "price": price})

    def test_error_status_is_400(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_item_candidate({})
        assert exc_info.value.status_code == 400
        assert exc_info.value.to_dict()["error"] == "Bad request"
