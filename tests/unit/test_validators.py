"""
Unit tests for meter_reader.utils.validators
"""
from types import SimpleNamespace

import pytest
from meter_reader.application.dto.measure_dto import MeasureUploadRequest
from meter_reader.utils.validators import (
    is_valid_base64,
    is_valid_confirmed_value,
    is_valid_measure_type,
    is_valid_uuid,
    to_confirmed_value,
    validate_measure_request,
)


class TestIsValidConfirmedValue:
    """Tests for is_valid_confirmed_value"""

    @pytest.mark.parametrize("value", ["123", 123, " 42 ", "-7", 0, 10.0])
    def test_integer_like_accepted(self, value):
        assert is_valid_confirmed_value(value) is True

    @pytest.mark.parametrize("value", ["12.5", "abc", "", None, True, 12.5, [1], "1e3"])
    def test_other_values_rejected(self, value):
        assert is_valid_confirmed_value(value) is False

    @pytest.mark.parametrize(
        "value", ["99999999999999999999", 1e300, float("inf"), 2 ** 63, -(2 ** 63) - 1, "1" * 5000]
    )
    def test_values_beyond_64_bits_rejected(self, value):
        assert is_valid_confirmed_value(value) is False

    def test_64_bit_bounds_accepted(self):
        assert is_valid_confirmed_value(str(2 ** 63 - 1)) is True
        assert is_valid_confirmed_value(-(2 ** 63)) is True

    def test_to_confirmed_value_converts(self):
        assert to_confirmed_value("123") == 123
        assert to_confirmed_value(" -7 ") == -7
        assert to_confirmed_value(10.0) == 10

    def test_to_confirmed_value_rejects_invalid(self):
        with pytest.raises(ValueError):
            to_confirmed_value("12.5")


class TestIsValidBase64:
    """Tests for is_valid_base64"""

    def test_real_image(self, image_base64):
        assert is_valid_base64(image_base64) is True

    def test_data_url_prefix_allowed(self, image_base64):
        assert is_valid_base64(f"data:image/png;base64,{image_base64}") is True

    def test_garbage_rejected(self):
        assert is_valid_base64("not base64!!") is False

    def test_non_canonical_rejected(self):
        # Missing padding does not round-trip
        assert is_valid_base64("aGVsbG8") is False

    def test_empty_and_non_string_rejected(self):
        assert is_valid_base64("") is False
        assert is_valid_base64(None) is False
        assert is_valid_base64(123) is False


class TestIsValidMeasureType:
    def test_case_sensitive_by_default(self):
        assert is_valid_measure_type("WATER") is True
        assert is_valid_measure_type("GAS") is True
        assert is_valid_measure_type("water") is False

    def test_case_insensitive(self):
        assert is_valid_measure_type("water", case_sensitive=False) is True
        assert is_valid_measure_type("Gas", case_sensitive=False) is True
        assert is_valid_measure_type("ELECTRICITY", case_sensitive=False) is False


class TestIsValidUuid:
    def test_uuid_accepted(self):
        assert is_valid_uuid("3f2504e0-4f89-41d3-9a0c-0305e82c3301") is True

    @pytest.mark.parametrize("value", ["", "abc", None, 42])
    def test_non_uuid_rejected(self, value):
        assert is_valid_uuid(value) is False


class TestValidateMeasureRequest:
    """Tests for validate_measure_request - checks run in a fixed order"""

    def _request(self, image_base64, **overrides):
        data = {
            "image": image_base64,
            "customer_code": "C1",
            "measure_datetime": "2025-01-15T12:00:00Z",
            "measure_type": "WATER",
        }
        data.update(overrides)
        return MeasureUploadRequest(**data)

    def test_valid_request(self, image_base64):
        result = validate_measure_request(self._request(image_base64))
        assert result.is_valid is True
        assert result.error_message is None

    def test_missing_image(self, image_base64):
        result = validate_measure_request(self._request(image_base64, image=None))
        assert result.is_valid is False
        assert result.error_message == "Image is required"

    def test_invalid_image_checked_before_customer(self, image_base64):
        result = validate_measure_request(self._request(image_base64, image="%%%", customer_code=None))
        assert result.error_message == "Invalid base64 image"

    def test_missing_customer_code(self, image_base64):
        result = validate_measure_request(self._request(image_base64, customer_code=""))
        assert result.error_message == "Valid customer code is required"

    def test_lowercase_type_rejected_on_upload(self, image_base64):
        result = validate_measure_request(self._request(image_base64, measure_type="water"))
        assert result.error_message == "Measure type must be WATER or GAS"

    def test_bad_datetime(self, image_base64, mock_settings):
        result = validate_measure_request(self._request(image_base64, measure_datetime="yesterday"))
        assert result.is_valid is False
        assert "measure_datetime" in result.error_message

    def test_datetime_optional(self, image_base64):
        result = validate_measure_request(self._request(image_base64, measure_datetime=None))
        assert result.is_valid is True

    def test_plain_object_accepted(self, image_base64):
        request = SimpleNamespace(image=image_base64, customer_code="C1", measure_type="GAS")
        assert validate_measure_request(request).is_valid is True
