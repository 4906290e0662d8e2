"""
Tests pour ResponseEnvelope et ApiErrorInfo.
"""

import pytest

from metatube.core.value_objects import ApiErrorInfo, ResponseEnvelope


class TestResponseEnvelope:
    """Tests pour ResponseEnvelope.from_json."""

    def test_data_is_passed_through(self):
        payload = {"data": {"id": "1", "extra": {"nested": True}}, "error": None}
        envelope = ResponseEnvelope.from_json(payload)
        assert envelope.data is payload["data"]
        assert envelope.error is None

    def test_error_is_parsed(self):
        envelope = ResponseEnvelope.from_json(
            {"data": None, "error": {"code": "not_found", "message": "x"}}
        )
        assert envelope.data is None
        assert envelope.error == ApiErrorInfo(code="not_found", message="x")

    def test_missing_fields_are_none(self):
        envelope = ResponseEnvelope.from_json({})
        assert envelope.data is None
        assert envelope.error is None

    def test_error_without_message(self):
        envelope = ResponseEnvelope.from_json({"error": {"code": 500}})
        assert envelope.error == ApiErrorInfo(code=500, message=None)

    @pytest.mark.parametrize("payload", [[], "text", 42, None])
    def test_rejects_non_object(self, payload):
        with pytest.raises(ValueError):
            ResponseEnvelope.from_json(payload)

    def test_rejects_non_object_error(self):
        with pytest.raises(ValueError):
            ResponseEnvelope.from_json({"data": None, "error": "boom"})
