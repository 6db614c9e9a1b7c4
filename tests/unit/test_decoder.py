"""Unit tests for response decoding into typed results."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone
import json

import pytest

from cloudinary_api.core.errors import DecodeError
from cloudinary_api.pipeline.decoder import decode_response
from cloudinary_api.pipeline.dispatcher import RawResponse
from cloudinary_api.pipeline.encoder import encode_body
from cloudinary_api.schemas.admin import AssetResult
from cloudinary_api.schemas.admin import ListAssetsResult
from cloudinary_api.schemas.admin import UpdateAssetParams
from cloudinary_api.schemas.common import ModerationStatus
from cloudinary_api.schemas.common import OpaqueJson


def _raw(status_code: int, body: object) -> RawResponse:
    return RawResponse(status_code=status_code, body=json.dumps(body).encode("utf-8"))


def test_decodes_fields_by_wire_name_and_ignores_unknown_keys() -> None:
    raw = _raw(
        200,
        {
            "public_id": "sample",
            "bytes": 120253,
            "created_at": "2021-05-10T12:00:00Z",
            "tags": ["a", "b"],
            "brand_new_field": {"nested": True},
        },
    )

    result = decode_response(raw, AssetResult)

    assert result.public_id == "sample"
    assert result.bytes == 120253
    assert result.created_at == datetime(2021, 5, 10, 12, 0, tzinfo=timezone.utc)
    assert result.tags == ["a", "b"]
    assert result.error is None
    assert not result.failed
    assert not hasattr(result, "brand_new_field")


def test_missing_optional_fields_are_not_an_error() -> None:
    result = decode_response(_raw(200, {"public_id": "sample"}), AssetResult)

    assert result.width == 0
    assert result.faces is None
    assert result.quality_analysis.focus == 0.0


def test_null_values_fall_back_to_field_defaults() -> None:
    raw = _raw(
        200,
        {
            "public_id": "sample",
            "next_cursor": None,
            "tags": None,
            "width": None,
            "metadata": None,
            "faces": None,
            "quality_analysis": {"focus": None, "noise": 0.4},
        },
    )

    result = decode_response(raw, AssetResult)

    assert result.public_id == "sample"
    assert result.next_cursor == ""
    assert result.tags == []
    assert result.width == 0
    assert result.metadata == {}
    assert result.faces is None
    assert result.quality_analysis.focus == 0.0
    assert result.quality_analysis.noise == 0.4

    page = decode_response(_raw(200, {"resources": [], "next_cursor": None}), ListAssetsResult)
    assert page.assets == []
    assert page.next_cursor == ""


def test_null_error_message_on_failed_status_gets_synthetic_message() -> None:
    result = decode_response(_raw(500, {"error": {"message": None}}), AssetResult)

    assert result.error.message == "Request failed with status 500"


def test_loosely_typed_fields_are_kept_as_opaque_json() -> None:
    raw = _raw(
        200,
        {
            "faces": [[98, 74, 61, 83], [140, 130, 52, 71]],
            "colors": [["#162E02", 6.7], ["#385B0C", 6.3]],
            "predominant": {"google": [["yellow", 52.0]]},
            "exif": {"Make": "Canon"},
        },
    )

    result = decode_response(raw, AssetResult)

    assert isinstance(result.faces, OpaqueJson)
    assert result.faces == [[98, 74, 61, 83], [140, 130, 52, 71]]
    assert result.colors.value[0] == ["#162E02", 6.7]
    assert result.predominant.google == [["yellow", 52.0]]
    assert result.exif.value == {"Make": "Canon"}
    assert result.model_dump()["faces"] == [[98, 74, 61, 83], [140, 130, 52, 71]]


def test_error_status_populates_error_record() -> None:
    raw = _raw(404, {"error": {"message": "Resource not found - sample"}})

    result = decode_response(raw, AssetResult)

    assert result.failed
    assert result.error.message == "Resource not found - sample"
    assert result.error.http_code == 404


def test_error_status_without_json_body_gets_synthetic_message() -> None:
    result = decode_response(RawResponse(status_code=502, body=b"<html>Bad Gateway</html>"), AssetResult)
    assert result.error.message == "<html>Bad Gateway</html>"
    assert result.error.http_code == 502

    empty = decode_response(RawResponse(status_code=500, body=b""), AssetResult)
    assert empty.error.message == "Request failed with status 500"


def test_error_record_and_populated_fields_coexist() -> None:
    raw = _raw(
        200,
        {
            "public_id": "sample",
            "bytes": 10,
            "error": {"message": "Quality analysis unavailable for this asset"},
        },
    )

    result = decode_response(raw, AssetResult)

    assert result.public_id == "sample"
    assert result.bytes == 10
    assert result.failed
    assert result.error.message == "Quality analysis unavailable for this asset"
    assert result.error.http_code == 0


def test_invalid_json_raises_decode_error() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_response(RawResponse(status_code=200, body=b"{not json"), AssetResult)

    assert isinstance(excinfo.value.result, AssetResult)
    assert excinfo.value.status_code == 200


def test_non_object_payload_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_response(_raw(200, ["sample"]), AssetResult)
    with pytest.raises(DecodeError):
        decode_response(RawResponse(status_code=200, body=b""), AssetResult)


def test_scalar_type_mismatch_raises_with_partial_result() -> None:
    raw = _raw(200, {"public_id": "sample", "bytes": "a lot", "width": 640})

    with pytest.raises(DecodeError) as excinfo:
        decode_response(raw, AssetResult)

    partial = excinfo.value.result
    assert partial.public_id == "sample"
    assert partial.width == 640
    assert partial.bytes == 0
    assert "bytes" in str(excinfo.value)


def test_aliased_result_fields_decode_from_wire_name() -> None:
    raw = _raw(200, {"resources": [{"public_id": "a"}, {"public_id": "b"}], "next_cursor": "c2"})

    result = decode_response(raw, ListAssetsResult)

    assert [asset.public_id for asset in result.assets] == ["a", "b"]
    assert result.next_cursor == "c2"


def test_echoed_fields_round_trip() -> None:
    params = UpdateAssetParams(
        public_id="sample",
        context={"alt": "A sample"},
        moderation_status=ModerationStatus.APPROVED,
    )
    echoed = encode_body(params)

    result = decode_response(_raw(200, {"public_id": params.public_id, **echoed}), AssetResult)

    assert result.public_id == params.public_id
    assert result.context == params.context
    assert result.moderation_status == params.moderation_status.value
