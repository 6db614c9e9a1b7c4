"""Unit tests for URL path construction."""

from __future__ import annotations

from cloudinary_api.pipeline.paths import build_path
from cloudinary_api.schemas.common import AssetType
from cloudinary_api.schemas.common import DeliveryType


def test_build_path_joins_enum_and_string_segments() -> None:
    path = build_path("resources", AssetType.IMAGE, DeliveryType.UPLOAD, "sample")

    assert path == "resources/image/upload/sample"


def test_build_path_skips_empty_segments() -> None:
    assert build_path("resources", "", "sample") == build_path("resources", "sample")
    assert build_path("resources", None, AssetType.VIDEO, "") == "resources/video"
    assert "//" not in build_path("a", "", "", "b")


def test_build_path_without_segments_is_empty() -> None:
    assert build_path() == ""
    assert build_path("", None) == ""


def test_build_path_keeps_folder_separators_and_escapes_reserved_characters() -> None:
    assert build_path("resources", "folder/sub/sample") == "resources/folder/sub/sample"
    assert build_path("resources", "my image?#1") == "resources/my%20image%3F%231"
