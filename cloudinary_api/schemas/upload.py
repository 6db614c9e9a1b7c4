"""Pydantic schemas for Upload API payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from cloudinary_api.schemas.common import ApiParams
from cloudinary_api.schemas.common import ApiResult
from cloudinary_api.schemas.common import AssetType
from cloudinary_api.schemas.common import CldApiArray
from cloudinary_api.schemas.common import Coordinates
from cloudinary_api.schemas.common import DeliveryType
from cloudinary_api.schemas.common import OpaqueJson
from cloudinary_api.schemas.common import path_field


class UploadParams(ApiParams):
    """Options for uploading a new asset."""

    asset_type: AssetType = path_field(AssetType.AUTO)
    delivery_type: DeliveryType | None = Field(None, alias="type")
    public_id: str = ""
    folder: str = ""
    upload_preset: str = ""
    use_filename: bool = False
    invalidate: bool = False
    backup: bool = False
    run_async: bool = Field(False, alias="async")
    tags: CldApiArray = Field(default_factory=list)
    context: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
    face_coordinates: Coordinates = Field(default_factory=list)
    custom_coordinates: Coordinates = Field(default_factory=list)
    format: str = ""
    transformation: str = ""
    eager: str = ""
    eager_async: bool = False
    notification_url: str = ""
    moderation: str = ""
    faces: bool = False
    colors: bool = False
    image_metadata: bool = False
    phash: bool = False
    quality_analysis: bool = False


class UploadResult(ApiResult):
    """Details of a newly stored asset."""

    asset_id: str = ""
    public_id: str = ""
    version: int = 0
    version_id: str = ""
    signature: str = ""
    width: int = 0
    height: int = 0
    format: str = ""
    resource_type: str = ""
    type: str = ""
    created_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    pages: int = 0
    bytes: int = 0
    etag: str = ""
    placeholder: bool = False
    url: str = ""
    secure_url: str = ""
    access_mode: str = ""
    overwritten: bool = False
    original_filename: str = ""
    context: OpaqueJson | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    faces: OpaqueJson | None = None
    colors: OpaqueJson | None = None
    eager: OpaqueJson | None = None
    moderation: OpaqueJson | None = None
    phash: str = ""


class DestroyParams(ApiParams):
    """Selects one asset to delete through the upload API."""

    asset_type: AssetType = path_field(AssetType.IMAGE)
    public_id: str = ""
    delivery_type: DeliveryType | None = Field(None, alias="type")
    invalidate: bool = False


class DestroyResult(ApiResult):
    result: str = ""
