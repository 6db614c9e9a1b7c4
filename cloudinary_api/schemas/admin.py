"""Pydantic schemas for Admin API payloads."""

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
from cloudinary_api.schemas.common import Direction
from cloudinary_api.schemas.common import ModerationStatus
from cloudinary_api.schemas.common import OpaqueJson
from cloudinary_api.schemas.common import ResponseModel
from cloudinary_api.schemas.common import path_field


class _Nested(ResponseModel):
    """Nested analysis block of an asset result."""


class PingResult(ApiResult):
    """Response of the connectivity check."""

    status: str = ""


class AssetParams(ApiParams):
    """Parameters for fetching the details of a single asset."""

    asset_type: AssetType = path_field(AssetType.IMAGE)
    delivery_type: DeliveryType = path_field(DeliveryType.UPLOAD)
    public_id: str = path_field("")
    exif: bool = False
    colors: bool = False
    faces: bool = False
    quality_analysis: bool = False
    image_metadata: bool = False
    phash: bool = False
    pages: bool = False
    accessibility_analysis: bool = False
    cinemagraph_analysis: bool = False
    coordinates: bool = False
    max_results: int = 0
    derived_next_cursor: str = ""


class QualityAnalysisResult(_Nested):
    jpeg_quality: float = 0.0
    jpeg_chroma: float = 0.0
    focus: float = 0.0
    noise: float = 0.0
    contrast: float = 0.0
    exposure: float = 0.0
    saturation: float = 0.0
    lighting: float = 0.0
    pixel_score: float = 0.0
    color_score: float = 0.0
    dct: float = 0.0
    blockiness: float = 0.0
    chroma_subsampling: float = 0.0
    resolution: float = 0.0


class ColorblindAccessibilityAnalysis(_Nested):
    distinct_edges: float = 0.0
    distinct_colors: float = 0.0
    most_indistinct_pair: list[str] = Field(default_factory=list)


class AccessibilityAnalysisResult(_Nested):
    colorblind_accessibility_analysis: ColorblindAccessibilityAnalysis = Field(
        default_factory=ColorblindAccessibilityAnalysis,
    )
    colorblind_accessibility_score: float = 0.0


class CinemagraphAnalysisResult(_Nested):
    cinemagraph_score: float = 0.0


class PredominantResult(_Nested):
    google: OpaqueJson | None = None
    cloudinary: OpaqueJson | None = None


class AssetResult(ApiResult):
    """Details of an asset and its derived resources."""

    asset_id: str = ""
    public_id: str = ""
    format: str = ""
    version: int = 0
    resource_type: str = ""
    type: str = ""
    created_at: datetime | None = None
    bytes: int = 0
    width: int = 0
    height: int = 0
    backup: bool = False
    access_mode: str = ""
    url: str = ""
    secure_url: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    context: OpaqueJson | None = None
    tags: list[str] = Field(default_factory=list)
    moderation_status: str = ""
    next_cursor: str = ""
    derived: OpaqueJson | None = None
    etag: str = ""
    image_metadata: dict[str, Any] = Field(default_factory=dict)
    coordinates: OpaqueJson | None = None
    exif: OpaqueJson | None = None
    faces: OpaqueJson | None = None
    illustration_score: float = 0.0
    semi_transparent: bool = False
    grayscale: bool = False
    colors: OpaqueJson | None = None
    predominant: PredominantResult = Field(default_factory=PredominantResult)
    phash: str = ""
    quality_analysis: QualityAnalysisResult = Field(default_factory=QualityAnalysisResult)
    quality_score: float = 0.0
    accessibility_analysis: AccessibilityAnalysisResult = Field(default_factory=AccessibilityAnalysisResult)
    pages: int = 0
    cinemagraph_analysis: CinemagraphAnalysisResult = Field(default_factory=CinemagraphAnalysisResult)
    usage: OpaqueJson | None = None
    original_filename: str = ""


class UpdateAssetParams(ApiParams):
    """Attributes to change on an existing asset."""

    asset_type: AssetType = path_field(AssetType.IMAGE)
    delivery_type: DeliveryType = path_field(DeliveryType.UPLOAD)
    public_id: str = path_field("")
    moderation_status: ModerationStatus | None = None
    raw_convert: str = ""
    ocr: str = ""
    categorization: str = ""
    detection: str = ""
    similarity_search: str = ""
    auto_tagging: float = 0.0
    background_removal: str = ""
    quality_override: int = 0
    notification_url: str = ""
    tags: CldApiArray = Field(default_factory=list)
    context: dict[str, str] = Field(default_factory=dict)
    face_coordinates: Coordinates = Field(default_factory=list)
    custom_coordinates: Coordinates = Field(default_factory=list)
    access_control: OpaqueJson | None = None


class ListAssetsParams(ApiParams):
    """Filters for listing assets of one type and delivery type."""

    asset_type: AssetType = path_field(AssetType.IMAGE)
    delivery_type: DeliveryType | None = path_field(None)
    prefix: str = ""
    public_ids: CldApiArray = Field(default_factory=list)
    max_results: int = 0
    next_cursor: str = ""
    direction: Direction | None = None
    start_at: datetime | None = None
    tags: bool = False
    context: bool = False
    moderations: bool = False
    metadata: bool = False


class ListAssetsResult(ApiResult):
    """One page of listed assets."""

    assets: list[AssetResult] = Field(default_factory=list, alias="resources")
    next_cursor: str = ""


class DeleteAssetsParams(ApiParams):
    """Selects assets to delete by public id."""

    asset_type: AssetType = path_field(AssetType.IMAGE)
    delivery_type: DeliveryType = path_field(DeliveryType.UPLOAD)
    public_ids: list[str] = Field(default_factory=list)
    keep_original: bool = False
    invalidate: bool = False
    next_cursor: str = ""


class DeleteAssetsResult(ApiResult):
    """Per-asset deletion outcome, keyed by public id."""

    deleted: dict[str, str] = Field(default_factory=dict)
    deleted_counts: OpaqueJson | None = None
    partial: bool = False
    next_cursor: str = ""


class UsageResult(ApiResult):
    """Account usage report. Sections are passed through as raw JSON."""

    plan: str = ""
    last_updated: str = ""
    transformations: OpaqueJson | None = None
    objects: OpaqueJson | None = None
    bandwidth: OpaqueJson | None = None
    storage: OpaqueJson | None = None
    credits: OpaqueJson | None = None
    requests: int = 0
    resources: int = 0
    derived_resources: int = 0
