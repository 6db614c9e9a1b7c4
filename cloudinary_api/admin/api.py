"""Admin API endpoint group: manage the assets stored in an account.

See https://cloudinary.com/documentation/admin_api
"""

from __future__ import annotations

import logging

from cloudinary_api.core.context import CallContext
from cloudinary_api.pipeline.dispatcher import Dispatcher
from cloudinary_api.pipeline.endpoint import DELETE
from cloudinary_api.pipeline.endpoint import GET
from cloudinary_api.pipeline.endpoint import POST
from cloudinary_api.pipeline.endpoint import invoke
from cloudinary_api.schemas.admin import AssetParams
from cloudinary_api.schemas.admin import AssetResult
from cloudinary_api.schemas.admin import DeleteAssetsParams
from cloudinary_api.schemas.admin import DeleteAssetsResult
from cloudinary_api.schemas.admin import ListAssetsParams
from cloudinary_api.schemas.admin import ListAssetsResult
from cloudinary_api.schemas.admin import PingResult
from cloudinary_api.schemas.admin import UpdateAssetParams
from cloudinary_api.schemas.admin import UsageResult

logger = logging.getLogger(__name__)

ASSETS = "resources"
PING = "ping"
USAGE = "usage"


class AdminApi:
    """Admin API operations sharing one dispatcher."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def ping(self, ctx: CallContext) -> PingResult:
        """Check that the service is reachable and the credentials are accepted."""
        return invoke(self._dispatcher, ctx, GET, [PING], None, PingResult)

    def asset(self, ctx: CallContext, params: AssetParams) -> AssetResult:
        """Return the details of one asset and all its derived resources.

        The upload API's ``explicit`` call returns the same information without
        being rate limited, when only the original asset matters.
        """
        if not params.public_id:
            raise ValueError("public_id is required")
        return invoke(
            self._dispatcher,
            ctx,
            GET,
            [ASSETS, params.asset_type, params.delivery_type, params.public_id],
            params,
            AssetResult,
        )

    def assets(self, ctx: CallContext, params: ListAssetsParams | None = None) -> ListAssetsResult:
        """List assets of one asset type, optionally narrowed to a delivery type."""
        params = params or ListAssetsParams()
        return invoke(
            self._dispatcher,
            ctx,
            GET,
            [ASSETS, params.asset_type, params.delivery_type],
            params,
            ListAssetsResult,
        )

    def update_asset(self, ctx: CallContext, params: UpdateAssetParams) -> AssetResult:
        """Update one or more attributes of an existing asset."""
        if not params.public_id:
            raise ValueError("public_id is required")
        return invoke(
            self._dispatcher,
            ctx,
            POST,
            [ASSETS, params.asset_type, params.delivery_type, params.public_id],
            params,
            AssetResult,
        )

    def delete_assets(self, ctx: CallContext, params: DeleteAssetsParams) -> DeleteAssetsResult:
        """Delete assets by public id.

        Large deletions are processed in batches: ``partial`` is set and
        ``next_cursor`` must be passed back to continue.
        """
        if not params.public_ids:
            raise ValueError("public_ids is required")
        result = invoke(
            self._dispatcher,
            ctx,
            DELETE,
            [ASSETS, params.asset_type, params.delivery_type],
            params,
            DeleteAssetsResult,
        )
        if result.partial:
            logger.info("Partial deletion, continue with next_cursor=%s", result.next_cursor)
        return result

    def usage(self, ctx: CallContext) -> UsageResult:
        """Return the account's usage report."""
        return invoke(self._dispatcher, ctx, GET, [USAGE], None, UsageResult)
