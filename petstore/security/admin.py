"""
Admin role checks

Product management endpoints require the admin key in the X-Admin-Key header.
Requests without the header are unauthenticated; a wrong key is forbidden.
"""

import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, Depends

from ..core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class AdminDependency:
    """
    FastAPI dependency that admits only the admin role.

    The expected key is read from settings on every call so that tests and
    deployments can override it.
    """

    async def __call__(
        self,
        x_admin_key: Optional[str] = Header(None),
        settings: Settings = Depends(get_settings),
    ) -> None:
        if not settings.admin_enabled:
            raise HTTPException(
                status_code=403,
                detail="Admin endpoints are disabled",
            )

        if not x_admin_key:
            raise HTTPException(
                status_code=401,
                detail="This endpoint requires the admin key",
            )

        # Header values arrive latin-1 decoded and may not be ASCII
        if not hmac.compare_digest(x_admin_key.encode(), settings.admin_api_key.encode()):
            logger.warning("Rejected admin request with an invalid key")
            raise HTTPException(
                status_code=403,
                detail="Invalid admin key",
            )


require_admin = AdminDependency()
