"""Catalog sharing routes"""

from fastapi import APIRouter, Depends, Response

from ..core.config import Settings, get_settings
from ..services.catalog_qr import generate_catalog_qr, QR_FILENAME

router = APIRouter(prefix="/api/catalog", tags=["Catalog"])


@router.get("/qr")
async def catalog_qr(settings: Settings = Depends(get_settings)):
    """QR code that opens the catalog"""
    png = generate_catalog_qr(
        settings.catalog_url,
        width=settings.qr_width,
        border=settings.qr_border,
    )
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{QR_FILENAME}"'},
    )
