# Storefront services

from .pricing import resolve_price, ResolvedPrice
from .receipt import ReceiptGenerator, ReceiptLayout, Receipt, ReceiptError, format_money
from .catalog_qr import generate_catalog_qr, QR_FILENAME

__all__ = [
    "resolve_price",
    "ResolvedPrice",
    "ReceiptGenerator",
    "ReceiptLayout",
    "Receipt",
    "ReceiptError",
    "format_money",
    "generate_catalog_qr",
    "QR_FILENAME",
]
