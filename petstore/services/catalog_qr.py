"""QR code linking customers to the catalog"""

import io

import qrcode
from qrcode.image.pil import PilImage
from PIL import Image

QR_FILENAME = "pet-store-catalog-qr.png"


def generate_catalog_qr(url: str, width: int = 400, border: int = 2) -> bytes:
    """
    Render a cyan-on-black QR code for a URL.

    Args:
        url: Catalog URL to encode
        width: Output image width and height in pixels
        border: Quiet zone around the code, in modules

    Returns:
        PNG image bytes
    """
    qr = qrcode.QRCode(border=border, image_factory=PilImage)
    qr.add_data(url)
    qr.make(fit=True)

    image = qr.make_image(fill_color="#00ffff", back_color="#000000").get_image()
    image = image.convert("RGB").resize((width, width), Image.Resampling.NEAREST)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
