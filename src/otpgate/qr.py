"""PNG QR codes for enrollment URIs."""

from __future__ import annotations

import io

import qrcode
from qrcode.image.pil import PilImage

MIN_DIMENSION = 200


def render_png(data: str, min_dimension: int = MIN_DIMENSION) -> bytes:
    """Render `data` as a PNG QR code at least `min_dimension` pixels wide."""
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=1,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)
    modules = qr.modules_count + 2 * qr.border
    qr.box_size = max(1, -(-min_dimension // modules))

    img = qr.make_image(image_factory=PilImage)
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()
