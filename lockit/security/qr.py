# lockit/security/qr.py
import base64
import io

import qrcode


def render_png_base64(uri: str) -> str:
    """
    Generate a QR code image of `uri` as Base64-encoded PNG.

    Frontend can display this directly using: <img src="data:image/png;base64,{result}">
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4,
    )
    qr.add_data(uri)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")
