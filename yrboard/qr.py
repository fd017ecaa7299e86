import html
import io
import os
import re
from urllib.parse import urlencode

import qrcode
import qrcode.image.svg

from yrboard.logs import log

# Used when the page address is unknown or is a local file.
FALLBACK_BASE_URL = "https://leamus76.github.io/norwegian-weather-app"
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")
QR_IMAGE_API = "https://chart.googleapis.com/chart"
QR_SIZE_PX = 80

_XML_DECL_RE = re.compile(r"^\s*<\?xml[^>]*\?>\s*")


def build_deep_link(city_key: str, base_url: str | None = None) -> str:
    """
    Link that opens the mobile city picker for `city_key`.

    PUBLIC_BASE_URL overrides the page address passed as `base_url`.
    """
    base = PUBLIC_BASE_URL or base_url or FALLBACK_BASE_URL
    if base.startswith("file:"):
        base = FALLBACK_BASE_URL
    base = base.split("?", 1)[0].split("#", 1)[0]
    return f"{base}?{urlencode({'mobile': 'true', 'city': city_key})}"


def render_qr_svg(url: str) -> str:
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        border=1,
        image_factory=qrcode.image.svg.SvgPathImage,
    )
    qr.add_data(url)
    qr.make(fit=True)
    buf = io.BytesIO()
    qr.make_image().save(buf)
    return _XML_DECL_RE.sub("", buf.getvalue().decode("utf-8"))


def fallback_image_url(url: str) -> str:
    params = {"chs": f"{QR_SIZE_PX}x{QR_SIZE_PX}", "cht": "qr", "chl": url}
    return f"{QR_IMAGE_API}?{urlencode(params)}"


def qr_markup(url: str, renderer=render_qr_svg) -> str:
    """
    HTML for the QR code: inline SVG, or a remote QR image if local rendering fails.
    """
    try:
        svg = renderer(url)
    except Exception as e:
        log(f"QR code generation failed, using fallback: {repr(e)}")
        return (
            f"<div class=\"qr-code\"><img src=\"{html.escape(fallback_image_url(url))}\" "
            f"alt=\"QR-kode\" title=\"{html.escape(url)}\" /></div>"
        )
    return f"<div class=\"qr-code\">{svg}</div>"
