"""Preview screenshots — encode for storage on the template row."""
from PIL import Image
import io
import base64


def _data_url(mime: str, data: bytes) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode()}"


def screenshot_to_data_url(screenshot_bytes: bytes, compress: bool = False,
                           max_width: int = 1280, quality: int = 75) -> str:
    """
    Return the screenshot as a data: URL.

    By default the PNG is stored as captured. With `compress`, the preview is
    shrunk to at most `max_width` pixels wide and re-encoded as JPEG, which
    keeps template rows small when many extracted templates are listed.
    """
    if not compress:
        return _data_url("image/png", screenshot_bytes)

    with Image.open(io.BytesIO(screenshot_bytes)) as shot:
        preview = Image.new("RGB", shot.size, (255, 255, 255))
        rgba = shot.convert("RGBA")
        preview.paste(rgba, mask=rgba.getchannel("A"))

    if preview.width > max_width:
        preview.thumbnail((max_width, preview.height))

    buf = io.BytesIO()
    preview.save(buf, format="JPEG", quality=quality, optimize=True)
    return _data_url("image/jpeg", buf.getvalue())
