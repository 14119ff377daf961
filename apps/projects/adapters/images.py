# apps/projects/adapters/images.py
import io
import logging

from django.conf import settings
from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

PLACEHOLDER_COLOR = (38, 38, 51, 255)  # dark navy, like the app background


def thumbnail_size() -> int:
    return getattr(settings, 'SPLITUP_THUMBNAIL_SIZE', 300)


def _to_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


def placeholder_png(size: int = None) -> bytes:
    size = size or thumbnail_size()
    return _to_png(Image.new('RGBA', (size, size), PLACEHOLDER_COLOR))


def open_image(data: bytes):
    """Decoded image or None when the bytes are not a readable image."""
    if not data:
        return None
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.warning("Could not decode image (%d bytes): %s", len(data), e)
        return None
    return image


def decode_image_or_placeholder(data: bytes) -> bytes:
    """PNG of the stored image, or a placeholder PNG if it does not decode."""
    image = open_image(data)
    if image is None:
        return placeholder_png()
    return _to_png(image.convert('RGBA'))


def make_thumbnail(data: bytes, size: int = None) -> bytes:
    """Square PNG preview: scale to fill, then center-crop."""
    size = size or thumbnail_size()
    image = open_image(data)
    if image is None:
        return placeholder_png(size)
    fitted = ImageOps.fit(image.convert('RGBA'), (size, size), method=Image.LANCZOS)
    return _to_png(fitted)
