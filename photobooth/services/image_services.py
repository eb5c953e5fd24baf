import io
import logging

from PIL import Image, UnidentifiedImageError
from pillow_heif import register_heif_opener

logger = logging.getLogger(__name__)
register_heif_opener()

MAX_DIMENSION = 4096
MAX_PIXELS = 50_000_000


class InvalidImageError(Exception):
    pass


def normalize_capture(contents: bytes, quality: int = 90) -> bytes:
    """Decode a captured frame (JPEG, PNG, WebP or HEIC) and re-encode it as JPEG."""
    if not contents:
        raise InvalidImageError("Empty image")
    try:
        with io.BytesIO(contents) as source:
            image = Image.open(source)
            width, height = image.size
            if width * height > MAX_PIXELS:
                raise InvalidImageError(f"Image too large: {width}x{height}")
            image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise InvalidImageError(f"Unable to read image: {e}")

    if max(image.size) > MAX_DIMENSION:
        image.thumbnail((MAX_DIMENSION, MAX_DIMENSION))

    output_io = io.BytesIO()
    image.convert('RGB').save(output_io, format='JPEG', quality=quality)
    logger.debug(f"Normalized {image.format or 'image'} {image.size} to JPEG")
    return output_io.getvalue()
