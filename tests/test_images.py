import io

from PIL import Image

from apps.projects.adapters.images import decode_image_or_placeholder, make_thumbnail, placeholder_png


def open_png(data):
    image = Image.open(io.BytesIO(data))
    assert image.format == 'PNG'
    return image


def test_thumbnail_is_square_png_of_configured_size(png_bytes, settings):
    settings.SPLITUP_THUMBNAIL_SIZE = 300
    thumb = open_png(make_thumbnail(png_bytes))
    assert thumb.size == (300, 300)


def test_thumbnail_size_can_be_overridden(png_bytes):
    assert open_png(make_thumbnail(png_bytes, size=64)).size == (64, 64)


def test_thumbnail_of_undecodable_bytes_is_placeholder():
    thumb = make_thumbnail(b"definitely not an image", size=32)
    assert thumb == placeholder_png(32)
    assert open_png(thumb).size == (32, 32)


def test_decode_falls_back_to_placeholder(settings):
    settings.SPLITUP_THUMBNAIL_SIZE = 16
    assert decode_image_or_placeholder(b"") == placeholder_png(16)
    assert decode_image_or_placeholder(b"\x00\x01garbage") == placeholder_png(16)


def test_decode_keeps_real_image_dimensions(png_bytes):
    assert open_png(decode_image_or_placeholder(png_bytes)).size == (640, 480)
