import io

import pytest
from PIL import Image, ImageDraw

from assetgen import create_app


def png_bytes(size=(1200, 1200), color=(255, 0, 0, 255), mode="RGBA"):
    im = Image.new(mode, size, color)
    buf = io.BytesIO()
    im.save(buf, format="PNG")
    return buf.getvalue()


def logo_with_transparent_corners(size=1200, color=(30, 120, 200, 255)):
    """Opaque disc on a transparent square."""
    im = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    margin = size // 8
    ImageDraw.Draw(im).ellipse((margin, margin, size - margin, size - margin), fill=color)
    buf = io.BytesIO()
    im.save(buf, format="PNG")
    return buf.getvalue()


def truncated_png(size=1024, cut=200000):
    """Noise PNG with the tail of its pixel data cut off; the header stays valid."""
    im = Image.effect_noise((size, size), 64).convert("RGB")
    buf = io.BytesIO()
    im.save(buf, format="PNG")
    data = buf.getvalue()
    return data[:len(data) - cut]


def decode(data):
    im = Image.open(io.BytesIO(data))
    im.load()
    return im


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "RATELIMIT_ENABLED": False,
        "WTF_CSRF_ENABLED": False,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logo_png():
    return png_bytes()
