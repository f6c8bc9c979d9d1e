"""Helpers for building seed content without touching the database."""

import io
from random import choice

from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image, ImageDraw

from .seed_data import image_palette


def make_post_image(name: str, size=(640, 640)) -> SimpleUploadedFile:
    """Render a flat-colour JPEG with a couple of shapes on it."""
    image = Image.new("RGB", size, choice(image_palette))
    draw = ImageDraw.Draw(image)
    width, height = size
    draw.ellipse(
        (width // 4, height // 4, 3 * width // 4, 3 * height // 4),
        fill=choice(image_palette),
    )
    draw.rectangle((0, height - height // 6, width, height), fill=choice(image_palette))
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=80)
    return SimpleUploadedFile(name=name, content=buffer.getvalue(), content_type="image/jpeg")


def create_username(first_name, last_name):
    """Build a simple lowercase username from a name."""
    return (first_name + last_name).lower()[:30]


def create_email(first_name, last_name):
    """Build a deterministic email for seeded users."""
    return first_name.lower() + '.' + last_name.lower() + '@example.org'
