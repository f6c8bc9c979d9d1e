import io
import shutil
import tempfile
import uuid

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from PIL import Image

from feed.models import Comment, Like, Post, User

JSON_HEADERS = {"HTTP_ACCEPT": "application/json"}


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        name=kwargs.pop("name", "John Doe"),
        **kwargs,
    )


def make_image(name="photo.png", image_format="PNG", size=(2, 2), content_type=None):
    """Return an upload holding a real (tiny) image Pillow can open."""
    buffer = io.BytesIO()
    Image.new("RGB", size, (200, 40, 40)).save(buffer, format=image_format)
    return SimpleUploadedFile(
        name,
        buffer.getvalue(),
        content_type=content_type or f"image/{image_format.lower()}",
    )


def make_post(*, user=None, caption="Sunset at the beach", image=None):
    """Create and return a post with a stored image."""
    if user is None:
        user = make_user()
    return Post.objects.create(user=user, caption=caption, image=image or make_image())


def make_comment(*, post, user, content="Nice!"):
    return Comment.objects.create(post=post, user=user, content=content)


def make_like(*, post, user):
    return Like.objects.create(post=post, user=user)


class TemporaryMediaMixin:
    """Point MEDIA_ROOT at a throwaway directory for the duration of a test."""

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp(prefix="feed-media-")
        media_override = override_settings(MEDIA_ROOT=self.media_root)
        media_override.enable()
        self.addCleanup(media_override.disable)
        self.addCleanup(shutil.rmtree, self.media_root, True)
