import os

from django import forms

from feed.forms.fields import StringField
from feed.models import Post

MAX_CAPTION_LENGTH = 1000
MAX_IMAGE_UPLOAD_KB = 2048
MAX_IMAGE_UPLOAD_BYTES = MAX_IMAGE_UPLOAD_KB * 1024
ALLOWED_IMAGE_EXTENSIONS = ("jpeg", "png", "jpg", "gif")
ALLOWED_IMAGE_CONTENT_TYPES = ("image/jpeg", "image/png", "image/gif")


def _type_error():
    return forms.ValidationError(
        "The image must be a file of type: %s." % ", ".join(ALLOWED_IMAGE_EXTENSIONS),
        code="invalid_image_type",
    )


def validate_post_image(image):
    """Reject uploads that are not jpeg/png/gif or exceed the size cap."""
    ext = os.path.splitext(getattr(image, "name", "") or "")[1].lstrip(".").lower()
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise _type_error()
    # forms.ImageField sets content_type from the format Pillow detected.
    content_type = getattr(image, "content_type", None)
    if content_type and content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
        raise _type_error()
    if image.size > MAX_IMAGE_UPLOAD_BYTES:
        raise forms.ValidationError(
            f"The image may not be greater than {MAX_IMAGE_UPLOAD_KB} kilobytes.",
            code="image_too_large",
        )


class PostForm(forms.ModelForm):
    """Form for creating and editing posts (caption + image)."""

    caption = StringField(
        label="Caption",
        max_length=MAX_CAPTION_LENGTH,
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Write a caption..."}),
    )

    class Meta:
        """Model/field configuration for PostForm."""
        model = Post
        fields = ["caption", "image"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.original_image_name = None
        # Editing keeps the stored image unless a new one is uploaded.
        if self.is_editing:
            self.fields["image"].required = False
            self.original_image_name = self.instance.image.name or None

    @property
    def is_editing(self):
        return bool(getattr(self.instance, "pk", None))

    @property
    def has_new_image(self):
        """Return True when the submitted data carries a fresh upload."""
        return bool(self.files.get("image"))

    def clean_image(self):
        """Validate the uploaded image type and size."""
        image = self.cleaned_data.get("image")
        if self.has_new_image and image:
            validate_post_image(image)
        return image
