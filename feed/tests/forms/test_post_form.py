from unittest.mock import patch

from django import forms
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.utils.datastructures import MultiValueDict

from feed.forms import PostForm
from feed.forms.post_forms import MAX_IMAGE_UPLOAD_BYTES, validate_post_image
from feed.tests.helpers import TemporaryMediaMixin, make_image, make_post, make_user


class PostFormTests(TemporaryMediaMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.user = make_user(username="tester")

    def build_form(self, caption="A caption", image=None, instance=None):
        files = MultiValueDict({"image": [image]}) if image is not None else MultiValueDict()
        return PostForm(data={"caption": caption}, files=files, instance=instance)

    def test_valid_with_caption_and_png(self):
        form = self.build_form(image=make_image())
        self.assertTrue(form.is_valid(), form.errors)

    def test_accepts_jpeg_and_gif(self):
        for name, fmt in (("a.jpg", "JPEG"), ("a.jpeg", "JPEG"), ("a.gif", "GIF")):
            with self.subTest(name=name):
                form = self.build_form(image=make_image(name, fmt))
                self.assertTrue(form.is_valid(), form.errors)

    def test_caption_is_required(self):
        form = self.build_form(caption="", image=make_image())
        self.assertFalse(form.is_valid())
        self.assertIn("caption", form.errors)

    def test_caption_capped_at_1000_characters(self):
        self.assertTrue(self.build_form(caption="x" * 1000, image=make_image()).is_valid())
        form = self.build_form(caption="x" * 1001, image=make_image())
        self.assertFalse(form.is_valid())
        self.assertIn("caption", form.errors)

    def test_image_required_on_create(self):
        form = self.build_form()
        self.assertFalse(form.is_valid())
        self.assertIn("image", form.errors)

    def test_rejects_non_image_upload(self):
        upload = SimpleUploadedFile("notes.txt", b"plain text", content_type="text/plain")
        form = self.build_form(image=upload)
        self.assertFalse(form.is_valid())
        self.assertIn("image", form.errors)

    def test_rejects_image_with_disallowed_type(self):
        form = self.build_form(image=make_image("photo.bmp", "BMP"))
        self.assertFalse(form.is_valid())
        self.assertIn("image", form.errors)

    @patch("feed.forms.post_forms.MAX_IMAGE_UPLOAD_BYTES", 10)
    def test_rejects_oversized_image(self):
        form = self.build_form(image=make_image())
        self.assertFalse(form.is_valid())
        self.assertIn("kilobytes", form.errors["image"][0])

    def test_image_optional_when_editing(self):
        post = make_post(user=self.user)
        form = self.build_form(caption="Edited", instance=post)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertFalse(form.has_new_image)
        self.assertEqual(form.original_image_name, post.image.name)

    def test_editing_with_new_image_flags_replacement(self):
        post = make_post(user=self.user)
        form = self.build_form(caption="Edited", image=make_image("new.png"), instance=post)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertTrue(form.has_new_image)


class ValidatePostImageTests(TestCase):
    def test_size_limit_is_2048_kilobytes(self):
        self.assertEqual(MAX_IMAGE_UPLOAD_BYTES, 2048 * 1024)

    def test_oversized_upload_rejected(self):
        upload = SimpleUploadedFile("big.png", b"x" * (MAX_IMAGE_UPLOAD_BYTES + 1), content_type="image/png")
        with self.assertRaises(forms.ValidationError) as ctx:
            validate_post_image(upload)
        self.assertIn("2048", str(ctx.exception))

    def test_extension_checked_case_insensitively(self):
        validate_post_image(SimpleUploadedFile("PHOTO.JPG", b"x", content_type="image/jpeg"))

    def test_unknown_extension_rejected(self):
        with self.assertRaises(forms.ValidationError):
            validate_post_image(SimpleUploadedFile("photo.webp", b"x", content_type="image/webp"))
