from unittest.mock import MagicMock, patch

from django.core.files.storage import default_storage
from django.test import TestCase
from django.utils.datastructures import MultiValueDict

from feed.forms import PostForm
from feed.models import Comment, Like, Post
from feed.services import PostService
from feed.tests.helpers import (
    TemporaryMediaMixin,
    make_comment,
    make_image,
    make_like,
    make_post,
    make_user,
)


class PostServiceTests(TemporaryMediaMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.service = PostService()
        self.owner = make_user(username="owner")
        self.other = make_user(username="other")
        self.post = make_post(user=self.owner)

    def test_can_modify_only_for_owner(self):
        self.assertTrue(self.service.can_modify(self.post, self.owner))
        self.assertFalse(self.service.can_modify(self.post, self.other))

    def test_create_from_form_assigns_owner_and_stores_image(self):
        form = PostForm(data={"caption": "Hello"}, files=MultiValueDict({"image": [make_image()]}))
        self.assertTrue(form.is_valid(), form.errors)
        post = self.service.create_from_form(form, self.other)
        self.assertEqual(post.user, self.other)
        self.assertTrue(post.image.name.startswith("posts/"))
        self.assertTrue(default_storage.exists(post.image.name))

    def test_update_with_new_image_removes_previous_file(self):
        previous = self.post.image.name
        form = PostForm(
            data={"caption": "Edited"},
            files=MultiValueDict({"image": [make_image("second.png")]}),
            instance=self.post,
        )
        self.assertTrue(form.is_valid(), form.errors)
        post = self.service.update_from_form(form)
        self.assertEqual(post.caption, "Edited")
        self.assertNotEqual(post.image.name, previous)
        self.assertFalse(default_storage.exists(previous))
        self.assertTrue(default_storage.exists(post.image.name))

    def test_update_without_image_keeps_file(self):
        previous = self.post.image.name
        form = PostForm(data={"caption": "Caption only"}, files=MultiValueDict(), instance=self.post)
        self.assertTrue(form.is_valid(), form.errors)
        post = self.service.update_from_form(form)
        self.assertEqual(post.image.name, previous)
        self.assertTrue(default_storage.exists(previous))

    def test_delete_post_removes_comments_likes_and_image(self):
        make_comment(post=self.post, user=self.other)
        make_like(post=self.post, user=self.other)
        image_name = self.post.image.name
        post_id = self.service.delete_post(self.post)
        self.assertFalse(Post.objects.filter(pk=post_id).exists())
        self.assertFalse(Comment.objects.filter(post_id=post_id).exists())
        self.assertFalse(Like.objects.filter(post_id=post_id).exists())
        self.assertFalse(default_storage.exists(image_name))

    def test_delete_post_succeeds_when_storage_fails(self):
        storage = MagicMock()
        storage.delete.side_effect = OSError("disk gone")
        service = PostService(storage=storage)
        with self.assertLogs("feed.services.posts", level="WARNING") as logs:
            service.delete_post(self.post)
        self.assertFalse(Post.objects.filter(pk=self.post.pk).exists())
        self.assertIn("disk gone", logs.output[0])

    def test_delete_post_rolls_back_when_row_delete_fails(self):
        make_comment(post=self.post, user=self.other)
        make_like(post=self.post, user=self.other)
        storage = MagicMock()
        service = PostService(storage=storage)
        with patch.object(Post, "delete", side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                service.delete_post(self.post)
        self.assertTrue(Post.objects.filter(pk=self.post.pk).exists())
        self.assertEqual(Comment.objects.filter(post=self.post).count(), 1)
        self.assertEqual(Like.objects.filter(post=self.post).count(), 1)

    def test_toggle_like_twice_restores_state(self):
        self.assertTrue(self.service.toggle_like(self.other, self.post))
        self.assertEqual(self.post.likes_count, 1)
        self.assertFalse(self.service.toggle_like(self.other, self.post))
        self.assertEqual(self.post.likes_count, 0)

    def test_like_summary(self):
        make_like(post=self.post, user=self.other)
        summary = self.service.like_summary(self.other, self.post)
        self.assertEqual(summary, {"likes": [{"user_id": self.other.pk}], "isLiked": True, "likesCount": 1})
        self.assertFalse(self.service.like_summary(self.owner, self.post)["isLiked"])

    def test_feed_payload_shape(self):
        make_like(post=self.post, user=self.other)
        make_comment(post=self.post, user=self.other, content="Nice shot")
        payload = self.service.feed_payload(self.service.feed_for(self.other))
        self.assertEqual(len(payload), 1)
        item = payload[0]
        self.assertEqual(item["caption"], self.post.caption)
        self.assertTrue(item["image_path"].startswith("posts/"))
        self.assertEqual(item["user"]["id"], self.owner.pk)
        self.assertEqual(item["likesCount"], 1)
        self.assertTrue(item["isLiked"])
        self.assertEqual(item["comments"][0]["content"], "Nice shot")
        self.assertEqual(item["comments"][0]["user"], {"id": self.other.pk, "name": self.other.name})
        self.assertNotIn("image", item)
