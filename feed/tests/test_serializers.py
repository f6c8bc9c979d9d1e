from django.test import RequestFactory, TestCase

from feed.models import Post
from feed.serializers import PostSerializer, UserSerializer
from feed.tests.helpers import TemporaryMediaMixin, make_like, make_post, make_user


class PostSerializerTests(TemporaryMediaMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.owner = make_user(username="owner")
        self.fan = make_user(username="fan")
        self.post = make_post(user=self.owner)
        make_like(post=self.post, user=self.fan)

    def serialize(self, post, user):
        request = RequestFactory().get("/")
        request.user = user
        return PostSerializer(post, context={"request": request}).data

    def test_is_liked_falls_back_to_request_user(self):
        post = Post.objects.get(pk=self.post.pk)
        self.assertTrue(self.serialize(post, self.fan)["isLiked"])
        self.assertFalse(self.serialize(post, self.owner)["isLiked"])

    def test_is_liked_prefers_annotation(self):
        self.post.is_liked = False
        self.assertFalse(self.serialize(self.post, self.fan)["isLiked"])

    def test_image_is_write_only(self):
        data = self.serialize(self.post, self.owner)
        self.assertNotIn("image", data)
        self.assertEqual(data["image_path"], self.post.image.name)
        self.assertTrue(data["image_url"].startswith("/media/posts/"))


class UserSerializerTests(TestCase):
    def test_fields(self):
        user = make_user(username="johndoe", email="john@example.org", name="John Doe")
        data = UserSerializer(user).data
        self.assertEqual(set(data), {"id", "name", "email", "username", "date_joined"})
        self.assertNotIn("password", data)
