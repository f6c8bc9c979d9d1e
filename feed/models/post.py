"""
Post model

A post is a captioned image published by a user.

- `image` is stored on the default storage under the `posts/` prefix;
  the stored relative name is what clients see as `image_path`.
- `likes` is a many-to-many onto users through the `Like` join table,
  so `post.likes.all()` yields the users who liked the post.
- Comments hang off the post via `related_name="comments"`.
"""

from django.conf import settings
from django.core.validators import MaxLengthValidator
from django.db import models


class Post(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts',
    )

    caption = models.TextField(max_length=1000, validators=[MaxLengthValidator(1000)])
    image = models.ImageField(upload_to='posts/', max_length=255)

    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through='Like',
        related_name='liked_posts',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'posts'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Post {self.pk} by {self.user_id}"

    @property
    def image_path(self):
        return self.image.name if self.image else None

    @property
    def image_url(self):
        if not self.image:
            return None
        try:
            return self.image.url
        except ValueError:
            return None

    @property
    def likes_count(self):
        return self.likes.count()

    def is_liked_by(self, user):
        """Return True when `user` has liked this post."""
        if user is None or not getattr(user, "is_authenticated", False):
            return False
        return self.likes.filter(pk=user.pk).exists()
