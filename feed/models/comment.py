"""Model for user comments on posts."""

from django.conf import settings
from django.core.validators import MaxLengthValidator
from django.db import models

from .post import Post

MAX_COMMENT_LENGTH = 1000


class Comment(models.Model):
    """User-authored comment on a post."""

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name='comments',
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='comments',
    )

    # 1..1000 characters
    content = models.TextField(
        max_length=MAX_COMMENT_LENGTH,
        validators=[MaxLengthValidator(MAX_COMMENT_LENGTH)],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Newest comments first."""
        db_table = 'comments'
        ordering = ['-created_at', '-id']

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.post_id}"
