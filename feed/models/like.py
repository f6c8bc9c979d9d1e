"""Model representing a user's like on a post."""

from django.conf import settings
from django.db import models

from .post import Post


class Like(models.Model):
    """Join row between a user and a post they endorsed."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='post_likes',
    )

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name='like_records',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Enforce one like per user/post pair."""
        db_table = 'likes'
        constraints = [
            models.UniqueConstraint(fields=['user', 'post'], name='uniq_like_user_post'),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.post_id}"
