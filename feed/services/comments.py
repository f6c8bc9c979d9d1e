"""Service helpers for creating, editing and deleting comments."""

from django.shortcuts import get_object_or_404

from feed.models import Comment
from feed.repos.post_repo import PostRepo
from feed.serializers import CommentSerializer


class CommentService:
    """Encapsulate comment CRUD for posts."""

    def __init__(self, post_repo=None):
        self.post_repo = post_repo or PostRepo()

    def fetch(self, comment_id):
        """Fetch a comment by id or raise 404."""
        return get_object_or_404(Comment.objects.select_related("user"), id=comment_id)

    def belongs_to(self, comment, post):
        """Return True when the comment hangs off the given post."""
        return comment.post_id == post.pk

    def can_modify(self, comment, user):
        """Return True when the user owns the comment."""
        return comment.user_id == getattr(user, "pk", None)

    def create_comment(self, post, user, form):
        """Create a comment from a validated form."""
        comment = form.save(commit=False)
        comment.post = post
        comment.user = user
        comment.save()
        return comment

    def update_comment(self, comment, form):
        """Persist an edited comment from a validated form."""
        return form.save()

    def delete_comment(self, comment):
        """Delete the given comment and return its post id."""
        post_id = comment.post_id
        comment.delete()
        return post_id

    def comments_payload(self, post):
        """Return the post's comments newest first, serialized."""
        return CommentSerializer(self.post_repo.comments_for(post), many=True).data
