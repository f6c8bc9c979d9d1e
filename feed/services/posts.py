"""Service helpers for post creation, updates, deletion and likes."""

import logging

from django.core.files.storage import default_storage
from django.db import transaction

from feed.models import Like, Post
from feed.repos.post_repo import PostRepo
from feed.serializers import PostSerializer

logger = logging.getLogger(__name__)


class PostService:
    """Encapsulate post lifecycle and engagement operations."""

    def __init__(self, post_repo=None, storage=None):
        self.post_repo = post_repo or PostRepo()
        self.storage = storage or default_storage

    def feed_for(self, viewer):
        """Return every post, newest first, annotated for the viewer."""
        return self.post_repo.list_for_feed(viewer)

    def detail_for(self, post, viewer):
        """Reload `post` with author, likes and comments for display."""
        return self.post_repo.get_detailed(post.pk, viewer)

    def can_modify(self, post, user):
        """Return True when the user owns the post."""
        return post.user_id == getattr(user, "pk", None)

    def create_from_form(self, form, user):
        """Store the uploaded image and insert the post row."""
        post = form.save(commit=False)
        post.user = user
        post.save()
        logger.info("Post %s created by user %s", post.pk, user.pk)
        return post

    def update_from_form(self, form):
        """Save caption/image changes, deleting a replaced image file."""
        post = form.save()
        if form.has_new_image:
            self.discard_replaced_image(form.original_image_name, post)
        return post

    def discard_replaced_image(self, previous_name, post):
        """Delete the old stored file once a post points at a new one."""
        if previous_name and previous_name != post.image.name:
            self.delete_image_file(previous_name)

    def delete_post(self, post):
        """
        Delete a post together with its comments and likes.

        Runs in one transaction. The stored image is removed on a best-effort
        basis: a storage failure is logged and the deletion still proceeds.
        """
        post_id = post.pk
        image_name = post.image.name
        with transaction.atomic():
            post.comments.all().delete()
            Like.objects.filter(post=post).delete()
            if image_name:
                self.delete_image_file(image_name)
            post.delete()
        logger.info("Post %s deleted", post_id)
        return post_id

    def delete_image_file(self, name):
        """Remove a stored image, logging instead of raising on failure."""
        try:
            self.storage.delete(name)
        except Exception as error:
            logger.warning("Error deleting post image %s: %s", name, error)
            return False
        return True

    def toggle_like(self, user, post):
        """Toggle like/unlike for a post; return True when now liked."""
        existing = Like.objects.filter(user=user, post=post)
        if existing.exists():
            existing.delete()
            return False
        Like.objects.create(user=user, post=post)
        return True

    def like_summary(self, user, post):
        """Return the like state payload sent back after a toggle."""
        liker_ids = list(post.likes.values_list("id", flat=True))
        return {
            "likes": [{"user_id": user_id} for user_id in liker_ids],
            "isLiked": post.is_liked_by(user),
            "likesCount": len(liker_ids),
        }

    def payload(self, post, request=None):
        """Serialize a post the way JSON clients receive it."""
        return PostSerializer(post, context={"request": request}).data

    def feed_payload(self, posts, request=None):
        return PostSerializer(posts, many=True, context={"request": request}).data
