"""Repository helpers for fetching posts."""

from typing import Optional, Sequence

from django.db.models import Count, Exists, OuterRef, Prefetch, QuerySet

from feed.db_accessor import DB_Accessor
from feed.models import Comment, Like, Post

NEWEST_FIRST = ("-created_at", "-id")


class PostRepo(DB_Accessor):
    """Repository for Post queries (feed, single post, profile)."""
    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def _comments_prefetch(self) -> Prefetch:
        return Prefetch(
            "comments",
            queryset=Comment.objects.select_related("user").order_by(*NEWEST_FIRST),
        )

    def with_liked_flag(self, qs: QuerySet, viewer) -> QuerySet:
        """Annotate `is_liked` for the viewer onto each post."""
        viewer_id = getattr(viewer, "pk", None)
        return qs.annotate(
            is_liked=Exists(Like.objects.filter(post=OuterRef("pk"), user_id=viewer_id))
        )

    def list_for_feed(
        self,
        viewer=None,
        *,
        order_by: Sequence[str] = NEWEST_FIRST,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> QuerySet:
        """Return posts newest first with author, likes and comments loaded."""
        qs = self.list(
            select_related=("user",),
            prefetch_related=("likes", self._comments_prefetch()),
            order_by=order_by,
        )
        qs = self.with_liked_flag(qs, viewer)
        return self._apply_slice(qs, offset=offset, limit=limit)

    def get_detailed(self, post_id: int, viewer=None) -> Post:
        """Return one post with everything the detail payload needs."""
        qs = self.list(
            filters={"pk": post_id},
            select_related=("user",),
            prefetch_related=("likes", self._comments_prefetch()),
        )
        return self.with_liked_flag(qs, viewer).get()

    def list_for_user(self, user) -> QuerySet:
        """Return a user's own posts with like/comment counts, newest first."""
        qs = self.list(filters={"user": user}, order_by=NEWEST_FIRST)
        qs = qs.annotate(
            likes_count_total=Count("like_records", distinct=True),
            comments_count_total=Count("comments", distinct=True),
        )
        return self.with_liked_flag(qs, user)

    def comments_for(self, post: Post) -> QuerySet:
        """Return the post's comments newest first with their authors."""
        return Comment.objects.filter(post=post).select_related("user").order_by(*NEWEST_FIRST)
