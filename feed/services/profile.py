"""Service helpers for the profile page."""

from feed.repos.post_repo import PostRepo
from feed.serializers import ProfilePostSerializer, UserSerializer


class ProfileService:
    """Provide profile listings and updates for a single user."""
    def __init__(self, user, post_repo=None):
        """Bind the service to a user instance."""
        self.user = user
        self.post_repo = post_repo or PostRepo()

    def posts(self):
        """Return the user's posts with like/comment totals, newest first."""
        return self.post_repo.list_for_user(self.user)

    def posts_payload(self):
        return ProfilePostSerializer(self.posts(), many=True).data

    def update_from_form(self, form):
        """Save name/email changes from a validated ProfileForm."""
        self.user = form.save()
        return self.user

    def user_payload(self):
        return UserSerializer(self.user).data

    def avatar_url(self):
        """Return the gravatar URL, or blank when unauthenticated."""
        if not self.user or not getattr(self.user, "is_authenticated", False):
            return ""
        return self.user.mini_gravatar()
