from .comments import CommentService
from .posts import PostService
from .profile import ProfileService

__all__ = ["CommentService", "PostService", "ProfileService"]
