from .post_repo import PostRepo
from .user_repo import UserRepo

__all__ = ["PostRepo", "UserRepo"]
