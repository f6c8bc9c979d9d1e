from .comment_form import CommentForm
from .log_in_form import LogInForm
from .post_forms import PostForm
from .user_forms import ProfileForm, SignUpForm

__all__ = [
    "CommentForm",
    "LogInForm",
    "PostForm",
    "ProfileForm",
    "SignUpForm",
]
