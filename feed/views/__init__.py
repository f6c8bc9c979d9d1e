from .home_view import *
from .log_in_view import *
from .log_out_view import *
from .sign_up_view import *
from .post_views import *
from .comment_views import *
from .profile_view import *
from .api_views import *
