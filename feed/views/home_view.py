from django.shortcuts import redirect


def home(request):
    """Send signed-in users to the feed and everyone else to the login page."""
    if request.user.is_authenticated:
        return redirect('posts_index')
    return redirect('log_in')
