from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.http import require_http_methods

from feed.forms import CommentForm
from feed.models import Post
from feed.services import CommentService
from feed.views.decorators import json_error_boundary, json_login_required
from feed.views.view_utils import (
    forbidden,
    request_data,
    validation_error_response,
    wants_json,
)

comment_service = CommentService()


def _guard(request, post, comment):
    """Return a 403 response when the comment may not be touched, else None."""
    if not comment_service.belongs_to(comment, post):
        return forbidden(request, "Comment does not belong to this post")
    if not comment_service.can_modify(comment, request.user):
        return forbidden(request, "Unauthorized")
    return None


@json_login_required
@require_http_methods(["POST", "PUT"])
@json_error_boundary("Failed to update comment")
def comments_update(request, post_id, comment_id):
    """Edit the current user's comment on the given post."""
    post = get_object_or_404(Post, pk=post_id)
    comment = comment_service.fetch(comment_id)
    denied = _guard(request, post, comment)
    if denied is not None:
        return denied

    form = CommentForm(request_data(request), instance=comment)
    if not form.is_valid():
        if wants_json(request):
            return validation_error_response(form)
        messages.error(request, "Error updating comment.")
        return redirect("posts_show", post_id=post.pk)

    comment_service.update_comment(comment, form)
    if wants_json(request):
        return JsonResponse({"comments": comment_service.comments_payload(post)})
    messages.success(request, "Comment updated.")
    return redirect("posts_show", post_id=post.pk)


@json_login_required
@require_http_methods(["POST", "DELETE"])
@json_error_boundary("Failed to delete comment")
def comments_destroy(request, post_id, comment_id):
    """Delete the current user's comment on the given post."""
    post = get_object_or_404(Post, pk=post_id)
    comment = comment_service.fetch(comment_id)
    denied = _guard(request, post, comment)
    if denied is not None:
        return denied

    comment_service.delete_comment(comment)
    if wants_json(request):
        return JsonResponse({"comments": comment_service.comments_payload(post)})
    messages.success(request, "Comment deleted.")
    return redirect("posts_show", post_id=post.pk)
