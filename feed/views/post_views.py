from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from feed.forms import CommentForm, PostForm
from feed.models import Post
from feed.repos.user_repo import UserRepo
from feed.serializers import UserSerializer
from feed.services import CommentService, PostService
from feed.views.decorators import json_error_boundary, json_login_required
from feed.views.view_utils import (
    forbidden,
    request_data,
    validation_error_response,
    wants_json,
)

post_service = PostService()
comment_service = CommentService()
user_repo = UserRepo()


@json_login_required
@require_GET
def posts_index(request):
    """List every post newest first alongside the other users."""
    return _render_index(request, PostForm())


def _render_index(request, form, status=200):
    posts = post_service.feed_for(request.user)
    users = user_repo.list_others(request.user)
    if wants_json(request):
        return JsonResponse(
            {
                "posts": {"data": post_service.feed_payload(posts, request)},
                "users": UserSerializer(users, many=True).data,
            },
            status=status,
        )
    return render(
        request,
        "posts/index.html",
        {"posts": posts, "users": users, "form": form, "comment_form": CommentForm()},
        status=status,
    )


@json_login_required
@require_POST
@json_error_boundary("Failed to create post")
def posts_store(request):
    """Create a post from a caption and an uploaded image."""
    form = PostForm(request.POST, request.FILES)
    if not form.is_valid():
        if wants_json(request):
            return validation_error_response(form)
        return _render_index(request, form, status=422)

    post = post_service.create_from_form(form, request.user)
    if wants_json(request):
        return JsonResponse(post_service.payload(post, request), status=201)
    messages.success(request, "Post published.")
    return redirect("posts_index")


@json_login_required
@require_GET
def posts_show(request, post_id):
    """Display a single post with its likes and comments."""
    post = get_object_or_404(Post, pk=post_id)
    post = post_service.detail_for(post, request.user)
    if wants_json(request):
        return JsonResponse(post_service.payload(post, request))
    return render(
        request,
        "posts/show.html",
        {"post": post, "comment_form": CommentForm(), "can_modify": post_service.can_modify(post, request.user)},
    )


@json_login_required
@require_http_methods(["GET", "POST", "PUT"])
@json_error_boundary("Failed to update post")
def posts_edit(request, post_id):
    """Show the edit form (GET) or apply caption/image changes (POST/PUT)."""
    post = get_object_or_404(Post, pk=post_id)
    if not post_service.can_modify(post, request.user):
        return forbidden(request, "This action is unauthorized.")

    if request.method == "GET":
        if wants_json(request):
            return JsonResponse({"post": post_service.payload(post, request)})
        return render(request, "posts/edit.html", {"form": PostForm(instance=post), "post": post})

    form = PostForm(request_data(request), request.FILES, instance=post)
    if not form.is_valid():
        if wants_json(request):
            return validation_error_response(form)
        return render(request, "posts/edit.html", {"form": form, "post": post}, status=422)

    post_service.update_from_form(form)
    if wants_json(request):
        post = post_service.detail_for(post, request.user)
        return JsonResponse(
            {"post": post_service.payload(post, request), "message": "Post updated successfully"}
        )
    messages.success(request, "Post updated successfully")
    return redirect("posts_show", post_id=post.pk)


@json_login_required
@require_http_methods(["POST", "DELETE"])
@json_error_boundary("Failed to delete post")
def posts_destroy(request, post_id):
    """Delete a post owned by the current user, with its comments and likes."""
    post = get_object_or_404(Post, pk=post_id)
    if not post_service.can_modify(post, request.user):
        return forbidden(request, "This action is unauthorized.")

    post_service.delete_post(post)
    if wants_json(request):
        return JsonResponse({"message": "Post deleted successfully"})
    messages.success(request, "Post deleted.")
    return redirect("posts_index")


@json_login_required
@require_POST
@json_error_boundary("Error toggling like", key="message")
def posts_like(request, post_id):
    """Toggle the current user's like on a post."""
    post = get_object_or_404(Post, pk=post_id)
    post_service.toggle_like(request.user, post)
    if wants_json(request):
        return JsonResponse(post_service.like_summary(request.user, post))
    return redirect(request.META.get("HTTP_REFERER") or reverse("posts_show", args=[post.pk]))


@json_login_required
@require_POST
@json_error_boundary("Failed to post comment")
def posts_comment(request, post_id):
    """Create a new comment on a post for the current user."""
    post = get_object_or_404(Post, pk=post_id)
    form = CommentForm(request_data(request))
    if not form.is_valid():
        if wants_json(request):
            return validation_error_response(form)
        messages.error(request, "Error posting comment.")
        return redirect("posts_show", post_id=post.pk)

    comment_service.create_comment(post, request.user, form)
    if wants_json(request):
        return JsonResponse({"comments": comment_service.comments_payload(post)}, status=201)
    messages.success(request, "Comment posted.")
    return redirect("posts_show", post_id=post.pk)
