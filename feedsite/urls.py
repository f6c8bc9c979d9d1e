"""
URL configuration for the feedsite project.

Every feed route lives here; the `feed` app has no URLconf of its own.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from feed import views
from feed.views.api_views import PostDetailApi, PostListApi

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', views.home, name='home'),
    path('log_in/', views.LogInView.as_view(), name='log_in'),
    path('log_out/', views.log_out, name='log_out'),
    path('sign_up/', views.SignUpView.as_view(), name='sign_up'),
    path('posts/', views.posts_index, name='posts_index'),
    path('posts/create/', views.posts_store, name='posts_store'),
    path('posts/<int:post_id>/', views.posts_show, name='posts_show'),
    path('posts/<int:post_id>/edit/', views.posts_edit, name='posts_edit'),
    path('posts/<int:post_id>/delete/', views.posts_destroy, name='posts_destroy'),
    path('posts/<int:post_id>/like/', views.posts_like, name='posts_like'),
    path('posts/<int:post_id>/comment/', views.posts_comment, name='posts_comment'),
    path('posts/<int:post_id>/comments/<int:comment_id>/edit/', views.comments_update, name='comments_update'),
    path('posts/<int:post_id>/comments/<int:comment_id>/delete/', views.comments_destroy, name='comments_destroy'),
    path('profile/', views.profile_show, name='profile_show'),
    path('profile/edit/', views.profile_update, name='profile_update'),
    path('api/posts/', PostListApi.as_view(), name='post_list_api'),
    path('api/posts/<int:pk>/', PostDetailApi.as_view(), name='post_detail_api'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
