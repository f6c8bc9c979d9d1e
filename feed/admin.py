from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from feed.models import Comment, Like, Post, User


class CommentInline(admin.TabularInline):
    """Show comments directly on the Post page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ['user', 'content', 'created_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration adding the display name to Django's user admin."""
    list_display = ('username', 'name', 'email', 'is_staff', 'date_joined')
    search_fields = ('username', 'name', 'email')
    fieldsets = BaseUserAdmin.fieldsets + (("Profile", {"fields": ("name",)}),)


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin configuration for posts with like/comment counts."""
    list_display = ('id', 'short_caption', 'user', 'created_at', 'likes_count_display')
    list_filter = ('created_at',)
    search_fields = ('caption', 'user__username', 'user__name')
    inlines = [CommentInline]

    def short_caption(self, obj):
        """Shorten caption for list display."""
        return obj.caption[:50] + "..." if len(obj.caption) > 50 else obj.caption

    @admin.display(description="Likes")
    def likes_count_display(self, obj):
        return obj.likes_count


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin configuration for comments."""
    list_display = ('short_text', 'user', 'post', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'user__username')

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ('user', 'post', 'created_at')
