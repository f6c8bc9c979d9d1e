from rest_framework import serializers

from feed.forms.post_forms import MAX_CAPTION_LENGTH, validate_post_image
from feed.models import Comment, Post, User


class UserSummarySerializer(serializers.ModelSerializer):
    """Author block embedded in comments."""

    class Meta:
        model = User
        fields = ["id", "name"]


class UserSerializer(serializers.ModelSerializer):
    """Public user fields for post authors and profile responses."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "username", "date_joined"]
        read_only_fields = fields


class CommentSerializer(serializers.ModelSerializer):
    """Comment with its author's id and name."""
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "content", "created_at", "user"]


class PostSerializer(serializers.ModelSerializer):
    """
    Full post payload.

    `isLiked` prefers the `is_liked` annotation the repo adds and falls back
    to a query against the requesting user from the serializer context.
    """
    user = UserSerializer(read_only=True)
    caption = serializers.CharField(max_length=MAX_CAPTION_LENGTH)
    image = serializers.ImageField(write_only=True, required=False, validators=[validate_post_image])
    image_path = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    likes = serializers.SerializerMethodField()
    likesCount = serializers.SerializerMethodField()
    comments = CommentSerializer(many=True, read_only=True)
    isLiked = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            "id",
            "caption",
            "image",
            "image_path",
            "image_url",
            "created_at",
            "updated_at",
            "user",
            "likes",
            "likesCount",
            "comments",
            "isLiked",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):
        if self.instance is None and not attrs.get("image"):
            raise serializers.ValidationError({"image": ["The image field is required."]})
        return attrs

    def get_likes(self, obj):
        return [{"user_id": user.pk} for user in obj.likes.all()]

    def get_likesCount(self, obj):
        return len(obj.likes.all())

    def get_isLiked(self, obj):
        annotated = getattr(obj, "is_liked", None)
        if annotated is not None:
            return bool(annotated)
        request = self.context.get("request")
        return obj.is_liked_by(getattr(request, "user", None))


class ProfilePostSerializer(serializers.ModelSerializer):
    """Post row on the profile page with like/comment totals."""
    image_path = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    likes_count = serializers.IntegerField(source="likes_count_total", read_only=True)
    comments_count = serializers.IntegerField(source="comments_count_total", read_only=True)
    is_liked = serializers.BooleanField(read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "caption",
            "image_path",
            "image_url",
            "created_at",
            "likes_count",
            "comments_count",
            "is_liked",
        ]
