from rest_framework import generics, permissions
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from feed.permissions import IsOwnerOrReadOnly
from feed.serializers import PostSerializer
from feed.services import PostService

post_service = PostService()


class PostListApi(generics.ListCreateAPIView):
    """List posts newest first and allow creation with an image upload."""
    serializer_class = PostSerializer
    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_queryset(self):
        return post_service.feed_for(self.request.user)

    def perform_create(self, serializer):
        """Assign current user as owner on create."""
        serializer.save(user=self.request.user)


class PostDetailApi(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update, or delete a post, respecting ownership permissions."""
    serializer_class = PostSerializer
    permission_classes = [permissions.IsAuthenticated, IsOwnerOrReadOnly]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_queryset(self):
        return post_service.feed_for(self.request.user)

    def perform_update(self, serializer):
        """Save changes and drop the previous file when the image was replaced."""
        previous_name = serializer.instance.image.name
        post = serializer.save()
        post_service.discard_replaced_image(previous_name, post)

    def perform_destroy(self, instance):
        post_service.delete_post(instance)
