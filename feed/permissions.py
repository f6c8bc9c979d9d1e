from rest_framework import permissions


class IsOwnerOrReadOnly(permissions.BasePermission):
    """Allow reads for anyone; writes only for the user who owns the object."""

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return getattr(obj, "user", None) == request.user
