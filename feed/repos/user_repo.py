"""Repository helpers for user lookups."""

from typing import List

from django.db.models import QuerySet

from feed.db_accessor import DB_Accessor
from feed.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def list_ids(self) -> List[int]:
        """Return all user IDs."""
        return list(self.model.objects.values_list("id", flat=True))

    def list_others(self, user) -> QuerySet:
        """Return every user except `user`, newest accounts first."""
        return self.list(exclude={"pk": user.pk}, order_by=("-date_joined", "-id"))

    def email_taken(self, email: str, *, exclude_user_id=None) -> bool:
        """Return True when another account already uses this email."""
        qs = self.model.objects.filter(email__iexact=email)
        if exclude_user_id is not None:
            qs = qs.exclude(pk=exclude_user_id)
        return qs.exists()
