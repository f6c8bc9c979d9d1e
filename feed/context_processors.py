from __future__ import annotations
from typing import Dict
from django.http import HttpRequest
from feed.services import ProfileService

def navbar_context(request: HttpRequest) -> Dict[str, object]:
  """Inject the signed-in user's avatar URL for the navbar."""
  user = getattr(request, "user", None)
  if not user or not user.is_authenticated:
    return {}
  return {
    "navbar_avatar_url": ProfileService(user).avatar_url(),
  }
