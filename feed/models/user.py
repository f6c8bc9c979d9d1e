"""Custom user model with display name and avatar helpers."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import RegexValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Account that owns posts, likes and comments."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True, blank=False)

    class Meta:
        """Newest accounts first."""
        ordering = ['-date_joined', '-id']

    def __str__(self):
        return self.name or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=60)
