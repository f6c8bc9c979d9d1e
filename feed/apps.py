from django.apps import AppConfig

class FeedConfig(AppConfig):
    """Django app config for the photo feed."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'feed'
