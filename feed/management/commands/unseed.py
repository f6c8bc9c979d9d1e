from django.core.management.base import BaseCommand
from django.db import transaction

from feed.models import Post, User
from feed.services import PostService


class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes every non-staff user. Their posts go through `PostService` so the
    stored images are removed along with comments and likes; the remaining
    rows disappear by cascade.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        post_service = PostService()
        non_staff_users = User.objects.filter(is_staff=False)

        posts = Post.objects.filter(user__in=non_staff_users)
        removed_posts = 0
        for post in posts:
            post_service.delete_post(post)
            removed_posts += 1

        with transaction.atomic():
            deleted_users = non_staff_users.count()
            non_staff_users.delete()

        self.stdout.write(self.style.SUCCESS(
            f"Deleted {deleted_users} non-staff users and {removed_posts} posts."
        ))
