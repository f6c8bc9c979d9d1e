"""Management command to seed the database with sample users, posts, likes and comments."""

from random import choice, randint, sample

from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from faker import Faker

from feed.models import Comment, Like, Post, User
from feed.repos import UserRepo
from .seed_data import comment_phrases, user_fixtures
from .seed_utils import create_email, create_username, make_post_image


class Command(BaseCommand):
    """Management command to seed the database with sample users/posts/data."""
    USER_COUNT = 20
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--posts-per-user", type=int, default=2)
        parser.add_argument("--max-likes", type=int, default=10, help="Upper bound of likes per post.")
        parser.add_argument("--max-comments", type=int, default=4, help="Upper bound of comments per post.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_posts(per_user=options["posts_per_user"])
        self.seed_likes(max_likes_per_post=options["max_likes"])
        self.seed_comments(max_comments_per_post=options["max_comments"])
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        """Create fixture users, then random ones until `target` is reached."""
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < target and attempts < target * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'name': f"{first_name} {last_name}",
            })
        self.stdout.write(f"users: {User.objects.count()}")

    def try_create_user(self, data):
        """Create a user, skipping duplicates."""
        if User.objects.filter(username=data['username']).exists():
            return None
        try:
            with transaction.atomic():
                return User.objects.create_user(
                    data['username'],
                    email=data['email'],
                    name=data['name'],
                    password=self.DEFAULT_PASSWORD,
                )
        except IntegrityError:
            return None

    def seed_posts(self, *, per_user: int = 2) -> None:
        """Create posts with generated images for every user."""
        created = 0
        for user in User.objects.all():
            for _ in range(per_user):
                Post.objects.create(
                    user=user,
                    caption=self.faker.sentence(nb_words=10)[:1000],
                    image=make_post_image(f"{user.username}_{self.faker.uuid4()[:8]}.jpg"),
                )
                created += 1
        self.stdout.write(f"posts created: {created}")

    def seed_likes(self, max_likes_per_post: int = 10) -> None:
        """Create random likes for posts up to a max per post."""
        users = UserRepo().list_ids()
        posts = list(Post.objects.values_list("id", flat=True))
        if not users or not posts:
            return

        rows = []
        for post_id in posts:
            like_count = randint(0, min(max_likes_per_post, len(users)))
            for user_id in sample(users, like_count):
                rows.append(Like(user_id=user_id, post_id=post_id))

        with transaction.atomic():
            Like.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"likes created: {len(rows)}")

    def seed_comments(self, max_comments_per_post: int = 4) -> None:
        """Generate random comments for each post."""
        users = UserRepo().list_ids()
        posts = list(Post.objects.values_list("id", flat=True))
        if not users or not posts:
            return

        rows = []
        for post_id in posts:
            for user_id in sample(users, min(len(users), randint(0, max_comments_per_post))):
                rows.append(Comment(post_id=post_id, user_id=user_id, content=choice(comment_phrases)))

        with transaction.atomic():
            Comment.objects.bulk_create(rows, batch_size=1000)
        self.stdout.write(f"comments created: {len(rows)}")
