"""
Provision an ADMIN identity.

ADMIN users are never created through registration; they are set up by
operators with this command.

Usage:
    python manage.py create_admin ops-admin --password 's3cret-pass'
    python manage.py create_admin ops-admin --password '...' --promote

Without --promote an existing username is an error. With --promote an
existing USER is switched to ADMIN (its company, if any, is kept).
"""
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from accounts.models import User


class Command(BaseCommand):
    help = "Create an ADMIN user, or promote an existing user with --promote"

    def add_arguments(self, parser):
        parser.add_argument("username")
        parser.add_argument("--password", required=True)
        parser.add_argument(
            "--promote",
            action="store_true",
            help="Switch an existing user to ADMIN instead of failing",
        )

    def handle(self, *args, **options):
        username = options["username"].strip()
        password = options["password"]

        existing = User.objects.filter(username=username).first()
        if existing is not None:
            if not options["promote"]:
                raise CommandError(f"User '{username}' already exists. Use --promote.")
            existing.role = User.Role.ADMIN
            existing.save(update_fields=["role"])
            self.stdout.write(self.style.SUCCESS(f"  PROMOTED: {username} -> ADMIN"))
            return

        try:
            validate_password(password, user=User(username=username))
        except ValidationError as exc:
            raise CommandError(" ".join(exc.messages))

        User.objects.create_user(username=username, password=password, role=User.Role.ADMIN)
        self.stdout.write(self.style.SUCCESS(f"  CREATED: {username} (ADMIN)"))
