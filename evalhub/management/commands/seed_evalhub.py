"""
Seed the default categories and evaluation criteria.
"""
import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from evalhub.accounts.api import set_role, resolve_user
from evalhub.accounts.models import ROLES
from evalhub.criteria.models import Category, Criteria

log = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    ('Web Development', 'Web applications and websites'),
    ('Mobile Development', 'Mobile applications for iOS and Android'),
    ('Data Science', 'Data analysis and machine learning projects'),
    ('AI & Machine Learning', 'Artificial intelligence and ML applications'),
    ('Cybersecurity', 'Security-focused projects and tools'),
    ('Other', 'Other types of projects'),
)

# (name, description, weight, max score, order)
DEFAULT_CRITERIA = (
    ('Technical Implementation', 'Code architecture, best practices, and technical execution', 30, 10, 1),
    ('Code Quality', 'Code readability, organization, and maintainability', 25, 10, 2),
    ('Documentation', 'Quality and completeness of project documentation', 20, 10, 3),
    ('UI/UX Design', 'User interface design and user experience', 15, 10, 4),
    ('Innovation', 'Creative solutions and innovative approaches', 10, 10, 5),
)


class Command(BaseCommand):
    """
    Create the default categories and criteria if they are missing.

    Safe to run repeatedly: records are matched by name, and existing ones
    are left exactly as they are.
    """
    help = "Create the default categories and criteria."

    def add_arguments(self, parser):
        parser.add_argument(
            '--admin',
            dest='admin_ids',
            action='append',
            default=[],
            metavar='USER_ID',
            help='Identity provider user id to create (if needed) and make an admin. May be repeated.',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        created_categories = 0
        for name, description in DEFAULT_CATEGORIES:
            _, created = Category.objects.get_or_create(name=name, defaults={'description': description})
            created_categories += created

        created_criteria = 0
        for name, description, weight, max_score, order in DEFAULT_CRITERIA:
            if Criteria.objects.filter(name=name).exists():
                continue
            Criteria.objects.create(
                name=name, description=description, weight=weight, max_score=max_score, order=order
            )
            created_criteria += 1

        for admin_id in options['admin_ids']:
            user = resolve_user(admin_id)
            if user.role != ROLES.ADMIN:
                set_role(user, ROLES.ADMIN, actor=None, reason="seed_evalhub --admin")
                log.info("Promoted %s to ADMIN role", user.id)

        log.info("Created %d categories and %d criteria", created_categories, created_criteria)
        self.stdout.write(f"Created {created_categories} categories and {created_criteria} criteria")
