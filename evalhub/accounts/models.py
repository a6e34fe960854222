"""
Local user records.

Sign-in happens at an external identity provider. A ``User`` row is created
the first time a verified identity makes a request, keyed by the provider's
opaque user id, and carries the role that gates everything else.
"""

from django.db import models

from model_utils import Choices
from model_utils.models import TimeStampedModel
from simple_history.models import HistoricalRecords

# Least to most privileged.
ROLES = Choices(
    ('STUDENT', 'Student'),
    ('EVALUATOR', 'Evaluator'),
    ('ADMIN', 'Admin'),
)

DEFAULT_USER_NAME = "Unknown User"


class User(TimeStampedModel):
    """A person known to the platform, as identified by the identity provider."""

    # The identity provider's opaque user id, never generated locally.
    id = models.CharField(max_length=255, primary_key=True)
    email = models.CharField(max_length=255, blank=True, default="")
    name = models.CharField(max_length=255, default=DEFAULT_USER_NAME)
    role = models.CharField(max_length=16, choices=ROLES, default=ROLES.STUDENT, db_index=True)

    # Role changes are audited; who made the change is stored in history_user.
    history = HistoricalRecords(user_model='accounts.User', excluded_fields=['modified'])

    class Meta:
        app_label = "accounts"
        ordering = ["-created"]

    # Lets DRF treat a resolved User as an authenticated request.user.
    is_authenticated = True
    is_anonymous = False

    @property
    def is_admin(self):
        return self.role == ROLES.ADMIN

    def __str__(self):
        return f"{self.name} ({self.id}, {self.role})"
