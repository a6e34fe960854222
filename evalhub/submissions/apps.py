"""
evalhub.submissions Django application initialization.
"""

from django.apps import AppConfig


class SubmissionsConfig(AppConfig):
    """
    Configuration for the evalhub.submissions Django application.
    """

    name = "evalhub.submissions"
    label = "submissions"
    verbose_name = "Submissions"
