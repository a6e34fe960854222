"""
evalhub Django application initialization.
"""

from django.apps import AppConfig


class EvalhubConfig(AppConfig):
    """
    Configuration for the evalhub Django application.
    """

    name = "evalhub"
    verbose_name = "Evaluation platform"
