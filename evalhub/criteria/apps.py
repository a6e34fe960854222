"""
evalhub.criteria Django application initialization.
"""

from django.apps import AppConfig


class CriteriaConfig(AppConfig):
    """
    Configuration for the evalhub.criteria Django application.
    """

    name = "evalhub.criteria"
    label = "criteria"
    verbose_name = "Criteria and categories"
