"""
evalhub.evaluation Django application initialization.
"""

from django.apps import AppConfig


class EvaluationConfig(AppConfig):
    """
    Configuration for the evalhub.evaluation Django application.
    """

    name = "evalhub.evaluation"
    label = "evaluation"
    verbose_name = "Evaluations"
