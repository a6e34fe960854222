"""
evalhub.accounts Django application initialization.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """
    Configuration for the evalhub.accounts Django application.
    """

    name = "evalhub.accounts"
    label = "accounts"
    verbose_name = "Accounts"
