"""
Django admin models for accounts.
"""
from django.contrib import admin

from simple_history.admin import SimpleHistoryAdmin

from evalhub.accounts.models import User


@admin.register(User)
class UserAdmin(SimpleHistoryAdmin):
    """
    Django admin model for Users. The history view shows every role change.
    """
    list_display = ('id', 'name', 'email', 'role', 'created')
    list_filter = ('role',)
    search_fields = ('id', 'name', 'email')
    readonly_fields = ('id', 'created', 'modified')
    history_list_display = ('role',)
