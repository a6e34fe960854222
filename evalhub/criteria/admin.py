"""
Django admin models for criteria and categories.
"""
from django.contrib import admin

from evalhub.criteria.models import Category, Criteria


@admin.register(Criteria)
class CriteriaAdmin(admin.ModelAdmin):
    """
    Django admin model for Criteria.

    Deletion is disabled: deactivate a criterion instead, so existing
    evaluations keep their references.
    """
    list_display = ('id', 'order', 'name', 'weight', 'max_score', 'is_active')
    list_display_links = ('id', 'name')
    list_filter = ('is_active',)
    search_fields = ('name',)
    ordering = ('order', 'id')

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('name',)
