"""
Django admin models for submissions.
"""
from django.contrib import admin

from evalhub.submissions.models import File, Submission


class FileInline(admin.TabularInline):
    model = File
    extra = 0
    readonly_fields = ('url', 'name', 'size', 'file_type', 'created')

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'student', 'category', 'created')
    list_filter = ('category',)
    search_fields = ('title', 'description', 'student__name', 'student__id')
    raw_id_fields = ('student',)
    inlines = [FileInline]
