"""
Django admin models for evaluations.
"""
from django.contrib import admin

from evalhub.evaluation.models import CriteriaEvaluation, Evaluation


class CriteriaEvaluationInline(admin.TabularInline):
    model = CriteriaEvaluation
    extra = 0
    fields = ('criteria', 'score', 'feedback')
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Evaluation)
class EvaluationAdmin(admin.ModelAdmin):
    """
    Read-only view of evaluations.

    Totals are computed when an evaluation is submitted, so editing scores
    here would leave them inconsistent.
    """
    list_display = ('id', 'submission', 'evaluator', 'total_score', 'is_completed', 'modified')
    list_filter = ('is_completed',)
    search_fields = ('submission__title', 'evaluator__name', 'evaluator__id')
    readonly_fields = ('submission', 'evaluator', 'total_score', 'feedback', 'is_completed', 'created', 'modified')
    inlines = [CriteriaEvaluationInline]

    def has_add_permission(self, request):
        return False
