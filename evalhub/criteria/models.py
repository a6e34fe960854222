"""
Shared reference data: the weighted criteria submissions are scored against,
and the categories submissions are filed under.

Criteria are referenced by historical criteria evaluations, so they are never
deleted; switching ``is_active`` off removes a criterion from future scoring.
"""

from django.db import models

from model_utils.models import TimeStampedModel


class Criteria(TimeStampedModel):
    """A single weighted aspect of a submission that needs evaluation.

    As an example, a project might be evaluated separately for technical
    implementation, code quality and documentation. Each of those would be
    a separate criterion.

    Weights are relative: they do not have to add up to any total, because a
    weighted score is always divided by the sum of the active weights.
    """
    name = models.CharField(max_length=100)
    description = models.TextField(max_length=10000, blank=True, default="")

    # Relative importance; must be positive.
    weight = models.FloatField(default=1.0)

    # Ceiling of the raw score an evaluator may give.
    max_score = models.PositiveIntegerField(default=10)

    # Presentation order, ascending.
    order = models.IntegerField(default=0, db_index=True)

    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        app_label = "criteria"
        ordering = ["order", "id"]
        verbose_name_plural = "criteria"

    def __str__(self):
        return f"{self.name} (weight {self.weight}, max {self.max_score})"

    @classmethod
    def active(cls):
        """Active criteria in presentation order."""
        return cls.objects.filter(is_active=True).order_by('order', 'id')


class Category(TimeStampedModel):
    """A grouping students can file their submissions under."""
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(max_length=10000, blank=True, default="")
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        app_label = "criteria"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name
