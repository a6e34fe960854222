"""
Django models for evaluations.

An :class:`Evaluation` is one evaluator's complete scoring pass over one
submission. It owns one :class:`CriteriaEvaluation` per criterion the
evaluator scored, and those children are replaced wholesale whenever the
evaluation is submitted again.

NOTE: if you make any edits to this file, you need to then generate a
matching migration for it using:

    ./manage.py makemigrations evaluation

"""

from django.db import models

from model_utils.models import TimeStampedModel


class Evaluation(TimeStampedModel):
    """An evaluator's scores for a submission.

    There is at most one Evaluation per (submission, evaluator) pair; the
    database constraint below is what enforces it under concurrent requests.
    """
    MAX_FEEDBACK_SIZE = 1024 * 100

    submission = models.ForeignKey(
        'submissions.Submission', related_name='evaluations', on_delete=models.CASCADE
    )
    evaluator = models.ForeignKey('accounts.User', related_name='evaluations', on_delete=models.CASCADE)

    # Weighted average of the criterion scores, on the criteria's own scale.
    total_score = models.FloatField(null=True, blank=True)

    # Overall feedback on the submission; per-criterion feedback lives on the parts.
    feedback = models.TextField(default="", blank=True)

    # Evaluations are only ever stored once submitted, so this is always True
    # today. It is kept so submission status can tell in-progress work apart.
    is_completed = models.BooleanField(default=False)

    class Meta:
        app_label = "evaluation"
        ordering = ["-created", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=['submission', 'evaluator'], name='unique_evaluation_per_evaluator'
            ),
        ]

    def __str__(self):
        return f"Evaluation {self.id} of submission {self.submission_id} by {self.evaluator_id}"


class CriteriaEvaluation(models.Model):
    """The score and feedback an evaluation gave for one criterion.

    Criteria are protected from deletion while any part refers to them;
    deactivate a criterion instead.
    """
    MAX_FEEDBACK_SIZE = 1024 * 100

    evaluation = models.ForeignKey(Evaluation, related_name='criteria_evaluations', on_delete=models.CASCADE)
    criteria = models.ForeignKey('criteria.Criteria', related_name='+', on_delete=models.PROTECT)

    # Raw score, between 0 and the criterion's max_score.
    score = models.FloatField(default=0)
    feedback = models.TextField(default="", blank=True)

    class Meta:
        app_label = "evaluation"
        ordering = ["criteria__order", "criteria_id"]

    def __str__(self):
        return f"{self.criteria_id}: {self.score}"
