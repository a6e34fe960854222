"""
Submission-level status and average score, derived from evaluations.

Nothing here is stored. Status and average are recomputed from the
submission's evaluations on every read, so they can never go stale.
"""
from django.db.models import Count, F, Q

from model_utils import Choices

STATUS = Choices(
    ('pending', 'Pending'),
    ('in_progress', 'In progress'),
    ('completed', 'Completed'),
)

ALL_STATUSES = 'all'

# Spellings the web client has used for the in-progress filter.
STATUS_ALIASES = {
    'in-progress': STATUS.in_progress,
    'in-review': STATUS.in_progress,
}


def derive_status(evaluations):
    """
    Status of a submission given its evaluations.

    * no evaluations: pending
    * every evaluation completed: completed
    * otherwise: in progress

    Since incomplete evaluations are never stored, "in progress" cannot occur
    unless drafts are persisted some day.
    """
    evaluations = list(evaluations)
    if not evaluations:
        return STATUS.pending
    if all(evaluation.is_completed for evaluation in evaluations):
        return STATUS.completed
    return STATUS.in_progress


def average_score(evaluations):
    """
    Mean total score of the completed, scored evaluations.

    Returns:
        float or None: None when nothing has been scored yet (not 0).
    """
    scores = [
        evaluation.total_score
        for evaluation in evaluations
        if evaluation.is_completed and evaluation.total_score is not None
    ]
    if not scores:
        return None
    return sum(scores) / len(scores)


def normalize_status(status):
    """
    Canonical status for a filter value.

    Returns:
        str or None: None means "do not filter".

    Raises:
        ValueError: Unknown status.
    """
    if not status:
        return None
    status = status.strip().lower()
    if status == ALL_STATUSES:
        return None
    status = STATUS_ALIASES.get(status, status)
    if status not in STATUS:
        raise ValueError(f"Unknown status {status!r}")
    return status


def annotate_evaluation_counts(queryset):
    """Add ``evaluation_count`` and ``completed_evaluation_count`` to submissions."""
    return queryset.annotate(
        evaluation_count=Count('evaluations', distinct=True),
        completed_evaluation_count=Count(
            'evaluations', filter=Q(evaluations__is_completed=True), distinct=True
        ),
    )


def filter_by_status(queryset, status):
    """
    Narrow a submission queryset to one derived status.

    This is :func:`derive_status` expressed in SQL, so filtered lists agree
    with the status shown for each submission.

    Raises:
        ValueError: Unknown status.
    """
    status = normalize_status(status)
    if status is None:
        return queryset

    queryset = annotate_evaluation_counts(queryset)
    if status == STATUS.pending:
        return queryset.filter(evaluation_count=0)
    if status == STATUS.completed:
        return queryset.filter(evaluation_count__gt=0, completed_evaluation_count=F('evaluation_count'))
    return queryset.filter(evaluation_count__gt=0, completed_evaluation_count__lt=F('evaluation_count'))
