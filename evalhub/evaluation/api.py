"""
Public interface for evaluating submissions.

An evaluator scores a submission against the criteria. Submitting again
replaces the evaluator's earlier scores for that submission instead of
adding a second evaluation.
"""

import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Prefetch

from evalhub.accounts import permissions
from evalhub.criteria.models import Criteria
from evalhub.evaluation.errors import (
    EvaluationInternalError, EvaluationNotFoundError, EvaluationPermissionError, EvaluationRequestError,
)
from evalhub.evaluation.models import CriteriaEvaluation, Evaluation
from evalhub.evaluation.report import render_evaluation_report, report_filename
from evalhub.evaluation.scoring import compute_weighted_score
from evalhub.evaluation.serializers import (
    EvaluationRequestSerializer, EvaluationSerializer, EvaluationWithSubmissionSerializer,
)
from evalhub.submissions.models import Submission

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name


def _evaluations():
    return Evaluation.objects.select_related('evaluator', 'submission__student').prefetch_related(
        Prefetch('criteria_evaluations', queryset=CriteriaEvaluation.objects.select_related('criteria')),
    )


def submit_evaluation(evaluator, evaluation_dict):
    """
    Create or replace ``evaluator``'s evaluation of a submission.

    The total is the weighted average over the criteria active right now;
    an active criterion missing from ``criteriaScores`` counts as 0. One
    criterion evaluation is stored per key of ``criteriaScores``, and on
    resubmission the old ones are dropped rather than merged.

    Args:
        evaluator (User): The caller; must be an evaluator or admin.
        evaluation_dict (dict): ``submissionId``, ``criteriaScores``
            (criterion id to score), ``criteriaFeedback`` (criterion id to
            text) and optionally ``overallFeedback``.

    Returns:
        tuple: The serialized evaluation, and True if it was created rather
        than updated.

    Raises:
        EvaluationPermissionError: The caller is a student.
        EvaluationRequestError: Missing fields, an unknown criterion or a
            score outside ``0..maxScore``.
        EvaluationNotFoundError: The submission does not exist.
        EvaluationInternalError: The evaluation could not be saved.

    Examples:
        >>> submit_evaluation(evaluator, {
        ...     'submissionId': 1,
        ...     'criteriaScores': {'1': 8, '2': 5},
        ...     'criteriaFeedback': {'1': 'Solid architecture'},
        ...     'overallFeedback': 'Good work',
        ... })
        ({'id': 1, 'totalScore': 6.8, 'isCompleted': True, ...}, True)
    """
    if not permissions.can_evaluate(evaluator.role):
        raise EvaluationPermissionError("Forbidden - Evaluator or Admin access required")

    request = EvaluationRequestSerializer(data=evaluation_dict)
    if not request.is_valid():
        raise EvaluationRequestError(request.errors)
    data = request.validated_data
    criteria_scores = data['criteriaScores']
    criteria_feedback = data['criteriaFeedback']

    submission_id = data['submissionId']
    if not Submission.objects.filter(pk=submission_id).exists():
        raise EvaluationNotFoundError("Submission not found")

    _validate_scores(criteria_scores)

    try:
        total_score = compute_weighted_score(Criteria.active(), criteria_scores)
        evaluation, created = _upsert_evaluation(
            submission_id,
            evaluator,
            total_score,
            (data.get('overallFeedback') or "")[:Evaluation.MAX_FEEDBACK_SIZE],
            [
                CriteriaEvaluation(
                    criteria_id=criteria_id,
                    score=score,
                    feedback=criteria_feedback.get(criteria_id, "")[:CriteriaEvaluation.MAX_FEEDBACK_SIZE],
                )
                for criteria_id, score in criteria_scores.items()
            ],
        )
    except Evaluation.DoesNotExist as ex:
        # The insert conflicted but the row was gone by the time we locked it.
        raise EvaluationNotFoundError("Submission not found") from ex
    except DatabaseError as ex:
        msg = f"An error occurred while saving the evaluation of submission {submission_id} by {evaluator.id}"
        logger.exception(msg)
        raise EvaluationInternalError(msg) from ex

    logger.info(
        "%s evaluation %s of submission %s by %s with total score %s",
        "Created" if created else "Updated", evaluation.id, submission_id, evaluator.id, total_score
    )
    return EvaluationSerializer(_evaluations().get(pk=evaluation.pk)).data, created


def _validate_scores(criteria_scores):
    """Every scored criterion must exist and the score must fit its scale."""
    criteria = Criteria.objects.in_bulk(list(criteria_scores))
    unknown = sorted(set(criteria_scores) - set(criteria))
    if unknown:
        raise EvaluationRequestError(
            "Unknown criteria: {}".format(", ".join(str(criteria_id) for criteria_id in unknown))
        )
    for criteria_id, score in criteria_scores.items():
        if score > criteria[criteria_id].max_score:
            raise EvaluationRequestError(
                f"Score for {criteria[criteria_id].name} must be between 0 and {criteria[criteria_id].max_score}"
            )


@transaction.atomic
def _upsert_evaluation(submission_id, evaluator, total_score, feedback, criteria_evaluations):
    """
    Insert the evaluation, or update the existing one for this evaluator.

    The unique (submission, evaluator) constraint decides which: two
    concurrent first submissions cannot both insert, and the loser updates
    the winner's row while holding its lock.
    """
    fields = {
        'total_score': total_score,
        'feedback': feedback,
        'is_completed': True,
    }
    try:
        with transaction.atomic():
            evaluation = Evaluation.objects.create(submission_id=submission_id, evaluator=evaluator, **fields)
        created = True
    except IntegrityError:
        evaluation = Evaluation.objects.select_for_update().get(submission_id=submission_id, evaluator=evaluator)
        for field, value in fields.items():
            setattr(evaluation, field, value)
        evaluation.save()
        evaluation.criteria_evaluations.all().delete()
        created = False

    for criteria_evaluation in criteria_evaluations:
        criteria_evaluation.evaluation = evaluation
    CriteriaEvaluation.objects.bulk_create(criteria_evaluations)
    return evaluation, created


def get_evaluations_for_evaluator(evaluator, submission_id=None):
    """
    The evaluations ``evaluator`` has made, newest first.

    Args:
        evaluator (User): The caller.
        submission_id (int): Only return the evaluation of this submission.

    Returns:
        list of dict: Serialized evaluations, each with its submission.

    Raises:
        EvaluationRequestError: ``submission_id`` is not an id.
        EvaluationInternalError: The database could not be read.
    """
    evaluations = _evaluations().filter(evaluator=evaluator)
    if submission_id not in (None, ""):
        try:
            evaluations = evaluations.filter(submission_id=int(submission_id))
        except (TypeError, ValueError) as ex:
            raise EvaluationRequestError("Invalid submission id") from ex
    try:
        return EvaluationWithSubmissionSerializer(evaluations.order_by('-created', '-id'), many=True).data
    except DatabaseError as ex:
        msg = f"An error occurred while listing the evaluations of {evaluator.id}"
        logger.exception(msg)
        raise EvaluationInternalError(msg) from ex


def _get_readable_evaluation(evaluation_id, user):
    try:
        evaluation = _evaluations().get(pk=evaluation_id)
    except (Evaluation.DoesNotExist, ValueError, TypeError) as ex:
        raise EvaluationNotFoundError("Evaluation not found") from ex
    except DatabaseError as ex:
        msg = f"An error occurred while retrieving evaluation {evaluation_id}"
        logger.exception(msg)
        raise EvaluationInternalError(msg) from ex

    if evaluation.evaluator_id != user.id and not user.is_admin and evaluation.submission.student_id != user.id:
        raise EvaluationPermissionError("Forbidden")
    return evaluation


def get_evaluation(evaluation_id, user):
    """
    One evaluation, readable by its evaluator, admins and the owning student.

    Raises:
        EvaluationNotFoundError: No such evaluation.
        EvaluationPermissionError: The caller may not read it.
    """
    return EvaluationWithSubmissionSerializer(_get_readable_evaluation(evaluation_id, user)).data


def export_evaluation(evaluation_id, user):
    """
    A plain-text report of one evaluation, for download.

    Returns:
        tuple: (filename, report text)

    Raises:
        EvaluationNotFoundError: No such evaluation.
        EvaluationPermissionError: The caller may not read it.
    """
    evaluation = _get_readable_evaluation(evaluation_id, user)
    logger.info("User %s exported evaluation %s", user.id, evaluation.id)
    return report_filename(evaluation), render_evaluation_report(evaluation)
