"""
Public interface for the submission store.

Students own their submissions: only the owner may edit or delete one, and
students can only see their own. Evaluators and admins can see everything.
"""

import logging

from django.db import DatabaseError, transaction
from django.db.models import Prefetch, Q

from evalhub.accounts import permissions
from evalhub.criteria.models import Category
from evalhub.evaluation import aggregation
from evalhub.evaluation.models import CriteriaEvaluation, Evaluation
from evalhub.submissions.errors import (
    SubmissionInternalError, SubmissionNotFoundError, SubmissionPermissionError, SubmissionRequestError,
)
from evalhub.submissions.models import File, Submission, derive_file_type
from evalhub.submissions.serializers import (
    SubmissionDetailSerializer, SubmissionRequestSerializer, SubmissionSerializer, SubmissionUpdateSerializer,
)

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name


def _submissions_for_list():
    return Submission.objects.select_related('student', 'category').prefetch_related(
        'files',
        Prefetch('evaluations', queryset=Evaluation.objects.select_related('evaluator')),
    )


def _submissions_for_detail():
    return Submission.objects.select_related('student', 'category').prefetch_related(
        'files',
        Prefetch(
            'evaluations',
            queryset=Evaluation.objects.select_related('evaluator').prefetch_related(
                Prefetch(
                    'criteria_evaluations',
                    queryset=CriteriaEvaluation.objects.select_related('criteria'),
                )
            ),
        ),
    )


def create_submission(student, submission_dict):
    """
    Store a new submission for ``student``, with its files.

    Any authenticated user may submit; the submission is owned by whoever
    created it.

    Args:
        student (User): The owner.
        submission_dict (dict): ``title`` and ``description`` (required),
            ``categoryId`` (optional; an empty string means none), and
            ``files`` as a list of ``{url, name, size}``, or the legacy
            ``fileUrls``/``fileNames``/``fileSizes`` arrays.

    Returns:
        dict: The serialized submission, status ``pending``.

    Raises:
        SubmissionRequestError: Missing fields, bad file data, or an unknown or
            inactive category.
        SubmissionInternalError: The submission could not be saved.

    Examples:
        >>> create_submission(student, {
        ...     'title': 'Weather app',
        ...     'description': 'A forecast dashboard',
        ...     'fileUrls': ['https://files.example.com/abc/report.pdf'],
        ...     'fileNames': ['report.pdf'],
        ... })
        {'id': 1, 'title': 'Weather app', 'status': 'pending', 'averageScore': None, ...}
    """
    request = SubmissionRequestSerializer(data=submission_dict)
    if not request.is_valid():
        raise SubmissionRequestError(request.errors)
    data = request.validated_data

    category = None
    if data.get('categoryId') is not None:
        category = Category.objects.filter(pk=data['categoryId'], is_active=True).first()
        if category is None:
            raise SubmissionRequestError("Category not found")

    try:
        with transaction.atomic():
            submission = Submission.objects.create(
                title=data['title'],
                description=data['description'],
                student=student,
                category=category,
            )
            File.objects.bulk_create([
                _build_file(submission, index, file_dict)
                for index, file_dict in enumerate(data['files'])
            ])
    except DatabaseError as ex:
        msg = f"An error occurred while creating a submission for user {student.id}"
        logger.exception(msg)
        raise SubmissionInternalError(msg) from ex

    logger.info(
        "Created submission %s for user %s with %d file(s)", submission.id, student.id, len(data['files'])
    )
    return SubmissionSerializer(_submissions_for_list().get(pk=submission.pk)).data


def _build_file(submission, index, file_dict):
    name = file_dict.get('name') or f"file-{index + 1}"
    return File(
        submission=submission,
        url=file_dict['url'],
        name=name,
        size=file_dict.get('size') or 0,
        file_type=derive_file_type(name),
    )


def list_submissions(user, status=None, search=None):
    """
    Submissions visible to ``user``, newest first.

    Args:
        user (User): The caller. Students only get their own submissions.
        status (str): ``pending``, ``in_progress``, ``completed`` or ``all``.
        search (str): Case-insensitive match against title, description, or
            the owning student's name.

    Returns:
        list of dict: Serialized submissions with status and average score.

    Raises:
        SubmissionRequestError: Unknown status.
        SubmissionInternalError: The database could not be read.
    """
    submissions = _submissions_for_list()
    if not permissions.can_view_all_submissions(user.role):
        submissions = submissions.filter(student=user)

    if search:
        submissions = submissions.filter(
            Q(title__icontains=search)
            | Q(description__icontains=search)
            | Q(student__name__icontains=search)
        )

    try:
        submissions = aggregation.filter_by_status(submissions, status)
    except ValueError as ex:
        raise SubmissionRequestError(f"Invalid status: {status}") from ex

    try:
        return SubmissionSerializer(submissions.order_by('-created', '-id'), many=True).data
    except DatabaseError as ex:
        msg = f"An error occurred while listing submissions for user {user.id}"
        logger.exception(msg)
        raise SubmissionInternalError(msg) from ex


def _get_submission_model(submission_id, queryset=None):
    queryset = Submission.objects.all() if queryset is None else queryset
    try:
        return queryset.get(pk=submission_id)
    except (Submission.DoesNotExist, ValueError, TypeError) as ex:
        raise SubmissionNotFoundError("Submission not found") from ex
    except DatabaseError as ex:
        msg = f"An error occurred while retrieving submission {submission_id}"
        logger.exception(msg)
        raise SubmissionInternalError(msg) from ex


def get_submission(submission_id, user):
    """
    One submission with its files, evaluations and criterion scores.

    Raises:
        SubmissionNotFoundError: No such submission.
        SubmissionPermissionError: A student asked for someone else's submission.
    """
    submission = _get_submission_model(submission_id, _submissions_for_detail())
    if not permissions.can_view_submission(user, submission):
        raise SubmissionPermissionError("Forbidden")
    return SubmissionDetailSerializer(submission).data


def update_submission(submission_id, user, submission_dict):
    """
    Change the title and/or description of a submission.

    Raises:
        SubmissionNotFoundError: No such submission.
        SubmissionPermissionError: The caller is not the owner.
        SubmissionRequestError: A supplied field is empty.
    """
    submission = _get_submission_model(submission_id)
    if not permissions.can_mutate_submission(user, submission):
        raise SubmissionPermissionError("Forbidden")

    request = SubmissionUpdateSerializer(data=submission_dict)
    if not request.is_valid():
        raise SubmissionRequestError(request.errors)

    update_fields = list(request.validated_data)
    if update_fields:
        for field, value in request.validated_data.items():
            setattr(submission, field, value)
        try:
            submission.save(update_fields=update_fields + ['modified'])
        except DatabaseError as ex:
            msg = f"An error occurred while updating submission {submission_id}"
            logger.exception(msg)
            raise SubmissionInternalError(msg) from ex
        logger.info("User %s updated submission %s", user.id, submission.id)

    return SubmissionDetailSerializer(_get_submission_model(submission_id, _submissions_for_detail())).data


def delete_submission(submission_id, user):
    """
    Delete a submission together with its files, evaluations and criterion scores.

    Raises:
        SubmissionNotFoundError: No such submission.
        SubmissionPermissionError: The caller is not the owner.
    """
    submission = _get_submission_model(submission_id)
    if not permissions.can_mutate_submission(user, submission):
        raise SubmissionPermissionError("Forbidden")
    try:
        submission.delete()
    except DatabaseError as ex:
        msg = f"An error occurred while deleting submission {submission_id}"
        logger.exception(msg)
        raise SubmissionInternalError(msg) from ex
    logger.info("User %s deleted submission %s", user.id, submission_id)
