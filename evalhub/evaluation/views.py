"""
Evaluation API views.
"""
from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from evalhub.evaluation import api as evaluation_api


class EvaluationListView(APIView):
    """
    **Use Cases**

        List the caller's own evaluations, or submit one. Submitting again
        for the same submission replaces the earlier scores.

    **Example Requests**

        GET api/evaluations/?submissionId=3

        POST api/evaluations/  {
            "submissionId": 3,
            "criteriaScores": {"1": 8, "2": 5},
            "criteriaFeedback": {"1": "Solid architecture"},
            "overallFeedback": "Good work"
        }

    **Returns**

        * 200 with the list, or with an updated evaluation.
        * 201 with a newly created evaluation.
        * 400 if a field is missing, a criterion is unknown or a score is
          out of range.
        * 403 if the caller is a student.
        * 404 if the submission does not exist.
    """

    def get(self, request):
        return Response(evaluation_api.get_evaluations_for_evaluator(
            request.user, submission_id=request.query_params.get('submissionId')
        ))

    def post(self, request):
        evaluation, created = evaluation_api.submit_evaluation(request.user, request.data)
        return Response(evaluation, status=status.HTTP_201_CREATED if created else status.HTTP_200_OK)


class EvaluationDetailView(APIView):
    """Read one evaluation (its evaluator, admins and the owning student)."""

    def get(self, request, evaluation_id):
        return Response(evaluation_api.get_evaluation(evaluation_id, request.user))


class EvaluationExportView(APIView):
    """
    **Use Cases**

        Download an evaluation as a plain-text report.

    **Example Requests**

        GET api/evaluations/{id}/export/

    **Returns**

        * 200 with a ``text/plain`` attachment.
    """

    def get(self, request, evaluation_id):
        filename, report = evaluation_api.export_evaluation(evaluation_id, request.user)
        response = HttpResponse(report, content_type='text/plain; charset=utf-8')
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response
