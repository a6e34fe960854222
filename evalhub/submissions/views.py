"""
Submission API views.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from evalhub.submissions import api as submissions_api


class SubmissionListView(APIView):
    """
    **Use Cases**

        List the submissions the caller may see, or hand in a new one.

    **Example Requests**

        GET api/submissions/?status=pending&search=weather

        POST api/submissions/  {
            "title": "Weather app",
            "description": "A forecast dashboard",
            "categoryId": 1,
            "files": [{"url": "https://files.example.com/abc/report.pdf", "name": "report.pdf", "size": 2048}]
        }

    **Returns**

        * 200 with the list, 201 with the created submission.
        * 400 if a required field is missing, the status filter is unknown
          or the category does not exist.
    """

    def get(self, request):
        return Response(submissions_api.list_submissions(
            request.user,
            status=request.query_params.get('status'),
            search=request.query_params.get('search'),
        ))

    def post(self, request):
        submission = submissions_api.create_submission(request.user, request.data)
        return Response(submission, status=status.HTTP_201_CREATED)


class SubmissionDetailView(APIView):
    """
    **Use Cases**

        Read a submission with all its evaluations; the owner may also edit
        its title and description, or delete it.

    **Example Requests**

        GET api/submissions/{id}/

        PUT api/submissions/{id}/  {"title": "Weather app v2"}

        DELETE api/submissions/{id}/

    **Returns**

        * 200 on success.
        * 403 if a student reads someone else's submission, or anyone but
          the owner edits or deletes it.
        * 404 if the submission does not exist.
    """

    def get(self, request, submission_id):
        return Response(submissions_api.get_submission(submission_id, request.user))

    def put(self, request, submission_id):
        return Response(submissions_api.update_submission(submission_id, request.user, request.data))

    def delete(self, request, submission_id):
        submissions_api.delete_submission(submission_id, request.user)
        return Response({'message': 'Submission deleted successfully'})
