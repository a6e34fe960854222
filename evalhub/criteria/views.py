"""
Criteria and category API views.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from evalhub.accounts.permissions import IsAdminOrReadOnly
from evalhub.criteria import api as criteria_api


class CriteriaListView(APIView):
    """
    **Use Cases**

        List the active criteria in display order, or (admins) create one.

    **Example Requests**

        GET api/criteria/

        POST api/criteria/  {"name": "Code Quality", "weight": 25, "maxScore": 10, "order": 2}

    **Returns**

        * 200 with the list, 201 with the created criterion.
        * 400 if the name is missing or a number is out of range.
        * 403 if a non-admin tries to create.
    """
    permission_classes = (IsAdminOrReadOnly,)

    def get(self, request):
        return Response(criteria_api.get_active_criteria())

    def post(self, request):
        criteria = criteria_api.create_criteria(request.user, request.data)
        return Response(criteria, status=status.HTTP_201_CREATED)


class CriteriaDetailView(APIView):
    """
    **Use Cases**

        Read, update or deactivate one criterion. DELETE never removes the
        row; it switches the criterion off for future evaluations.

    **Example Requests**

        PUT api/criteria/{id}/  {"weight": 40}

        DELETE api/criteria/{id}/
    """
    permission_classes = (IsAdminOrReadOnly,)

    def get(self, request, criteria_id):
        return Response(criteria_api.get_criteria(criteria_id))

    def put(self, request, criteria_id):
        return Response(criteria_api.update_criteria(request.user, criteria_id, request.data))

    def delete(self, request, criteria_id):
        return Response(criteria_api.deactivate_criteria(request.user, criteria_id))


class CategoryListView(APIView):
    """
    **Use Cases**

        List the active categories by name, or (admins) create one.

    **Example Requests**

        GET api/categories/

        POST api/categories/  {"name": "Data Science", "description": "..."}
    """
    permission_classes = (IsAdminOrReadOnly,)

    def get(self, request):
        return Response(criteria_api.get_active_categories())

    def post(self, request):
        category = criteria_api.create_category(request.user, request.data)
        return Response(category, status=status.HTTP_201_CREATED)


class CategoryDetailView(APIView):
    """Read, update or deactivate one category."""
    permission_classes = (IsAdminOrReadOnly,)

    def get(self, request, category_id):
        return Response(criteria_api.get_category(category_id))

    def put(self, request, category_id):
        return Response(criteria_api.update_category(request.user, category_id, request.data))

    def delete(self, request, category_id):
        return Response(criteria_api.deactivate_category(request.user, category_id))
