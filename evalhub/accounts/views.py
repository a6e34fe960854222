"""
User API views.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from evalhub.accounts import api as accounts_api
from evalhub.accounts.permissions import IsAdmin
from evalhub.accounts.serializers import RoleSerializer, UserHintsSerializer, UserSerializer


class UserListView(APIView):
    """
    **Use Cases**

        List every user with their evaluation counts. Admins only.

    **Example Requests**

        GET api/users/

    **Returns**

        * 200 on success.
        * 401 if the caller is not authenticated.
        * 403 if the caller is not an admin.
    """
    permission_classes = (IsAdmin,)

    def get(self, request):
        return Response(accounts_api.list_users(request.user))


class CurrentUserView(APIView):
    """
    **Use Cases**

        Make sure the caller has a local user record. Profile hints (email,
        name) fill in a blank email or the placeholder name.

    **Example Requests**

        GET api/users/me/

        POST api/users/me/  {"email": "ada@example.com", "name": "Ada"}

    **Returns**

        * 200 (GET) or 201 (POST) with the caller's user.
    """

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def post(self, request):
        hints = UserHintsSerializer(data=request.data)
        hints.is_valid(raise_exception=True)
        user = accounts_api.register_user(
            request.user,
            email=hints.validated_data.get('email'),
            name=hints.validated_data.get('name'),
        )
        return Response(user, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """
    **Use Cases**

        Fetch a user's profile, or (admins only) change their role.

    **Example Requests**

        GET api/users/{user_id}/

        PUT api/users/{user_id}/  {"role": "EVALUATOR"}

    **Returns**

        * 200 on success.
        * 400 if the role is not STUDENT, EVALUATOR or ADMIN.
        * 403 if a non-admin tries to change a role.
        * 404 if the user does not exist.
    """

    def get(self, request, user_id):
        return Response(accounts_api.get_user(user_id))

    def put(self, request, user_id):
        body = RoleSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        return Response(accounts_api.change_role(request.user, user_id, body.validated_data.get('role')))


class PromoteUserView(APIView):
    """
    **Use Cases**

        Promote a user to admin. Admins may promote anyone; while
        self-promotion is enabled a caller may also promote themselves.

    **Example Requests**

        POST api/users/{user_id}/promote/

    **Returns**

        * 200 with the promoted user.
        * 403 if the caller may not promote this user.
        * 404 if the user does not exist.
    """

    def post(self, request, user_id):
        user = accounts_api.promote_to_admin(request.user, user_id)
        return Response({
            'message': 'User promoted to admin successfully',
            'user': user,
        })
