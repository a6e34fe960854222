"""
Serializers for users.
"""
from rest_framework import serializers

from evalhub.accounts.models import User


class UserSummarySerializer(serializers.ModelSerializer):
    """The identity fields embedded in submissions and evaluations."""

    class Meta:
        model = User
        fields = ('id', 'name', 'email')
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """Serializer for :class:`User`."""

    createdAt = serializers.DateTimeField(source='created', read_only=True)

    class Meta:
        model = User
        fields = ('id', 'name', 'email', 'role', 'createdAt')
        read_only_fields = fields


# pylint: disable=abstract-method
class UserListSerializer(UserSerializer):
    """A user with counts of the evaluations they have made."""

    evaluationCount = serializers.IntegerField(source='evaluation_count', read_only=True)
    completedEvaluationCount = serializers.IntegerField(source='completed_evaluation_count', read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ('evaluationCount', 'completedEvaluationCount')
        read_only_fields = fields


class UserHintsSerializer(serializers.Serializer):
    """Optional profile hints sent when a caller registers themselves."""
    email = serializers.CharField(required=False, allow_blank=True, max_length=255)
    name = serializers.CharField(required=False, allow_blank=True, max_length=255)


class RoleSerializer(serializers.Serializer):
    """The body of a role change; the role itself is checked by the api."""
    role = serializers.CharField(required=False, allow_null=True, allow_blank=True)
