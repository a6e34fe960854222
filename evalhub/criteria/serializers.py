"""
Serializers for criteria and categories.
"""
from rest_framework import serializers
from rest_framework.fields import FloatField, IntegerField

from evalhub.criteria.models import Category, Criteria


class CriteriaSerializer(serializers.ModelSerializer):
    """Serializer for :class:`Criteria`."""

    weight = FloatField(required=False)
    maxScore = IntegerField(source='max_score', min_value=1, required=False)
    order = IntegerField(required=False)
    isActive = serializers.BooleanField(source='is_active', required=False)
    createdAt = serializers.DateTimeField(source='created', read_only=True)
    updatedAt = serializers.DateTimeField(source='modified', read_only=True)

    class Meta:
        model = Criteria
        fields = (
            'id', 'name', 'description', 'weight', 'maxScore', 'order', 'isActive',
            'createdAt', 'updatedAt',
        )
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name is required")
        return value

    def validate_weight(self, value):
        """Weights are relative, but a zero or negative weight makes no sense."""
        if value <= 0:
            raise serializers.ValidationError("Weight must be positive")
        return value


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for :class:`Category`."""

    isActive = serializers.BooleanField(source='is_active', required=False)
    createdAt = serializers.DateTimeField(source='created', read_only=True)

    class Meta:
        model = Category
        fields = ('id', 'name', 'description', 'isActive', 'createdAt')
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name is required")
        return value


class CategorySummarySerializer(serializers.ModelSerializer):
    """The category fields embedded in a submission."""

    class Meta:
        model = Category
        fields = ('id', 'name')
        read_only_fields = fields
