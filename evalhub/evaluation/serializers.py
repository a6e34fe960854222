"""
Serializers for evaluations.
"""
from rest_framework import serializers
from rest_framework.fields import CharField, DictField, FloatField, IntegerField

from evalhub.accounts.serializers import UserSummarySerializer
from evalhub.criteria.serializers import CriteriaSerializer
from evalhub.evaluation.models import CriteriaEvaluation, Evaluation
from evalhub.submissions.models import Submission


class CriteriaEvaluationSerializer(serializers.ModelSerializer):
    """One criterion's score, with the criterion it refers to."""

    criteriaId = serializers.IntegerField(source='criteria_id', read_only=True)
    criteria = CriteriaSerializer(read_only=True)

    class Meta:
        model = CriteriaEvaluation
        fields = ('id', 'criteriaId', 'criteria', 'score', 'feedback')
        read_only_fields = fields


class EvaluationSummarySerializer(serializers.ModelSerializer):
    """The evaluation fields embedded in a submission list."""

    evaluatorId = serializers.CharField(source='evaluator_id', read_only=True)
    evaluator = UserSummarySerializer(read_only=True)
    totalScore = serializers.FloatField(source='total_score', read_only=True)
    isCompleted = serializers.BooleanField(source='is_completed', read_only=True)
    createdAt = serializers.DateTimeField(source='created', read_only=True)

    class Meta:
        model = Evaluation
        fields = ('id', 'evaluatorId', 'evaluator', 'totalScore', 'isCompleted', 'createdAt')
        read_only_fields = fields


class EvaluationSerializer(EvaluationSummarySerializer):
    """An evaluation with all of its criterion scores."""

    submissionId = serializers.IntegerField(source='submission_id', read_only=True)
    updatedAt = serializers.DateTimeField(source='modified', read_only=True)
    criteriaEvaluations = CriteriaEvaluationSerializer(source='criteria_evaluations', many=True, read_only=True)

    class Meta(EvaluationSummarySerializer.Meta):
        fields = (
            'id', 'submissionId', 'evaluatorId', 'evaluator', 'totalScore', 'feedback', 'isCompleted',
            'criteriaEvaluations', 'createdAt', 'updatedAt',
        )
        read_only_fields = fields


class SubmissionSummarySerializer(serializers.ModelSerializer):
    """The submission an evaluation belongs to, as shown in an evaluator's list."""

    student = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='created', read_only=True)

    class Meta:
        model = Submission
        fields = ('id', 'title', 'description', 'student', 'createdAt')
        read_only_fields = fields


class EvaluationWithSubmissionSerializer(EvaluationSerializer):
    submission = SubmissionSummarySerializer(read_only=True)

    class Meta(EvaluationSerializer.Meta):
        fields = EvaluationSerializer.Meta.fields + ('submission',)
        read_only_fields = fields


# pylint: disable=abstract-method
class EvaluationRequestSerializer(serializers.Serializer):
    """
    Body of an evaluation submission.

    ``criteriaScores`` and ``criteriaFeedback`` are required but may be empty
    or cover only some criteria. Keys are criterion ids.
    """
    submissionId = IntegerField()
    criteriaScores = DictField(child=FloatField(min_value=0))
    criteriaFeedback = DictField(child=CharField(allow_blank=True, trim_whitespace=False))
    overallFeedback = CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)

    def _criteria_ids(self, value):
        try:
            return {int(key): item for key, item in value.items()}
        except (TypeError, ValueError) as ex:
            raise serializers.ValidationError("Keys must be criterion ids") from ex

    def validate_criteriaScores(self, value):
        return self._criteria_ids(value)

    def validate_criteriaFeedback(self, value):
        return self._criteria_ids(value)
