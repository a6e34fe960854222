"""
Serializers for submissions and their files.
"""
from rest_framework import serializers
from rest_framework.fields import CharField, IntegerField, ListField

from evalhub.accounts.serializers import UserSummarySerializer
from evalhub.criteria.serializers import CategorySummarySerializer
from evalhub.evaluation import aggregation
from evalhub.evaluation.serializers import EvaluationSerializer, EvaluationSummarySerializer
from evalhub.submissions.models import File, Submission


class FileSerializer(serializers.ModelSerializer):
    """Serializer for :class:`File`."""

    type = serializers.CharField(source='file_type', read_only=True)
    createdAt = serializers.DateTimeField(source='created', read_only=True)

    class Meta:
        model = File
        fields = ('id', 'url', 'name', 'size', 'type', 'createdAt')
        read_only_fields = fields


class SubmissionSerializer(serializers.ModelSerializer):
    """
    A submission as shown in lists, with its derived status and average.

    Expects ``evaluations`` to be prefetched; status and average are computed
    from them rather than read from the database.
    """

    studentId = serializers.CharField(source='student_id', read_only=True)
    student = UserSummarySerializer(read_only=True)
    categoryId = serializers.IntegerField(source='category_id', read_only=True)
    category = CategorySummarySerializer(read_only=True)
    files = FileSerializer(many=True, read_only=True)
    evaluations = EvaluationSummarySerializer(many=True, read_only=True)
    status = serializers.SerializerMethodField()
    averageScore = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created', read_only=True)
    updatedAt = serializers.DateTimeField(source='modified', read_only=True)

    class Meta:
        model = Submission
        fields = (
            'id', 'title', 'description', 'studentId', 'student', 'categoryId', 'category', 'files',
            'evaluations', 'status', 'averageScore', 'createdAt', 'updatedAt',
        )
        read_only_fields = fields

    def get_status(self, obj):
        return aggregation.derive_status(obj.evaluations.all())

    def get_averageScore(self, obj):
        return aggregation.average_score(obj.evaluations.all())


class SubmissionDetailSerializer(SubmissionSerializer):
    """A submission with every evaluation and criterion score."""

    evaluations = EvaluationSerializer(many=True, read_only=True)

    class Meta(SubmissionSerializer.Meta):
        pass


# pylint: disable=abstract-method
class FileRequestSerializer(serializers.Serializer):
    url = serializers.URLField(max_length=2048)
    name = CharField(required=False, allow_blank=True, max_length=255)
    size = IntegerField(required=False, allow_null=True, min_value=0)


class SubmissionRequestSerializer(serializers.Serializer):
    """
    Body of a new submission.

    Files may be sent as a list of ``{url, name, size}`` objects, or as the
    parallel ``fileUrls``/``fileNames``/``fileSizes`` arrays older clients
    send. Either way they come out of validation as ``files``.
    """
    title = CharField(max_length=255)
    description = CharField()
    categoryId = CharField(required=False, allow_blank=True, allow_null=True)
    files = FileRequestSerializer(many=True, required=False)
    fileUrls = ListField(child=serializers.URLField(max_length=2048), required=False)
    fileNames = ListField(child=CharField(allow_blank=True, max_length=255), required=False)
    fileSizes = ListField(child=IntegerField(allow_null=True, min_value=0), required=False)

    def validate_categoryId(self, value):
        if value is None or not value.strip():
            return None
        try:
            return int(value)
        except ValueError as ex:
            raise serializers.ValidationError("Invalid category") from ex

    def validate(self, attrs):
        files = list(attrs.pop('files', []))
        urls = attrs.pop('fileUrls', [])
        names = attrs.pop('fileNames', [])
        sizes = attrs.pop('fileSizes', [])
        for index, url in enumerate(urls):
            files.append({
                'url': url,
                'name': names[index] if index < len(names) else None,
                'size': sizes[index] if index < len(sizes) else None,
            })
        attrs['files'] = files
        return attrs


class SubmissionUpdateSerializer(serializers.Serializer):
    """Owners may change the title and description, nothing else."""
    title = CharField(required=False, max_length=255)
    description = CharField(required=False)
