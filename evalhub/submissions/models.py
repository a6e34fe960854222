"""
Projects students hand in for evaluation.

The file contents themselves live in external storage; a :class:`File`
only records where to find them.

NOTE: if you make any edits to this file, you need to then generate a
matching migration for it using:

    ./manage.py makemigrations submissions

"""

from django.db import models

from model_utils.models import TimeStampedModel

UNKNOWN_FILE_TYPE = "unknown"


def derive_file_type(file_name):
    """
    The file type recorded for an attachment: the extension, lower-cased.

    >>> derive_file_type("Report.PDF")
    'pdf'
    >>> derive_file_type("Makefile")
    'unknown'
    """
    _, dot, extension = (file_name or "").rpartition('.')
    if not dot or not extension:
        return UNKNOWN_FILE_TYPE
    return extension.lower()


class Submission(TimeStampedModel):
    """A student's project.

    Status and average score are not stored here; they are derived from the
    submission's evaluations whenever they are read.
    """
    title = models.CharField(max_length=255)
    description = models.TextField()
    student = models.ForeignKey('accounts.User', related_name='submissions', on_delete=models.CASCADE)
    category = models.ForeignKey(
        'criteria.Category', related_name='submissions', null=True, blank=True, on_delete=models.SET_NULL
    )

    class Meta:
        app_label = "submissions"
        ordering = ["-created", "-id"]

    def __str__(self):
        return f"{self.title} ({self.student_id})"


class File(models.Model):
    """An attachment of a submission. Never changed after it is recorded."""
    submission = models.ForeignKey(Submission, related_name='files', on_delete=models.CASCADE)
    url = models.URLField(max_length=2048)
    name = models.CharField(max_length=255)
    size = models.BigIntegerField(default=0)
    file_type = models.CharField(max_length=255, default=UNKNOWN_FILE_TYPE)
    created = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "submissions"
        ordering = ["id"]

    def __str__(self):
        return self.name
