"""
Create factories for users, criteria, submissions, evaluations and all of
their related models.
"""

import factory
from factory.django import DjangoModelFactory

from evalhub.accounts.models import ROLES, User
from evalhub.criteria.models import Category, Criteria
from evalhub.evaluation.models import CriteriaEvaluation, Evaluation
from evalhub.submissions.models import File, Submission


class UserFactory(DjangoModelFactory):
    """ Create mock User models. Students unless told otherwise. """
    class Meta:
        model = User
        django_get_or_create = ('id',)

    id = factory.Sequence(lambda n: f'user_{n}')  # pylint: disable=unnecessary-lambda
    email = factory.LazyAttribute(lambda user: f'{user.id}@example.com')
    name = factory.Faker('name')
    role = ROLES.STUDENT


class CategoryFactory(DjangoModelFactory):
    """ Create mock Category models. """
    class Meta:
        model = Category

    name = factory.Sequence(lambda n: f'Category {n}')  # pylint: disable=unnecessary-lambda
    description = 'A place for projects.'


class CriteriaFactory(DjangoModelFactory):
    """ Create mock Criteria models. """
    class Meta:
        model = Criteria

    name = factory.Sequence(lambda n: f'criterion_{n}')  # pylint: disable=unnecessary-lambda
    description = 'This is a fake criterion.'
    weight = 1.0
    max_score = 10
    order = factory.Sequence(lambda n: n)


class SubmissionFactory(DjangoModelFactory):
    """ Create mock Submission models. """
    class Meta:
        model = Submission

    title = factory.Sequence(lambda n: f'Project {n}')  # pylint: disable=unnecessary-lambda
    description = factory.Faker('sentence')
    student = factory.SubFactory(UserFactory)
    category = None


class FileFactory(DjangoModelFactory):
    """ Create mock File models. """
    class Meta:
        model = File

    submission = factory.SubFactory(SubmissionFactory)
    name = factory.Sequence(lambda n: f'file_{n}.pdf')  # pylint: disable=unnecessary-lambda
    url = factory.LazyAttribute(lambda file: f'https://files.example.com/{file.name}')
    size = 1024
    file_type = 'pdf'


class EvaluationFactory(DjangoModelFactory):
    """ Create mock Evaluation models. """
    class Meta:
        model = Evaluation

    submission = factory.SubFactory(SubmissionFactory)
    evaluator = factory.SubFactory(UserFactory, role=ROLES.EVALUATOR)
    total_score = 7.5
    feedback = 'Nice work.'
    is_completed = True


class CriteriaEvaluationFactory(DjangoModelFactory):
    """ Create mock CriteriaEvaluation models. """
    class Meta:
        model = CriteriaEvaluation

    evaluation = factory.SubFactory(EvaluationFactory)
    criteria = factory.SubFactory(CriteriaFactory)
    score = 7
    feedback = ''
