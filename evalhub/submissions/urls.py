""" Submission API paths. """

from django.urls import path

from evalhub.submissions import views

urlpatterns = [
    path('', views.SubmissionListView.as_view(), name='submission-list'),
    path('<int:submission_id>/', views.SubmissionDetailView.as_view(), name='submission-detail'),
]
