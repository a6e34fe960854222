""" Evaluation API paths. """

from django.urls import path

from evalhub.evaluation import views

urlpatterns = [
    path('', views.EvaluationListView.as_view(), name='evaluation-list'),
    path('<int:evaluation_id>/', views.EvaluationDetailView.as_view(), name='evaluation-detail'),
    path('<int:evaluation_id>/export/', views.EvaluationExportView.as_view(), name='evaluation-export'),
]
