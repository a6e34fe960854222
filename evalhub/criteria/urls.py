""" Criteria and category API paths. """

from django.urls import path

from evalhub.criteria import views

criteria_urlpatterns = [
    path('', views.CriteriaListView.as_view(), name='criteria-list'),
    path('<int:criteria_id>/', views.CriteriaDetailView.as_view(), name='criteria-detail'),
]

category_urlpatterns = [
    path('', views.CategoryListView.as_view(), name='category-list'),
    path('<int:category_id>/', views.CategoryDetailView.as_view(), name='category-detail'),
]
