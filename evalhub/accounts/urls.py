""" User API paths. """

from django.urls import path, re_path

from evalhub.accounts import views

urlpatterns = [
    path('', views.UserListView.as_view(), name='user-list'),
    path('me/', views.CurrentUserView.as_view(), name='user-me'),
    re_path(r'^(?P<user_id>[^/]+)/promote/$', views.PromoteUserView.as_view(), name='user-promote'),
    re_path(r'^(?P<user_id>[^/]+)/$', views.UserDetailView.as_view(), name='user-detail'),
]
