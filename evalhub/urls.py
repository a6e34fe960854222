""" evalhub JSON API, mounted under ``/api/``. """

from django.urls import include, path

from evalhub.criteria.urls import category_urlpatterns, criteria_urlpatterns
from evalhub.views import HealthView

urlpatterns = [
    path('health/', HealthView.as_view(), name='health'),
    path('criteria/', include(criteria_urlpatterns)),
    path('categories/', include(category_urlpatterns)),
    path('submissions/', include('evalhub.submissions.urls')),
    path('evaluations/', include('evalhub.evaluation.urls')),
    path('users/', include('evalhub.accounts.urls')),
]
