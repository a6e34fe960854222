from django.contrib import admin
from django.urls import include, path, re_path

import evalhub.urls

urlpatterns = [
    # Django built-in
    re_path(r'^admin/', admin.site.urls),

    # evalhub JSON API
    path('api/', include(evalhub.urls)),
]
