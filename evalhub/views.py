"""
Views that do not belong to any one app.
"""
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from evalhub import __version__


class HealthView(APIView):
    """Liveness check. Needs no identity and touches no database."""
    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, request):
        return Response({'status': 'ok', 'version': __version__})
