from dataclasses import asdict

from django.conf import settings
from django.views.static import serve
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import StaticRootStatusSerializer
from .services.static_root import inspect_static_root


class StaticRootStatusView(APIView):
    permission_classes = [permissions.IsAdminUser]

    def get(self, request):
        root_status = inspect_static_root(settings.STATIC_ROOT)
        serializer = StaticRootStatusSerializer(
            {**asdict(root_status), 'static_url': settings.STATIC_URL}
        )
        return Response(serializer.data, status=status.HTTP_200_OK)


def serve_collected(request, path):
    # STATIC_ROOT is looked up per request so overrides in tests take effect
    return serve(request, path, document_root=settings.STATIC_ROOT)
