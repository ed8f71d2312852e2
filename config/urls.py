from django.urls import include, path, re_path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from deployment.views import serve_collected

urlpatterns = [
    path('api/token/', TokenObtainPairView.as_view(), name='token-obtain-pair'),
    path('api/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('deployment/', include('deployment.urls')),
    re_path(r'^static/(?P<path>.*)$', serve_collected, name='static'),
]
