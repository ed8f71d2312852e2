from django.urls import path
from .views import StaticRootStatusView

urlpatterns = [
    path('static-root/', StaticRootStatusView.as_view(), name='static-root-status'),
]
