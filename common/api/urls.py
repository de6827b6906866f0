from django.urls import path

from .views import ServiceStatusAPIView

urlpatterns = [
    path("", ServiceStatusAPIView.as_view(), name="service-status"),
]
