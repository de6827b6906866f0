from django.urls import path
from .views import HostProfileView

urlpatterns = [
    path("profile/", HostProfileView.as_view(), name="host-profile"),
]
