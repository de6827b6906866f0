from django.urls import path
from .views import PerformerProfileListView, PerformerProfileView

urlpatterns = [
    path("", PerformerProfileListView.as_view(), name="performer-profiles"),
    path("profile/", PerformerProfileView.as_view(), name="performer-profile"),
]
