from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path

urlpatterns = [
    path("", include("common.api.urls")),
    path("api/hosts/", include("hosts.api.urls")),
    path("api/performers/", include("performers.api.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
