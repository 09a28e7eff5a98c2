"""URL configuration for the box office project."""

from django.http import HttpResponse
from django.urls import include, path


def health_check(request):
    """Simple health check endpoint"""
    return HttpResponse("OK", content_type="text/plain")


urlpatterns = [
    path("api/", include("boxoffice.urls")),
    path("health/", health_check, name="health_check"),
]
