"""URL configuration for atlasPortal."""

from __future__ import annotations

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("", include("portal.urls")),
    path("admin/", admin.site.urls),
]
