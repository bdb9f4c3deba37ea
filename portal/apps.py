"""App configuration for the portal Django app."""

from __future__ import annotations

from django.apps import AppConfig


class PortalConfig(AppConfig):
    """Configuration for the `portal` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "portal"
