"""Wiring between Django settings and the covenant package."""

from __future__ import annotations

from django.conf import settings

from covenant.ai_frens import CovenantAIClient
from covenant.looking_glass import CovenantLookingGlass
from covenant.search import SearchClient
from portal.brave_search import BraveSearchAPI


def build_search_client() -> SearchClient:
    """Return a Brave client configured from settings."""

    return BraveSearchAPI(
        settings.BRAVE_SEARCH_API_KEY,
        endpoint=settings.BRAVE_SEARCH_ENDPOINT,
        timeout=settings.BRAVE_SEARCH_TIMEOUT_SECONDS,
    )


def build_looking_glass() -> CovenantLookingGlass:
    """Return a looking glass backed by the configured search client."""

    return CovenantLookingGlass(build_search_client())


def build_ai_client(*, account_address: str) -> CovenantAIClient:
    """Return an AI Frens client acting for `account_address`."""

    return CovenantAIClient(account_address)
