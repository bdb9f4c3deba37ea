"""JSON views for the Atlas Mines portal."""

from __future__ import annotations

import json

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse

from covenant.ai_frens import COVENANT_AI_AGENTS
from covenant.search import SearchError
from portal.services import build_ai_client, build_looking_glass

SEARCH_SCOPES = ("bridgeworld", "covenant")


def _error(message: str, *, status: int) -> JsonResponse:
    """Return the standard error payload."""

    return JsonResponse({"ok": False, "error": message}, status=status)


def _method_not_allowed(method: str) -> JsonResponse:
    return _error(f"{method} required.", status=405)


def _optional_int(raw: object) -> int | None:
    """Parse an optional integer parameter.

    Args:
        raw: Query-string or JSON value. None and empty strings mean "absent".

    Returns:
        The parsed integer, or None when absent.

    Raises:
        ValueError: When the value is present but not an integer.
    """

    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValueError(f"Not an integer: {raw!r}")
    if isinstance(raw, int):
        return raw
    return int(str(raw).strip())


def index(request: HttpRequest) -> JsonResponse:
    """Return site metadata and the API index."""

    return JsonResponse(
        {
            "title": settings.PORTAL_SITE_TITLE,
            "description": settings.PORTAL_SITE_DESCRIPTION,
            "endpoints": {
                "foundation": reverse("portal:foundation_api"),
                "addresses": reverse("portal:addresses_api"),
                "pieces": reverse("portal:pieces_api"),
                "integration_code": reverse("portal:integration_code"),
                "search": reverse("portal:search_api"),
                "agents": reverse("portal:agents_api"),
                "chat": reverse("portal:chat_api"),
            },
        }
    )


def foundation_api(request: HttpRequest) -> JsonResponse:
    """Return the covenant foundation reference data."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    glass = build_looking_glass()
    return JsonResponse({"ok": True, "foundation": glass.get_foundation().as_json()})


def addresses_api(request: HttpRequest) -> JsonResponse:
    """List covenant addresses, or return the one for `?chain=`."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    glass = build_looking_glass()

    chain = (request.GET.get("chain") or "").strip().lower()
    if chain:
        record = glass.get_covenant_address_by_chain(chain)
        if record is None:
            return _error(f"No covenant address on chain {chain!r}.", status=404)
        return JsonResponse({"ok": True, "address": record.as_json()})

    return JsonResponse(
        {
            "ok": True,
            "addresses": [record.as_json() for record in glass.get_covenant_addresses()],
        }
    )


def address_detail_api(request: HttpRequest, address: str) -> JsonResponse:
    """Return covenant address info for `address` (case-insensitive)."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    record = build_looking_glass().get_covenant_address_info(address)
    if record is None:
        return _error("Not a covenant address.", status=404)
    return JsonResponse({"ok": True, "address": record.as_json()})


def pieces_api(request: HttpRequest) -> JsonResponse:
    """Resolve the missing pieces and return the assembly."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    glass = build_looking_glass()
    try:
        pieces = glass.find_missing_pieces()
    except SearchError as exc:
        return _error(str(exc), status=502)

    result = glass.assemble_pieces(pieces)
    return JsonResponse({"ok": True, **result.as_json()})


def integration_code(request: HttpRequest) -> HttpResponse:
    """Resolve the missing pieces and return the generated integration code."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    glass = build_looking_glass()
    try:
        pieces = glass.find_missing_pieces()
    except SearchError as exc:
        return _error(str(exc), status=502)

    return HttpResponse(glass.generate_integration_code(pieces), content_type="text/plain; charset=utf-8")


def search_api(request: HttpRequest) -> JsonResponse:
    """Search for a Bridgeworld component (default) or covenant term."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    query = (request.GET.get("q") or "").strip()
    scope = (request.GET.get("scope") or "bridgeworld").strip().lower()
    if scope not in SEARCH_SCOPES:
        return _error(f"Unknown scope {scope!r}; expected one of {', '.join(SEARCH_SCOPES)}.", status=400)
    if not query:
        return JsonResponse({"ok": True, "query": "", "scope": scope, "results": []})

    glass = build_looking_glass()
    try:
        if scope == "covenant":
            results = glass.search_covenant_info(query)
        else:
            results = glass.search_bridgeworld_component(query)
    except SearchError as exc:
        return _error(str(exc), status=502)

    return JsonResponse(
        {
            "ok": True,
            "query": query,
            "scope": scope,
            "results": [result.as_json() for result in results],
        }
    )


def agents_api(request: HttpRequest) -> JsonResponse:
    """List the guardian AI agents."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    return JsonResponse({"ok": True, "agents": [agent.as_json() for agent in COVENANT_AI_AGENTS]})


def chat_api(request: HttpRequest) -> JsonResponse:
    """Chat with a guardian agent.

    Expects a JSON body with `guardian_path`, `message` and an optional
    `account` address.
    """

    if request.method != "POST":
        return _method_not_allowed("POST")
    try:
        payload = json.loads(request.body or b"{}")
    except ValueError:
        return _error("Request body must be JSON.", status=400)
    if not isinstance(payload, dict):
        return _error("Request body must be a JSON object.", status=400)

    try:
        guardian_path = _optional_int(payload.get("guardian_path"))
    except ValueError:
        return _error("guardian_path must be an integer.", status=400)
    if guardian_path is None:
        return _error("guardian_path is required.", status=400)

    message = str(payload.get("message") or "").strip()
    if not message:
        return _error("message is required.", status=400)

    client = build_ai_client(account_address=str(payload.get("account") or ""))
    reply = client.chat_with_guardian(guardian_path, message)
    return JsonResponse({"ok": True, **reply.as_json()})


def quest_help_api(request: HttpRequest, quest_id: str) -> JsonResponse:
    """Return mock quest help, optionally scoped to `?guardian=`."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    try:
        guardian_path = _optional_int(request.GET.get("guardian"))
    except ValueError:
        return _error("guardian must be an integer.", status=400)

    client = build_ai_client(account_address=request.GET.get("account", ""))
    reply = client.get_quest_help(quest_id, guardian_path)
    return JsonResponse({"ok": True, **reply.as_json()})


def legion_strategy_api(request: HttpRequest, legion_id: str) -> JsonResponse:
    """Return mock legion strategy, optionally scoped to `?guardian=`."""

    if request.method != "GET":
        return _method_not_allowed("GET")
    try:
        guardian_path = _optional_int(request.GET.get("guardian"))
    except ValueError:
        return _error("guardian must be an integer.", status=400)

    client = build_ai_client(account_address=request.GET.get("account", ""))
    reply = client.get_legion_strategy(legion_id, guardian_path)
    return JsonResponse({"ok": True, **reply.as_json()})
