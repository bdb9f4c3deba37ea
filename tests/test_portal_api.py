"""Integration tests for the portal JSON API."""

from __future__ import annotations

import pytest
from django.urls import reverse

from covenant.foundation import MISSING_PIECES
from fakes import FakeSearchClient, results_for

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


def test_index_exposes_site_metadata(client) -> None:
    """The root view returns the portal title, tagline and endpoint index."""

    response = client.get(reverse("portal:index"))
    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == "Bridgeworld - Atlas Mines Portal"
    assert payload["description"] == "Unlock the portal at the Atlas Mines using the Key and Map"
    assert payload["endpoints"]["pieces"] == reverse("portal:pieces_api")


def test_foundation_api_returns_reference_data(client) -> None:
    """Foundation payload includes constants, guardians and addresses."""

    payload = client.get(reverse("portal:foundation_api")).json()
    foundation = payload["foundation"]
    assert foundation["constants"]["theos"] == 419
    assert [row["path"] for row in foundation["guardians"]] == [1, 7, 9, 10, 11, 18]
    assert [row["chain"] for row in foundation["covenant_addresses"]] == ["ethereum", "polygon", "arbitrum"]
    assert foundation["missing_pieces"] == list(MISSING_PIECES)


def test_addresses_api_lists_and_filters_by_chain(client) -> None:
    """Chain filtering returns a single record or 404 for unknown chains."""

    listing = client.get(reverse("portal:addresses_api")).json()
    assert len(listing["addresses"]) == 3

    polygon = client.get(reverse("portal:addresses_api"), {"chain": "Polygon"})
    assert polygon.status_code == 200
    assert polygon.json()["address"]["chain_id"] == "137"

    unknown = client.get(reverse("portal:addresses_api"), {"chain": "optimism"})
    assert unknown.status_code == 404
    assert unknown.json()["ok"] is False


def test_address_detail_api_is_case_insensitive(client) -> None:
    """Upper-case addresses resolve to the same record."""

    url = reverse("portal:address_detail_api", args=["0x3DF07977140AD97465075129C37AEC7237D74415"])
    response = client.get(url)
    assert response.status_code == 200
    assert response.json()["address"]["chain"] == "arbitrum"

    missing = client.get(reverse("portal:address_detail_api", args=["0x0"]))
    assert missing.status_code == 404


def test_pieces_api_reports_all_missing_with_empty_search(client, empty_search, use_search_client) -> None:
    """With no search results every piece is reported missing."""

    use_search_client(empty_search)
    response = client.get(reverse("portal:pieces_api"))
    assert response.status_code == 200
    payload = response.json()
    assert payload["complete"] is False
    assert payload["missing"] == list(MISSING_PIECES)
    assert len(empty_search.calls) == len(MISSING_PIECES)


def test_pieces_api_buckets_found_contracts(client, use_search_client) -> None:
    """Found contract pieces appear in the integration contracts bucket."""

    def responder(query: str):
        if "Quest contract" in query:
            return results_for("https://docs.example/quests")
        return []

    use_search_client(FakeSearchClient(responder))
    payload = client.get(reverse("portal:pieces_api")).json()
    contracts = payload["assembled"]["integration"]["contracts"]
    assert contracts == [{"name": "Quest contract integration code", "sources": ["https://docs.example/quests"]}]
    assert "Quest contract integration code" not in payload["missing"]


def test_pieces_api_returns_502_on_search_failure(client, use_search_client) -> None:
    """Upstream search failures map to a 502 error payload."""

    use_search_client(FakeSearchClient(error_on="Bridgeworld"))
    response = client.get(reverse("portal:pieces_api"))
    assert response.status_code == 502
    assert response.json()["ok"] is False


def test_integration_code_is_plain_text(client, empty_search, use_search_client) -> None:
    """Integration code is served as text with the covenant constants."""

    use_search_client(empty_search)
    response = client.get(reverse("portal:integration_code"))
    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/plain")
    assert "const HEBREW_PATHS = 22;" in response.content.decode("utf-8")


def test_search_api_scopes_queries(client, empty_search, use_search_client) -> None:
    """The scope parameter selects the query prefix."""

    use_search_client(empty_search)
    client.get(reverse("portal:search_api"), {"q": "Harvester"})
    client.get(reverse("portal:search_api"), {"q": "guardians", "scope": "covenant"})
    assert [query for query, _ in empty_search.calls] == [
        "TreasureDAO Bridgeworld Harvester",
        "Bridgeworld covenant guardians",
    ]

    bad_scope = client.get(reverse("portal:search_api"), {"q": "x", "scope": "web"})
    assert bad_scope.status_code == 400

    blank = client.get(reverse("portal:search_api"))
    assert blank.json()["results"] == []
    assert len(empty_search.calls) == 2


def test_agents_api_lists_guardian_agents(client) -> None:
    """Each guardian has an agent entry."""

    agents = client.get(reverse("portal:agents_api")).json()["agents"]
    assert [agent["agent_id"] for agent in agents][:2] == ["covenant-guardian-1", "covenant-guardian-7"]


def test_chat_api_returns_mock_response(client) -> None:
    """Chat renders the guardian context into the mock response."""

    response = client.post(
        reverse("portal:chat_api"),
        data={"guardian_path": 7, "message": "Which quest first?", "account": "0xabc"},
        content_type="application/json",
    )
    assert response.status_code == 200
    text = response.json()["response"]
    assert text.startswith("[AI Response for covenant-guardian-7]")
    assert "Message: Which quest first?" in text


def test_chat_api_validates_input(client) -> None:
    """Wrong method, bad JSON and missing fields are rejected."""

    assert client.get(reverse("portal:chat_api")).status_code == 405
    bad_json = client.post(reverse("portal:chat_api"), data="{", content_type="application/json")
    assert bad_json.status_code == 400
    no_path = client.post(reverse("portal:chat_api"), data={"message": "hi"}, content_type="application/json")
    assert no_path.status_code == 400
    no_message = client.post(reverse("portal:chat_api"), data={"guardian_path": 1}, content_type="application/json")
    assert no_message.status_code == 400


def test_quest_help_and_legion_strategy_apis(client) -> None:
    """Quest and legion endpoints accept an optional guardian path."""

    help_reply = client.get(reverse("portal:quest_help_api", args=["Q-7"]), {"guardian": "18"})
    assert help_reply.status_code == 200
    assert "Rare Legion" in help_reply.json()["response"]

    strategy = client.get(reverse("portal:legion_strategy_api", args=["42"]))
    assert strategy.status_code == 200
    assert "Provide strategy for Legion 42." in strategy.json()["response"]

    bad = client.get(reverse("portal:legion_strategy_api", args=["42"]), {"guardian": "seven"})
    assert bad.status_code == 400


def test_quest_help_api_guardian_zero_lists_constants(client) -> None:
    """`?guardian=0` behaves like an omitted guardian."""

    response = client.get(reverse("portal:quest_help_api", args=["Q"]), {"guardian": "0"})
    assert response.status_code == 200
    text = response.json()["response"]
    assert "Use covenant constants:" in text
    assert "not found" not in text


def test_search_api_returns_502_on_malformed_provider_payload(client, monkeypatch) -> None:
    """A malformed provider payload surfaces as a 502, not a server error."""

    from portal import brave_search

    class _Body:
        def __enter__(self):
            return self

        def __exit__(self, *exc_info) -> None:
            return None

        def read(self) -> bytes:
            return b'{"web": "rate limited"}'

    monkeypatch.setattr(brave_search.urllib.request, "urlopen", lambda *_args, **_kwargs: _Body())
    monkeypatch.setattr(
        "portal.services.build_search_client",
        lambda: brave_search.BraveSearchAPI("secret"),
    )
    response = client.get(reverse("portal:search_api"), {"q": "Harvester"})
    assert response.status_code == 502
    assert response.json()["ok"] is False
