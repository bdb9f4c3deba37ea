"""URL configuration for portal views."""

from __future__ import annotations

from django.urls import path

from portal import views

app_name = "portal"

urlpatterns = [
    path("", views.index, name="index"),
    path("api/covenant/foundation/", views.foundation_api, name="foundation_api"),
    path("api/covenant/addresses/", views.addresses_api, name="addresses_api"),
    path("api/covenant/addresses/<str:address>/", views.address_detail_api, name="address_detail_api"),
    path("api/covenant/pieces/", views.pieces_api, name="pieces_api"),
    path("api/covenant/integration-code/", views.integration_code, name="integration_code"),
    path("api/covenant/search/", views.search_api, name="search_api"),
    path("api/ai/agents/", views.agents_api, name="agents_api"),
    path("api/ai/chat/", views.chat_api, name="chat_api"),
    path("api/ai/quests/<str:quest_id>/help/", views.quest_help_api, name="quest_help_api"),
    path("api/ai/legions/<str:legion_id>/strategy/", views.legion_strategy_api, name="legion_strategy_api"),
]
