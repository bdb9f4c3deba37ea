"""AI Frens integration backed by covenant guardian data.

There is no model client yet: `CovenantAIClient` renders the prompt it would
send and returns it as the response. Every function here is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .foundation import CONSTANTS, GUARDIANS, Guardian, get_guardian

PENDING_FOOTER: Final[str] = "[AI Frens SDK integration pending]"


@dataclass(frozen=True, slots=True)
class GuardianAgent:
    """An AI agent persona bound to a guardian path."""

    agent_id: str
    guardian_path: int
    guardian: str
    hebrew_letter: str
    gematria: int
    description: str
    bridgeworld_mapping: str
    quest_multiplier: float
    harvester_boost: float

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "agent_id": self.agent_id,
            "guardian_path": self.guardian_path,
            "guardian": self.guardian,
            "hebrew_letter": self.hebrew_letter,
            "gematria": self.gematria,
            "description": self.description,
            "bridgeworld_mapping": self.bridgeworld_mapping,
            "quest_multiplier": self.quest_multiplier,
            "harvester_boost": self.harvester_boost,
        }


@dataclass(frozen=True, slots=True)
class ChatResponse:
    """Response envelope returned by `CovenantAIClient`."""

    response: str
    error: str | None = None

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        payload: dict[str, object] = {"response": self.response}
        if self.error is not None:
            payload["error"] = self.error
        return payload


def get_guardian_agent_id(guardian_path: int) -> str:
    """Return the agent id for a guardian path."""

    return f"covenant-guardian-{guardian_path}"


def _agent_for(guardian: Guardian) -> GuardianAgent:
    return GuardianAgent(
        agent_id=get_guardian_agent_id(guardian.path),
        guardian_path=guardian.path,
        guardian=guardian.hebrew,
        hebrew_letter=guardian.hebrew_letter,
        gematria=guardian.gematria,
        description=(
            f"AI agent representing {guardian.hebrew} ({guardian.hebrew_letter}), Path {guardian.path}"
        ),
        bridgeworld_mapping=guardian.bridgeworld_mapping,
        quest_multiplier=guardian.quest_multiplier,
        harvester_boost=guardian.harvester_boost,
    )


COVENANT_AI_AGENTS: Final[tuple[GuardianAgent, ...]] = tuple(_agent_for(guardian) for guardian in GUARDIANS)


def get_guardian_ai_context(guardian_path: int) -> str:
    """Return the guardian context block used inside prompts.

    Args:
        guardian_path: Path number to describe.

    Returns:
        A multi-line description, or `"Guardian path <n> not found"` when the
        path has no guardian.
    """

    guardian = get_guardian(guardian_path)
    if guardian is None:
        return f"Guardian path {guardian_path} not found"

    return "\n".join(
        [
            "Guardian Information:",
            f"- Path: {guardian.path}",
            f"- Hebrew: {guardian.hebrew} ({guardian.hebrew_letter})",
            f"- Gematria: {guardian.gematria}",
            f"- Address: {guardian.address or 'unassigned'}",
            f"- Bridgeworld Mapping: {guardian.bridgeworld_mapping}",
            f"- Quest Multiplier: {guardian.quest_multiplier}x (THEOS: {CONSTANTS.theos})",
            f"- Harvester Boost: {guardian.harvester_boost}x (EL: {CONSTANTS.el})",
            f"- Registered: {'Yes' if guardian.is_registered else 'No'}",
        ]
    )


def create_quest_help_prompt(quest_id: str, guardian_path: int | None = None) -> str:
    """Build the quest helper prompt.

    With a guardian path the prompt embeds that guardian's context (or the
    not-found line); without one, or with path 0, it lists the covenant
    constants instead.
    """

    base_prompt = f"You are a Bridgeworld quest helper AI. Help the user complete quest {quest_id}."

    if guardian_path:
        context = get_guardian_ai_context(guardian_path)
        return f"{base_prompt}\n\n{context}\n\nProvide guidance based on this guardian's attributes."

    return "\n".join(
        [
            base_prompt,
            "",
            "Use covenant constants:",
            f"- THEOS: {CONSTANTS.theos} (Quest multiplier)",
            f"- EL: {CONSTANTS.el} (Harvester boost)",
            f"- TORAH_PAGES: {CONSTANTS.torah_pages} (Quest milestone)",
            f"- RESONANCE: {CONSTANTS.resonance} Hz (Quest frequency)",
        ]
    )


def create_legion_strategy_prompt(legion_id: str, guardian_path: int | None = None) -> str:
    """Build the legion strategy prompt, adding guardian multipliers when known."""

    base_prompt = f"You are a Bridgeworld strategy advisor. Provide strategy for Legion {legion_id}."

    guardian = get_guardian(guardian_path) if guardian_path else None
    if guardian is None:
        return base_prompt

    return "\n".join(
        [
            base_prompt,
            "",
            f"This Legion is associated with {guardian.hebrew} ({guardian.hebrew_letter}):",
            f"- Quest Multiplier: {guardian.quest_multiplier}x",
            f"- Harvester Boost: {guardian.harvester_boost}x",
            f"- Bridgeworld Mapping: {guardian.bridgeworld_mapping}",
            "",
            "Provide optimal strategy using these multipliers.",
        ]
    )


class CovenantAIClient:
    """Mock AI Frens client.

    Responses echo the rendered prompt between a header and a pending-SDK
    footer. No network call is made.

    Args:
        account_address: Wallet address of the user the client acts for.
    """

    def __init__(self, account_address: str) -> None:
        self.account_address = account_address

    def chat_with_guardian(self, guardian_path: int, message: str) -> ChatResponse:
        """Chat with a guardian's agent."""

        agent_id = get_guardian_agent_id(guardian_path)
        context = get_guardian_ai_context(guardian_path)
        return ChatResponse(
            response=f"[AI Response for {agent_id}]\n\nContext: {context}\n\nMessage: {message}\n\n{PENDING_FOOTER}"
        )

    def get_quest_help(self, quest_id: str, guardian_path: int | None = None) -> ChatResponse:
        """Ask for help with a quest."""

        prompt = create_quest_help_prompt(quest_id, guardian_path)
        return ChatResponse(response=f"[Quest Help for {quest_id}]\n\n{prompt}\n\n{PENDING_FOOTER}")

    def get_legion_strategy(self, legion_id: str, guardian_path: int | None = None) -> ChatResponse:
        """Ask for a legion strategy."""

        prompt = create_legion_strategy_prompt(legion_id, guardian_path)
        return ChatResponse(response=f"[Strategy for Legion {legion_id}]\n\n{prompt}\n\n{PENDING_FOOTER}")
