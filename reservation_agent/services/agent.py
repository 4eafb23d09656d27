"""
AI agent — natural-language front door for availability and booking.

One turn is a single prompt-and-parse round trip:

  interpret  → send the instruction preamble + customer text to the model and
               validate the reply as an AgentInstruction
  dispatch   → check_availability  → find_available_tables
               create_reservation  → book
               anything else       → pass the model's text straight through

A reply that is not valid JSON, or does not match any instruction variant, is
replaced by the fallback instruction (check_availability with the configured
defaults, the raw reply as ``response``). That is never an error.
The confidence score is carried through but never acted upon.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from pydantic import ValidationError

from reservation_agent.config import Settings
from reservation_agent.schemas.agent import (
    AgentInstruction,
    AvailabilityParameters,
    AvailabilityResult,
    CheckAvailabilityInstruction,
    CreateReservationInstruction,
    MessageResult,
    instruction_adapter,
)
from reservation_agent.schemas.reservation import ReservationRead
from reservation_agent.schemas.table import TableRead
from reservation_agent.services.availability import find_available_tables
from reservation_agent.services.booking import book
from reservation_agent.services.llm import call_model, strip_fences
from reservation_agent.services.store import RecordStore
from reservation_agent.utils.prompts import build_agent_prompt
from reservation_agent.utils.time import utc_now_iso

logger = logging.getLogger(__name__)

AgentResult = Union[AvailabilityResult, ReservationRead, MessageResult]


@dataclass(frozen=True)
class AgentDefaults:
    """Values substituted for parameters the model leaves out."""

    restaurant_id: str
    customer_id: str
    party_size: int
    fallback_confidence: float

    @classmethod
    def from_settings(cls, settings: Settings) -> "AgentDefaults":
        return cls(
            restaurant_id=settings.default_restaurant_id,
            customer_id=settings.default_customer_id,
            party_size=settings.default_party_size,
            fallback_confidence=settings.fallback_confidence,
        )


def fallback_instruction(raw: str, defaults: AgentDefaults) -> CheckAvailabilityInstruction:
    """The instruction used whenever the model reply cannot be parsed."""
    return CheckAvailabilityInstruction(
        action="check_availability",
        parameters=AvailabilityParameters(
            party_size=defaults.party_size,
            time=utc_now_iso(),
            restaurant_id=defaults.restaurant_id,
        ),
        response=raw,
        confidence=defaults.fallback_confidence,
    )


def parse_instruction(raw: str, defaults: AgentDefaults) -> AgentInstruction:
    """Validate the model reply against the instruction union, or fall back."""
    try:
        return instruction_adapter.validate_json(strip_fences(raw))
    except ValidationError as exc:
        logger.warning(
            "Model reply did not match the instruction schema (%d errors), using fallback",
            exc.error_count(),
        )
        return fallback_instruction(raw, defaults)


async def interpret(prompt: str, defaults: AgentDefaults) -> AgentInstruction:
    """Ask the hosted model what to do with the customer's text."""
    full_prompt = build_agent_prompt(
        message=prompt,
        restaurant_id=defaults.restaurant_id,
        now_iso=utc_now_iso(),
    )
    raw = await call_model(full_prompt)
    return parse_instruction(raw, defaults)


async def dispatch(
    instruction: AgentInstruction,
    store: RecordStore,
    defaults: AgentDefaults,
) -> AgentResult:
    """Execute the instruction against the availability evaluator or booking committer."""
    if isinstance(instruction, CheckAvailabilityInstruction):
        params = instruction.parameters
        tables = await find_available_tables(
            store,
            restaurant_id=params.restaurant_id or defaults.restaurant_id,
            party_size=params.party_size or defaults.party_size,
            reservation_time=params.time or utc_now_iso(),
        )
        return AvailabilityResult(
            available=bool(tables),
            tables=[TableRead.model_validate(t) for t in tables],
            message=f"Found {len(tables)} available tables",
        )

    if isinstance(instruction, CreateReservationInstruction):
        params = instruction.parameters
        # tableId / time / partySize are passed through as given; book() rejects absences.
        return await book(
            store,
            customer_id=params.customer_id or defaults.customer_id,
            restaurant_id=params.restaurant_id or defaults.restaurant_id,
            table_id=params.table_id,
            reservation_time=params.time,
            party_size=params.party_size,
            notes=params.special_requests,
        )

    return MessageResult(message=instruction.response)


async def handle_prompt(
    prompt: str,
    store: RecordStore,
    defaults: AgentDefaults,
) -> tuple[AgentInstruction, AgentResult]:
    """Interpret one customer message and carry out the resulting instruction."""
    instruction = await interpret(prompt, defaults)
    logger.info(
        "Agent action=%s confidence=%.2f", instruction.action, instruction.confidence
    )
    result = await dispatch(instruction, store, defaults)
    return instruction, result
