"""
Pydantic schemas for the AI agent endpoint.

The hosted model is asked to reply with a JSON envelope
``{action, parameters, response, confidence}``. The envelope is validated as a
discriminated union on ``action``; anything that does not match one of the
variants is replaced by the fallback instruction in services/agent.py.
Parameter keys are camelCase on the wire (partySize, tableId, ...).
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from reservation_agent.schemas.table import TableRead


class AgentRequest(BaseModel):
    """Body for POST /ai-agent."""

    prompt: str = Field(..., min_length=1, max_length=2000)


# ── Instruction parameters ───────────────────────────────────────────────────


class _Parameters(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class AvailabilityParameters(_Parameters):
    party_size: Optional[int] = Field(None, gt=0)
    time: Optional[str] = None
    restaurant_id: Optional[str] = None


class ReservationParameters(_Parameters):
    customer_id: Optional[str] = None
    restaurant_id: Optional[str] = None
    table_id: Optional[str] = None
    time: Optional[str] = None
    party_size: Optional[int] = Field(None, gt=0)
    special_requests: list[str] = Field(default_factory=list)


# ── Instruction variants ─────────────────────────────────────────────────────


class _Instruction(BaseModel):
    response: str = ""
    confidence: float = 0.0   # advisory only, never range-checked


class CheckAvailabilityInstruction(_Instruction):
    action: Literal["check_availability"]
    parameters: AvailabilityParameters = Field(default_factory=AvailabilityParameters)


class CreateReservationInstruction(_Instruction):
    action: Literal["create_reservation"]
    parameters: ReservationParameters = Field(default_factory=ReservationParameters)


class SuggestAlternativesInstruction(_Instruction):
    action: Literal["suggest_alternatives"]
    parameters: dict[str, Any] = Field(default_factory=dict)


class HandleSpecialRequestInstruction(_Instruction):
    action: Literal["handle_special_request"]
    parameters: dict[str, Any] = Field(default_factory=dict)


AgentInstruction = Annotated[
    Union[
        CheckAvailabilityInstruction,
        CreateReservationInstruction,
        SuggestAlternativesInstruction,
        HandleSpecialRequestInstruction,
    ],
    Field(discriminator="action"),
]

instruction_adapter: TypeAdapter[AgentInstruction] = TypeAdapter(AgentInstruction)


# ── Dispatch results ─────────────────────────────────────────────────────────


class AvailabilityResult(BaseModel):
    """Result of a check_availability instruction."""

    available: bool
    tables: list[TableRead]
    message: str


class MessageResult(BaseModel):
    """Result of an instruction that only carries human-readable text."""

    message: str
