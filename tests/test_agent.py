"""Tests for the natural-language agent: reply parsing, fallback, and dispatch."""
import json

import pytest

from reservation_agent.errors import FieldValidationError, SlotConflictError
from reservation_agent.models import Reservation, SpecialRequest
from reservation_agent.schemas.agent import (
    AvailabilityResult,
    CheckAvailabilityInstruction,
    CreateReservationInstruction,
    HandleSpecialRequestInstruction,
    MessageResult,
    SuggestAlternativesInstruction,
)
from reservation_agent.schemas.reservation import ReservationRead
from reservation_agent.services.agent import (
    AgentDefaults,
    dispatch,
    fallback_instruction,
    handle_prompt,
    interpret,
    parse_instruction,
)
from reservation_agent.services.llm import LLMError

from conftest import DINNER, RESTAURANT_ID


def _reply(action, parameters=None, response="On it!", confidence=0.95):
    return json.dumps(
        {
            "action": action,
            "parameters": parameters or {},
            "response": response,
            "confidence": confidence,
        }
    )


@pytest.mark.unit
class TestParseInstruction:
    """Validating model replies against the instruction union."""

    def test_check_availability_reply(self, agent_defaults):
        raw = _reply("check_availability", {"partySize": 3, "time": DINNER, "restaurantId": "rest_002"})

        instruction = parse_instruction(raw, agent_defaults)

        assert isinstance(instruction, CheckAvailabilityInstruction)
        assert instruction.parameters.party_size == 3
        assert instruction.parameters.time == DINNER
        assert instruction.parameters.restaurant_id == "rest_002"
        assert instruction.confidence == 0.95

    def test_create_reservation_reply(self, agent_defaults):
        raw = _reply(
            "create_reservation",
            {"tableId": "table_003", "time": DINNER, "partySize": 4, "specialRequests": ["Cake"]},
        )

        instruction = parse_instruction(raw, agent_defaults)

        assert isinstance(instruction, CreateReservationInstruction)
        assert instruction.parameters.table_id == "table_003"
        assert instruction.parameters.customer_id is None
        assert instruction.parameters.special_requests == ["Cake"]

    @pytest.mark.parametrize(
        "action, cls",
        [
            ("suggest_alternatives", SuggestAlternativesInstruction),
            ("handle_special_request", HandleSpecialRequestInstruction),
        ],
    )
    def test_text_only_actions(self, agent_defaults, action, cls):
        instruction = parse_instruction(_reply(action, {"anything": 1}), agent_defaults)

        assert isinstance(instruction, cls)
        assert instruction.parameters == {"anything": 1}

    def test_fenced_reply_is_unwrapped(self, agent_defaults):
        raw = "```json\n" + _reply("check_availability", {"partySize": 6}) + "\n```"

        instruction = parse_instruction(raw, agent_defaults)

        assert isinstance(instruction, CheckAvailabilityInstruction)
        assert instruction.parameters.party_size == 6
        assert instruction.response == "On it!"

    def test_out_of_range_confidence_keeps_instruction(self, agent_defaults):
        raw = _reply("create_reservation", {"tableId": "table_005", "time": DINNER, "partySize": 5},
                     response="Booked!", confidence=95)

        instruction = parse_instruction(raw, agent_defaults)

        assert isinstance(instruction, CreateReservationInstruction)
        assert instruction.parameters.table_id == "table_005"
        assert instruction.confidence == 95

    def test_missing_response_and_confidence_keep_instruction(self, agent_defaults):
        raw = json.dumps({"action": "create_reservation",
                          "parameters": {"tableId": "table_005", "time": DINNER, "partySize": 5}})

        instruction = parse_instruction(raw, agent_defaults)

        assert isinstance(instruction, CreateReservationInstruction)
        assert instruction.response == ""
        assert instruction.confidence == 0.0

    @pytest.mark.parametrize(
        "raw",
        [
            "Sure, I can help you book a table for 3 tonight!",
            _reply("cancel_everything"),
            json.dumps({"parameters": {"partySize": 2}, "response": "hi", "confidence": 0.9}),
            _reply("check_availability", {"partySize": "lots"}),
            "[1, 2, 3]",
        ],
    )
    def test_unparseable_reply_uses_fallback(self, agent_defaults, raw):
        instruction = parse_instruction(raw, agent_defaults)

        assert isinstance(instruction, CheckAvailabilityInstruction)
        assert instruction.parameters.party_size == 2
        assert instruction.parameters.restaurant_id == RESTAURANT_ID
        assert instruction.parameters.time
        assert instruction.response == raw
        assert instruction.confidence == 0.7

    def test_fallback_uses_configured_defaults(self):
        defaults = AgentDefaults(
            restaurant_id="rest_042", customer_id="c", party_size=4, fallback_confidence=0.5
        )

        instruction = fallback_instruction("???", defaults)

        assert instruction.parameters.restaurant_id == "rest_042"
        assert instruction.parameters.party_size == 4
        assert instruction.confidence == 0.5
        assert instruction.parameters.time.endswith("Z")

    def test_dump_uses_camel_case_keys(self, agent_defaults):
        instruction = parse_instruction(
            _reply("check_availability", {"partySize": 3}), agent_defaults
        )

        dumped = instruction.model_dump(by_alias=True)

        assert dumped["action"] == "check_availability"
        assert dumped["parameters"]["partySize"] == 3
        assert "restaurantId" in dumped["parameters"]


@pytest.mark.unit
class TestDispatch:
    """Executing instructions."""

    @pytest.mark.asyncio
    async def test_check_availability(self, seeded_store, agent_defaults):
        instruction = parse_instruction(
            _reply("check_availability", {"partySize": 5, "time": DINNER}), agent_defaults
        )

        result = await dispatch(instruction, seeded_store, agent_defaults)

        assert isinstance(result, AvailabilityResult)
        assert result.available is True
        assert [t.seating_capacity for t in result.tables] == [6, 6, 8, 8]
        assert result.message == "Found 4 available tables"

    @pytest.mark.asyncio
    async def test_check_availability_applies_defaults(self, seeded_store, agent_defaults):
        instruction = parse_instruction(_reply("check_availability"), agent_defaults)

        result = await dispatch(instruction, seeded_store, agent_defaults)

        # party of 2 at "now" in rest_001: every table qualifies
        assert len(result.tables) == 11

    @pytest.mark.asyncio
    async def test_check_availability_none_free(self, seeded_store, agent_defaults):
        instruction = parse_instruction(
            _reply("check_availability", {"partySize": 12, "time": DINNER}), agent_defaults
        )

        result = await dispatch(instruction, seeded_store, agent_defaults)

        assert result.available is False
        assert result.tables == []
        assert result.message == "Found 0 available tables"

    @pytest.mark.asyncio
    async def test_create_reservation(self, seeded_store, agent_defaults):
        instruction = parse_instruction(
            _reply(
                "create_reservation",
                {"tableId": "table_010", "time": DINNER, "partySize": 7,
                 "specialRequests": ["Anniversary", "Window"]},
            ),
            agent_defaults,
        )

        result = await dispatch(instruction, seeded_store, agent_defaults)

        assert isinstance(result, ReservationRead)
        assert result.customer_id == "cust_001"
        assert result.restaurant_id == RESTAURANT_ID
        assert result.table_id == "table_010"
        assert result.status == "confirmed"
        requests = await seeded_store.query(
            SpecialRequest, "reservation_id", result.reservation_id
        )
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_create_reservation_missing_table(self, seeded_store, agent_defaults):
        instruction = parse_instruction(
            _reply("create_reservation", {"time": DINNER, "partySize": 2}), agent_defaults
        )

        with pytest.raises(FieldValidationError, match="table_id"):
            await dispatch(instruction, seeded_store, agent_defaults)

        assert await seeded_store.scan(Reservation) == []

    @pytest.mark.asyncio
    async def test_create_reservation_conflict(self, seeded_store, agent_defaults):
        instruction = parse_instruction(
            _reply("create_reservation", {"tableId": "table_001", "time": DINNER, "partySize": 2}),
            agent_defaults,
        )
        await dispatch(instruction, seeded_store, agent_defaults)

        with pytest.raises(SlotConflictError):
            await dispatch(instruction, seeded_store, agent_defaults)

    @pytest.mark.asyncio
    async def test_other_actions_pass_text_through(self, seeded_store, agent_defaults):
        instruction = parse_instruction(
            _reply("suggest_alternatives", response="How about 8 pm instead?"), agent_defaults
        )

        result = await dispatch(instruction, seeded_store, agent_defaults)

        assert result == MessageResult(message="How about 8 pm instead?")
        assert await seeded_store.scan(Reservation) == []


@pytest.mark.unit
class TestInterpret:
    """Round trip through the (faked) hosted model."""

    @pytest.mark.asyncio
    async def test_prompt_contains_preamble_context_and_request(self, fake_model, agent_defaults):
        prompts = fake_model(_reply("check_availability"))

        await interpret("book table for 3 persons today at 7 pm", agent_defaults)

        assert len(prompts) == 1
        assert "check_availability" in prompts[0]
        assert "create_reservation" in prompts[0]
        assert "Restaurant ID: rest_001" in prompts[0]
        assert '"book table for 3 persons today at 7 pm"' in prompts[0]

    @pytest.mark.asyncio
    async def test_model_failure_propagates(self, fake_model, agent_defaults):
        fake_model(LLMError("quota exceeded"))

        with pytest.raises(LLMError, match="quota exceeded"):
            await interpret("table for two", agent_defaults)

    @pytest.mark.asyncio
    async def test_handle_prompt_with_plain_text_reply(self, fake_model, seeded_store, agent_defaults):
        fake_model("I'd be happy to help with that.")

        instruction, result = await handle_prompt("table for two", seeded_store, agent_defaults)

        assert instruction.action == "check_availability"
        assert instruction.response == "I'd be happy to help with that."
        assert isinstance(result, AvailabilityResult)
        assert result.available is True
