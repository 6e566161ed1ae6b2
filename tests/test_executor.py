"""
tests/test_executor.py

Unit tests for execute_action.
"""
import pytest
from pydantic import BaseModel

from pharos_agent_kit import ActionDefinition, ActionRegistry, execute_action
from pharos_agent_kit.executor import (
    format_validation_error,
    normalize_result,
    to_action_validation_error,
)


class TransferParams(BaseModel):
    recipient: str
    amount: int


class CountingHandler:
    """Handler that records how often it was called"""

    def __init__(self, result=None, error: Exception | None = None):
        self.calls = 0
        self.inputs = []
        self.result = result if result is not None else {"status": "success"}
        self.error = error

    async def __call__(self, agent, input):
        self.calls += 1
        self.inputs.append(input)
        if self.error is not None:
            raise self.error
        return self.result


def make_registry(handler, schema=TransferParams, name="TRANSFER") -> ActionRegistry:
    return ActionRegistry([
        ActionDefinition(name=name, description="Test action", schema=schema, handler=handler)
    ])


class TestScenarios:
    """End-to-end executor scenarios"""

    async def test_ping_success(self, registry):
        """Test that a successful handler envelope is returned as is"""
        result = await execute_action(registry, "PING", {}, object())

        assert result == {"status": "success", "pong": True}

    async def test_missing_required_field(self, registry):
        """Test that validation errors mention the missing field"""
        result = await execute_action(registry, "ECHO", {}, object())

        assert result["status"] == "error"
        assert "msg" in result["message"]

    async def test_unknown_action(self, registry):
        """Test that unknown names produce an error envelope"""
        result = await execute_action(registry, "NOPE", {}, object())

        assert result["status"] == "error"
        assert "NOPE" in result["message"]
        assert "unknown" in result["message"].lower()

    async def test_handler_failure(self):
        """Test that a handler exception becomes an error envelope"""
        handler = CountingHandler(error=RuntimeError("boom"))
        registry = make_registry(handler)

        result = await execute_action(registry, "TRANSFER", {"recipient": "0xabc", "amount": 1}, None)

        assert result == {"status": "error", "message": "boom"}
        assert handler.calls == 1


class TestValidation:
    """Input validation happens before dispatch"""

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"recipient": "0xabc"},
            {"amount": 5},
            {"recipient": "0xabc", "amount": "not a number"},
        ],
    )
    async def test_malformed_input_never_calls_handler(self, payload):
        """Test that the handler call counter stays at zero"""
        handler = CountingHandler()
        registry = make_registry(handler)

        result = await execute_action(registry, "TRANSFER", payload, None)

        assert result["status"] == "error"
        assert result["message"].startswith("Invalid input for TRANSFER")
        assert handler.calls == 0

    async def test_none_input_is_empty_object(self, registry):
        """Test that a missing input is treated as {}"""
        result = await execute_action(registry, "PING", None, None)

        assert result["status"] == "success"

    async def test_handler_receives_validated_model(self):
        """Test that the handler gets the parsed schema instance"""
        handler = CountingHandler()
        registry = make_registry(handler)

        await execute_action(registry, "TRANSFER", {"recipient": "0xabc", "amount": "7"}, None)

        assert isinstance(handler.inputs[0], TransferParams)
        assert handler.inputs[0].amount == 7

    async def test_handler_receives_context(self, empty_input_action, agent):
        """Test that the context is passed through untouched"""
        registry = ActionRegistry([empty_input_action])

        result = await execute_action(registry, "WHOAMI", {}, agent)

        assert result == {"status": "success", "address": agent.wallet_address}


class TestResultNormalization:
    """Handler return values are always envelopes"""

    async def test_error_envelope_passes_through(self):
        """Test that handler-built error envelopes are kept"""
        handler = CountingHandler(result={"status": "error", "message": "Insufficient ETH balance"})
        registry = make_registry(handler)

        result = await execute_action(registry, "TRANSFER", {"recipient": "0xabc", "amount": 1}, None)

        assert result == {"status": "error", "message": "Insufficient ETH balance"}

    async def test_exception_without_message_uses_class_name(self):
        """Test that an empty exception message is never returned"""
        handler = CountingHandler(error=KeyError())
        registry = make_registry(handler)

        result = await execute_action(registry, "TRANSFER", {"recipient": "0xabc", "amount": 1}, None)

        assert result["status"] == "error"
        assert result["message"] == "KeyError"

    def test_envelope_not_double_wrapped(self):
        """Test that envelopes are returned as is"""
        envelope = {"status": "success", "tx_hash": "0x1"}

        assert normalize_result(envelope) is envelope

    def test_plain_dict_is_wrapped(self):
        """Test that a plain dict gets a success status"""
        assert normalize_result({"balance": "1.5"}) == {"status": "success", "balance": "1.5"}

    def test_unknown_status_is_replaced(self):
        """Test that a dict with a foreign status becomes a success envelope"""
        assert normalize_result({"status": "pending", "id": 3}) == {"status": "success", "id": 3}

    def test_scalar_is_wrapped(self):
        """Test that non-dict values land under result"""
        assert normalize_result(42) == {"status": "success", "result": 42}
        assert normalize_result(None) == {"status": "success", "result": None}


class TestFormatValidationError:
    """Validation messages list each failing field"""

    def test_lists_each_location(self):
        """Test that every failing field is named"""
        from pydantic import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            TransferParams.model_validate({})

        message = format_validation_error(exc_info.value)

        assert "recipient" in message
        assert "amount" in message

    def test_action_validation_error_fields(self):
        """Test that the converted error names the failing top-level fields"""
        from pydantic import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            TransferParams.model_validate({"amount": "x"})

        error = to_action_validation_error("TRANSFER", exc_info.value)

        assert error.fields == ["amount", "recipient"]
        assert error.message.startswith("Invalid input for TRANSFER: ")
