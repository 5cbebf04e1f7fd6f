"""Tests for the AsyncValue variants and the combination rule."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from pyselectx import (
    AsyncAwaitingValue,
    AsyncCommand,
    AsyncValueReceived,
    ValidationError,
    awaiting,
    combine_async_values,
    command,
    is_async_value,
    match_async_value,
    received,
)


def _fail(*args):
    raise AssertionError("combinator must not run")


class TestConstructors:
    def test_received_keeps_payload_identity(self) -> None:
        payload = {"a": [1, 2]}
        assert received(payload).value is payload

    def test_awaiting_is_shared(self) -> None:
        assert awaiting() is awaiting()
        assert awaiting() == AsyncAwaitingValue()

    def test_command_keeps_command_objects(self) -> None:
        fetch = {"type": "fetch", "ids": [1, 2]}
        value = command([fetch, "reload"])
        assert value.commands == (fetch, "reload")
        assert value.commands[0] is fetch

    def test_command_container_is_a_tuple(self) -> None:
        assert isinstance(command([{"type": "fetch"}]).commands, tuple)

    def test_combined_commands_keep_identity(self) -> None:
        fetch = {"type": "fetch"}
        result = combine_async_values([command([fetch]), received(1)], _fail)
        assert result.commands[0] is fetch

    @pytest.mark.parametrize("model", [AsyncAwaitingValue, AsyncCommand])
    def test_variants_reject_unknown_fields(self, model) -> None:
        with pytest.raises(PydanticValidationError):
            model.model_validate({"value": 5})

    def test_command_accepts_empty_list(self) -> None:
        assert command([]).commands == ()

    def test_command_accepts_generator(self) -> None:
        assert command(c for c in "ab").commands == ("a", "b")

    @pytest.mark.parametrize("bad", ["fetch", {"type": "fetch"}, 42, None])
    def test_command_rejects_non_sequences(self, bad) -> None:
        with pytest.raises(ValidationError):
            command(bad)

    def test_structural_equality(self) -> None:
        assert received("one") == received("one")
        assert command(["a"]) == command(("a",))
        assert received(1) != command([1])
        assert command([]) != awaiting()

    def test_frozen(self) -> None:
        value = received(1)
        with pytest.raises(PydanticValidationError):
            value.value = 2  # type: ignore[misc]

    def test_is_async_value(self) -> None:
        assert is_async_value(awaiting())
        assert is_async_value(command([]))
        assert is_async_value(received(None))
        assert not is_async_value(None)
        assert not is_async_value({"value": 1})


class TestMatchAsyncValue:
    def _describe(self, value):
        return match_async_value(
            value,
            on_awaiting=lambda: "awaiting",
            on_command=lambda commands: f"commands:{len(commands)}",
            on_received=lambda payload: f"received:{payload}",
        )

    def test_dispatches_each_variant(self) -> None:
        assert self._describe(awaiting()) == "awaiting"
        assert self._describe(command(["a", "b"])) == "commands:2"
        assert self._describe(received(7)) == "received:7"

    def test_rejects_foreign_objects(self) -> None:
        with pytest.raises(AssertionError):
            self._describe("not an async value")


class TestCombineAsyncValues:
    def test_commands_are_concatenated_in_order(self) -> None:
        result = combine_async_values([command(["A"]), command(["B"])], _fail)
        assert result == AsyncCommand(["A", "B"])

    def test_command_dominates_awaiting(self) -> None:
        result = combine_async_values([command(["A"]), awaiting()], _fail)
        assert result == command(["A"])

    def test_command_dominates_awaiting_in_any_position(self) -> None:
        result = combine_async_values([awaiting(), received(1), command(["A"])], _fail)
        assert result == command(["A"])

    def test_awaiting_and_received_contribute_no_commands(self) -> None:
        result = combine_async_values(
            [received(1), command(["A"]), awaiting(), command(["B", "C"])], _fail
        )
        assert result.commands == ("A", "B", "C")

    def test_empty_command_list_still_short_circuits(self) -> None:
        result = combine_async_values([command([]), received(1)], _fail)
        assert isinstance(result, AsyncCommand)
        assert result.commands == ()

    def test_empty_command_dominates_awaiting(self) -> None:
        assert combine_async_values([awaiting(), command([])], _fail) == command([])

    def test_awaiting_dominates_received(self) -> None:
        assert combine_async_values([awaiting(), received(7)], _fail) == awaiting()

    def test_all_received_runs_combinator_in_order(self) -> None:
        calls = []

        def combinator(*args):
            calls.append(args)
            return "-".join(args)

        result = combine_async_values([received("a"), received("b"), received("c")], combinator)
        assert result == AsyncValueReceived("a-b-c")
        assert calls == [("a", "b", "c")]

    @pytest.mark.parametrize("returned", [awaiting(), command(["X"]), received(9)])
    def test_async_value_from_combinator_passes_through(self, returned) -> None:
        result = combine_async_values([received(1)], lambda _: returned)
        assert result is returned

    def test_combinator_exception_propagates(self) -> None:
        def boom(_):
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError):
            combine_async_values([received(1)], boom)

    def test_unknown_variant_is_rejected(self) -> None:
        with pytest.raises(AssertionError):
            combine_async_values([received(1), "raw"], _fail)  # type: ignore[list-item]
