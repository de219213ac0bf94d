import asyncio

import pytest
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND
from pydantic import BaseModel, ConfigDict

from tooldispatch.errors import InternalError, InvalidParamsError, UnknownToolError
from tooldispatch.types import Invocation, ToolDescriptor, ToolResult

ECHO = ToolDescriptor(
    name="echo",
    description="Echo a message",
    input_schema={
        "type": "object",
        "properties": {
            "message": {"type": "string"},
            "times": {"type": "number", "minimum": 1, "maximum": 3},
        },
        "required": ["message"],
    },
)


class EchoArgs(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str
    times: int = 1


def _descriptor(name):
    return ToolDescriptor(name=name, description="", input_schema={"type": "object", "properties": {}})


@pytest.mark.asyncio
async def test_dispatch_passes_result_through(registry, dispatcher):
    expected = ToolResult.text("hello")

    async def handler(args):
        return expected

    registry.register(ECHO, handler)

    result = await dispatcher.dispatch(Invocation(tool_name="echo", arguments={"message": "hello"}))

    assert result is expected


@pytest.mark.asyncio
async def test_sync_handler_receives_validated_dict(registry, dispatcher):
    received = {}

    def handler(args):
        received.update(args)
        return ToolResult.text(args["message"])

    registry.register(ECHO, handler)

    result = await dispatcher.call_tool("echo", {"message": "hi", "extra": 1})

    assert result.to_dict() == {"content": [{"type": "text", "text": "hi"}]}
    assert received == {"message": "hi", "extra": 1}


@pytest.mark.asyncio
async def test_args_model_is_built_before_handler_runs(registry, dispatcher):
    seen = []

    async def handler(args: EchoArgs):
        seen.append(args)
        return ToolResult.text(args.message * args.times)

    registry.register(ECHO, handler, EchoArgs)

    result = await dispatcher.call_tool("echo", {"message": "ab", "times": 2, "trace": "x"})

    assert result.content[0].text == "abab"
    assert isinstance(seen[0], EchoArgs)
    assert seen[0].model_extra == {"trace": "x"}


@pytest.mark.asyncio
async def test_args_model_failure_is_invalid_params(registry, dispatcher):
    calls = []
    registry.register(ECHO, lambda args: calls.append(args), EchoArgs)

    with pytest.raises(InvalidParamsError) as exc_info:
        await dispatcher.call_tool("echo", {"message": "ab", "times": 1.5})

    assert exc_info.value.field == "times"
    assert calls == []


@pytest.mark.asyncio
async def test_unknown_tool_never_reaches_a_handler(registry, dispatcher):
    calls = []
    registry.register(ECHO, lambda args: calls.append(args))

    with pytest.raises(UnknownToolError) as exc_info:
        await dispatcher.call_tool("nope", {"message": "x"})

    assert exc_info.value.code == METHOD_NOT_FOUND
    assert calls == []


@pytest.mark.asyncio
async def test_missing_required_argument_has_no_side_effects(registry, dispatcher):
    calls = []
    registry.register(ECHO, lambda args: calls.append(args))

    with pytest.raises(InvalidParamsError) as exc_info:
        await dispatcher.call_tool("echo", {"times": 2})

    assert exc_info.value.code == INVALID_PARAMS
    assert exc_info.value.field == "message"
    assert calls == []


@pytest.mark.asyncio
async def test_unrecognised_handler_error_is_wrapped(registry, dispatcher):
    async def handler(args):
        raise RuntimeError("disk on fire")

    registry.register(ECHO, handler)

    with pytest.raises(InternalError) as exc_info:
        await dispatcher.call_tool("echo", {"message": "x"})

    assert exc_info.value.code == INTERNAL_ERROR
    assert exc_info.value.message == "disk on fire"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_structured_handler_error_propagates_unchanged(registry, dispatcher):
    error = InvalidParamsError("Old file does not exist: a.txt", field="oldFilePath")

    def handler(args):
        raise error

    registry.register(ECHO, handler)

    with pytest.raises(InvalidParamsError) as exc_info:
        await dispatcher.call_tool("echo", {"message": "x"})

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_error_result_is_returned_not_raised(registry, dispatcher):
    registry.register(ECHO, lambda args: ToolResult.error("Search failed: offline"))

    result = await dispatcher.call_tool("echo", {"message": "x"})

    assert result.is_error
    assert result.to_dict()["isError"] is True


@pytest.mark.asyncio
async def test_non_result_return_value_is_internal_error(registry, dispatcher):
    registry.register(ECHO, lambda args: "plain string")

    with pytest.raises(InternalError):
        await dispatcher.call_tool("echo", {"message": "x"})


@pytest.mark.asyncio
async def test_cancellation_propagates(registry, dispatcher):
    async def handler(args):
        raise asyncio.CancelledError()

    registry.register(ECHO, handler)

    with pytest.raises(asyncio.CancelledError):
        await dispatcher.call_tool("echo", {"message": "x"})


def test_list_tools_includes_each_tool_once_in_order(registry, dispatcher):
    for name in ["b", "a", "c"]:
        registry.register(_descriptor(name), lambda args: ToolResult.text(""))

    assert [descriptor.name for descriptor in dispatcher.list_tools()] == ["b", "a", "c"]


def test_error_data_carries_code_and_message():
    data = UnknownToolError("missing").to_error_data()

    assert data.code == METHOD_NOT_FOUND
    assert data.message == "Unknown tool: missing"
