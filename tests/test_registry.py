import pytest

from tooldispatch.errors import DuplicateToolError, UnknownToolError
from tooldispatch.registry import ToolRegistry
from tooldispatch.types import ToolDescriptor, ToolResult


def _descriptor(name):
    return ToolDescriptor(name=name, description=f"{name} tool", input_schema={"type": "object", "properties": {}})


def _handler(args):
    return ToolResult.text("ok")


def test_list_returns_descriptors_in_registration_order():
    registry = ToolRegistry()
    for name in ["zeta", "alpha", "mid"]:
        registry.register(_descriptor(name), _handler)

    names = [descriptor.name for descriptor in registry.list()]

    assert names == ["zeta", "alpha", "mid"]
    assert registry.names() == names
    assert len(registry) == 3


def test_register_duplicate_name_fails_and_keeps_original():
    registry = ToolRegistry()
    original = registry.register(_descriptor("echo"), _handler)

    with pytest.raises(DuplicateToolError):
        registry.register(_descriptor("echo"), lambda args: ToolResult.text("other"))

    assert registry.resolve("echo") is original
    assert len(registry) == 1


def test_resolve_unknown_tool():
    registry = ToolRegistry()

    with pytest.raises(UnknownToolError) as exc_info:
        registry.resolve("missing")

    assert exc_info.value.tool_name == "missing"
    assert "missing" not in registry


def test_descriptor_schema_is_isolated_from_caller():
    schema = {"type": "object", "properties": {"q": {"type": "string"}}, "required": ["q"]}
    descriptor = ToolDescriptor(name="search", description="", input_schema=schema)

    schema["required"].append("other")
    schema["properties"]["q"]["type"] = "number"

    assert descriptor.input_schema["required"] == ["q"]
    assert descriptor.to_dict()["inputSchema"]["properties"]["q"]["type"] == "string"
    with pytest.raises(TypeError):
        descriptor.input_schema["type"] = "array"


def test_descriptor_requires_name():
    with pytest.raises(ValueError):
        ToolDescriptor(name="", description="", input_schema={})
