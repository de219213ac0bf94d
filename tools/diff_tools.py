#!/usr/bin/env python3
"""
Tool registration for the diff server.

This module declares the generate_diff tool and wires it to the core
implementation.
"""

from pydantic import BaseModel, ConfigDict

from tooldispatch.core import generate_diff_impl
from tooldispatch.registry import ToolRegistry
from tooldispatch.types import ToolDescriptor

GENERATE_DIFF = ToolDescriptor(
    name="generate_diff",
    description="Generate a diff file between two versions of a file",
    input_schema={
        "type": "object",
        "properties": {
            "oldFilePath": {
                "type": "string",
                "description": "Path to the old version of the file",
            },
            "newFilePath": {
                "type": "string",
                "description": "Path to the new version of the file",
            },
            "outputFilePath": {
                "type": "string",
                "description": "Path to save the generated diff file",
            },
        },
        "required": ["oldFilePath", "newFilePath", "outputFilePath"],
    },
)


class GenerateDiffArgs(BaseModel):
    model_config = ConfigDict(extra="allow")

    oldFilePath: str
    newFilePath: str
    outputFilePath: str


def register_diff_tools(registry: ToolRegistry, logger):
    """Register diff related tools."""

    async def generate_diff(args: GenerateDiffArgs):
        return await generate_diff_impl(args.oldFilePath, args.newFilePath, args.outputFilePath, logger)

    registry.register(GENERATE_DIFF, generate_diff, GenerateDiffArgs)
