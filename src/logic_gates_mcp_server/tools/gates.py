"""Boolean logic gate tools."""

from __future__ import annotations

from typing import Callable

from pydantic import Field, field_validator

from logic_gates_mcp.tools import ToolDefinition, ToolParameters

AND = "AND"
OR = "OR"
XOR = "XOR"

AND_GATE = "and_gate"
OR_GATE = "or_gate"
XOR_GATE = "xor_gate"


class GateInputs(ToolParameters):
    """Parameters shared by every two-input gate.

    Booleans travel as the numbers 0 and 1 so the advertised schema stays a
    plain bounded number.
    """

    left_hand: float = Field(
        alias="leftHand",
        ge=0,
        le=1,
        description=(
            "Left hand value of logic gate, either 0 or 1. 0 is FALSE and 1 is TRUE"
        ),
    )
    right_hand: float = Field(
        alias="rightHand",
        ge=0,
        le=1,
        description=(
            "Right hand value of logic gate, either 0 or 1. 0 is FALSE and 1 is TRUE"
        ),
    )

    @field_validator("left_hand", "right_hand", mode="before")
    @classmethod
    def _require_number(cls, value: object) -> object:
        # bool is an int subclass and numeric strings would be coerced.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("Input should be a number")
        return value

    @field_validator("left_hand", "right_hand")
    @classmethod
    def _require_binary(cls, value: float) -> float:
        if value not in (0, 1):
            raise ValueError("Input should be either 0 or 1")
        return value

    @property
    def left(self) -> bool:
        return self.left_hand != 0

    @property
    def right(self) -> bool:
        return self.right_hand != 0


def _render(value: bool) -> str:
    return "true" if value else "false"


def format_gate(left: bool, operator: str, right: bool, result: bool) -> str:
    """Render a gate evaluation as ``<left> <OP> <right> = <result>``."""
    return f"{_render(left)} {operator} {_render(right)} = {_render(result)}"


def and_gate(params: GateInputs) -> str:
    """TRUE iff both inputs are TRUE."""
    return format_gate(params.left, AND, params.right, params.left and params.right)


def or_gate(params: GateInputs) -> str:
    """TRUE iff either input is TRUE."""
    return format_gate(params.left, OR, params.right, params.left or params.right)


def xor_gate(params: GateInputs) -> str:
    """TRUE iff exactly one input is TRUE."""
    return format_gate(params.left, XOR, params.right, params.left != params.right)


def _gate_tool(
    name: str, description: str, handler: Callable[[GateInputs], str]
) -> ToolDefinition[GateInputs]:
    return ToolDefinition(
        name=name,
        description=description,
        parameters_model=GateInputs,
        handler=handler,
    )


def and_gate_tool() -> ToolDefinition[GateInputs]:
    """Create the and_gate tool definition."""
    return _gate_tool(
        AND_GATE,
        "Returns TRUE if both inputs are TRUE, otherwise returns FALSE",
        and_gate,
    )


def or_gate_tool() -> ToolDefinition[GateInputs]:
    """Create the or_gate tool definition."""
    return _gate_tool(
        OR_GATE,
        "Returns TRUE if either input is TRUE, otherwise returns FALSE",
        or_gate,
    )


def xor_gate_tool() -> ToolDefinition[GateInputs]:
    """Create the xor_gate tool definition."""
    return _gate_tool(
        XOR_GATE,
        "Returns TRUE if exactly one input is TRUE, otherwise returns FALSE",
        xor_gate,
    )
