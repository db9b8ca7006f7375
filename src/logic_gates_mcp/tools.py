"""Tool definitions and argument validation for the logic gates server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from logic_gates_mcp.errors import InvalidArgumentsError

ParamsT = TypeVar("ParamsT", bound="ToolParameters")


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools."""

    model_config = ConfigDict(extra="forbid", frozen=True)


@dataclass(frozen=True)
class ParseResult(Generic[ParamsT]):
    """Outcome of validating raw arguments against a tool's schema.

    Exactly one of ``data`` or ``error`` is set.

    Attributes:
        data: Validated parameters when parsing succeeded.
        error: Human-readable description of every violated constraint.
        details: Raw pydantic error list for failed parses.
    """

    data: ParamsT | None = None
    error: str | None = None
    details: list[dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether the arguments satisfied the schema."""
        return self.error is None


def format_violations(error: ValidationError) -> str:
    """Render every violation of a pydantic error as ``field: message`` text."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


@dataclass(frozen=True)
class ToolDefinition(Generic[ParamsT]):
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Callable that executes the tool logic on validated input.
    """

    name: str
    description: str
    parameters_model: type[ParamsT]
    handler: Callable[[ParamsT], str]

    def parse(self, arguments: object) -> ParseResult[ParamsT]:
        """Validate incoming arguments without raising.

        Args:
            arguments: Raw argument payload supplied by the client. ``None`` is
                treated as an empty object so missing fields are reported.

        Returns:
            ParseResult holding either the validated model or the violation text.
        """
        payload = {} if arguments is None else arguments
        try:
            model = self.parameters_model.model_validate(payload)
        except ValidationError as error:
            return ParseResult(
                error=format_violations(error),
                details=error.errors(include_url=False, include_context=False),
            )
        return ParseResult(data=model)

    def validate(self, arguments: object) -> ParamsT:
        """Validate incoming arguments, raising on failure.

        Raises:
            InvalidArgumentsError: If any schema constraint is violated.
        """
        result = self.parse(arguments)
        if result.data is None:
            raise InvalidArgumentsError(self.name, str(result.error), result.details)
        return result.data

    def input_schema(self) -> dict[str, Any]:
        """Return the JSON-schema descriptor advertised during discovery."""
        return self.parameters_model.model_json_schema()

    def metadata(self) -> Mapping[str, Any]:
        """Return a discovery-friendly description of the tool."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
