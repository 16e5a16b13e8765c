"""
Tool Protocol

Data structures shared by the registry, the handlers and the MCP server:
tool results, tool definitions, per-tool argument schemas and the JSON
bodies posted to the webhooks.
"""

from typing import Any, Callable, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, Field, field_validator


class ContentItem(BaseModel):
    """A single piece of tool output.  Only text content is produced."""
    type: Literal["text"] = Field(default="text", description="Content kind")
    text: str = Field(description="Text payload")


class ToolResult(BaseModel):
    """
    Result returned by every handler and relayed verbatim to the client.
    """
    content: List[ContentItem] = Field(min_length=1, description="Ordered, never empty")
    is_error: bool = Field(default=False, alias="isError", description="True when the call failed")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "content": [{"type": "text", "text": "03:04:05 PM UTC"}],
                "isError": False,
            }
        },
    }

    @classmethod
    def from_text(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls(content=[ContentItem(text=text)], is_error=is_error)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls.from_text(text, is_error=True)

    @property
    def text(self) -> str:
        """All text items joined by newlines."""
        return "\n".join(item.text for item in self.content)

    def to_payload(self) -> Dict[str, Any]:
        """Wire shape: ``{"content": [...], "isError": bool}``."""
        return self.model_dump(by_alias=True)


ToolHandler = Callable[[Any], ToolResult]


class ToolDefinition(BaseModel):
    """
    A named, schema-described callable.  Immutable once constructed.
    """
    name: str = Field(min_length=1, description="Unique, stable identifier")
    description: str = Field(description="Human-readable description shown to the agent")
    parameter_schema: Type[BaseModel] = Field(description="Pydantic model validating the arguments")
    handler: ToolHandler = Field(description="Callable invoked with the validated arguments")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def input_schema(self) -> Dict[str, Any]:
        return self.parameter_schema.model_json_schema()


# ── Tool argument schemas ──────────────────────────────────────────────────────

Freshness = Literal["pd", "pw", "pm", "py"]


class ToolArguments(BaseModel):
    """Base for argument schemas: unknown keys are rejected."""
    model_config = {"extra": "forbid"}


class CurrentTimeArgs(ToolArguments):
    timezone: str = Field(
        default="UTC",
        description="IANA timezone identifier, e.g. 'America/New_York'",
    )


class RandomNumberArgs(ToolArguments):
    x: float = Field(description="Lower bound (inclusive)", allow_inf_nan=False)
    y: float = Field(description="Upper bound (inclusive)", allow_inf_nan=False)

    @field_validator("x", "y", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value


class SearchArgs(ToolArguments):
    query: str = Field(description="Search query")
    freshness: Optional[Freshness] = Field(
        None,
        description="Freshness filter (pd=past day, pw=past week, pm=past month, py=past year)",
    )


class WeatherArgs(ToolArguments):
    location: str = Field(
        description="Location, for example city, airport code, zip code, or GPS coordinates",
    )
    options: Optional[str] = Field(
        None,
        description=(
            "'m' for metric, 'u' for USCS fahrenheit, '0' for current weather, "
            "'1' for current weather and today's forecast, '2' for current weather "
            "and today's forecast and tomorrow's forecast. Concatenate values such "
            "as 1m for the forecast today in metric."
        ),
    )


# ── Webhook request bodies ─────────────────────────────────────────────────────

class WebhookRequest(BaseModel):
    """Body posted to a webhook.  Unset optional fields are left out."""

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class SearchRequest(WebhookRequest):
    q: str
    freshness: Optional[Freshness] = None


class WeatherRequest(WebhookRequest):
    location: str
    options: Optional[str] = None
