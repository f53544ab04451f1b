# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows through the adapter:
#
#   ToolCallRequest  →  LookupPostalCodeInput / SearchAddressInput
#                    →  AddressRecord (projected from the upstream JSON)
#                    →  ToolResult (one text block handed back over MCP)
#
# They are frozen: nothing here is mutated after construction, and nothing
# outlives a single tool call except the ToolDescriptor catalog.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from core.errors import InvalidArgumentsError


# -----------------------------------------------------------------------------
# ToolParameter / ToolDescriptor — what discovery hands to the caller
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolParameter:
    """A single named argument of a tool."""

    name: str
    description: str
    type: str = "string"
    required: bool = False


@dataclass(frozen=True)
class ToolDescriptor:
    """A named, schema-described operation exposed to the RPC caller."""

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = ()

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict[str, Any]:
        """Render the parameters as a JSON-Schema object definition."""
        return {
            "type": "object",
            "properties": {
                p.name: {"type": p.type, "description": p.description}
                for p in self.parameters
            },
            "required": self.required,
        }


# -----------------------------------------------------------------------------
# ToolCallRequest — a loosely-typed invocation straight off the wire
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolCallRequest:
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# Validated per-tool inputs
# -----------------------------------------------------------------------------
# The argument mapping is checked here, once, before any handler runs.
# Anything that is not a mapping of the expected string fields is rejected.
# -----------------------------------------------------------------------------
def _string_argument(
    tool: str, arguments: Any, key: str, required: bool
) -> Optional[str]:
    if not isinstance(arguments, dict):
        raise InvalidArgumentsError(
            f"Invalid arguments for {tool}: expected an object, "
            f"got {type(arguments).__name__}"
        )
    value = arguments.get(key)
    if value is None:
        if required:
            raise InvalidArgumentsError(
                f"Invalid arguments for {tool}: '{key}' is required"
            )
        return None
    if not isinstance(value, str):
        raise InvalidArgumentsError(
            f"Invalid arguments for {tool}: '{key}' must be a string, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class LookupPostalCodeInput:
    """Arguments of ``lookup_postal_code``.

    ``postal_code`` keeps exactly what the caller sent; messages echo it back
    unchanged.  ``normalized`` is what goes into the upstream URL.
    """

    postal_code: str

    @classmethod
    def from_arguments(cls, arguments: Any) -> "LookupPostalCodeInput":
        return cls(
            postal_code=_string_argument(
                "lookup_postal_code", arguments, "postalCode", required=True
            )
        )

    @property
    def normalized(self) -> str:
        # Only hyphens are stripped; other characters pass through as-is.
        return self.postal_code.replace("-", "")


@dataclass(frozen=True)
class SearchAddressInput:
    """Arguments of ``search_address``."""

    query: str
    prefecture: Optional[str] = None
    city: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Any) -> "SearchAddressInput":
        tool = "search_address"
        return cls(
            query=_string_argument(tool, arguments, "query", required=True),
            prefecture=_string_argument(tool, arguments, "prefecture", required=False),
            city=_string_argument(tool, arguments, "city", required=False),
        )

    def query_params(self) -> dict[str, str]:
        """Upstream query parameters; empty filters are left out entirely."""
        params = {"q": self.query}
        if self.prefecture:
            params["prefecture"] = self.prefecture
        if self.city:
            params["city"] = self.city
        return params


# -----------------------------------------------------------------------------
# AddressRecord — one upstream record, projected down to what we return
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AddressRecord:
    """A read-only projection of one upstream ``data`` entry.

    The upstream record carries many more fields (koaza, kyoto_street,
    building, floor, town_* flags, ...); none of them are surfaced.
    """

    postal_code: str
    prefecture: str
    city: str
    town: str
    prefecture_kana: str = ""
    city_kana: str = ""
    town_kana: str = ""

    @classmethod
    def from_upstream(cls, raw: dict[str, Any]) -> "AddressRecord":
        return cls(
            postal_code=raw.get("postal_code", ""),
            prefecture=raw.get("prefecture", ""),
            city=raw.get("city", ""),
            town=raw.get("town", ""),
            prefecture_kana=raw.get("prefecture_kana", ""),
            city_kana=raw.get("city_kana", ""),
            town_kana=raw.get("town_kana", ""),
        )

    def to_lookup_dict(self) -> dict[str, str]:
        """Shape returned by ``lookup_postal_code`` (kana included)."""
        return {
            "postalCode": self.postal_code,
            "prefecture": self.prefecture,
            "city": self.city,
            "town": self.town,
            "prefectureKana": self.prefecture_kana,
            "cityKana": self.city_kana,
            "townKana": self.town_kana,
        }

    def to_search_dict(self) -> dict[str, str]:
        """Shape returned by ``search_address`` (no kana)."""
        return {
            "postalCode": self.postal_code,
            "prefecture": self.prefecture,
            "city": self.city,
            "town": self.town,
        }


# -----------------------------------------------------------------------------
# Upstream outcomes
# -----------------------------------------------------------------------------
# The upstream client never raises for expected conditions.  It returns one
# of these three, and the caller decides what each means for the protocol.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Found:
    records: list[AddressRecord]


@dataclass(frozen=True)
class NotFound:
    """Soft not-found: a successful answer with nothing in it."""

    message: str


@dataclass(frozen=True)
class UpstreamFailure:
    message: str


LookupOutcome = Union[Found, NotFound, UpstreamFailure]


# -----------------------------------------------------------------------------
# ToolResult — the response envelope
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolResult:
    content: tuple[TextContent, ...]

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text=text),))

    @property
    def first_text(self) -> str:
        return self.content[0].text
