# =============================================================================
# core/adapter.py  —  Lookup Adapter (discovery + dispatch)
# =============================================================================
#
# The single entry point for tool calls, independent of any MCP framework:
#
#   dispatch(request)
#     1. credential configured?        no → ConfigurationError
#     2. route by tool name            ?  → UnknownToolError
#     3. validate the argument mapping    → InvalidArgumentsError
#     4. one upstream GET via KenallClient
#     5. Found     → indented JSON text
#        NotFound  → the human-readable message (a success)
#        Failure   → UpstreamError
#
# Stateless: the adapter holds read-only settings and a client, nothing else.
# =============================================================================

import json
from typing import Callable, Optional

from core.catalog import LOOKUP_POSTAL_CODE, SEARCH_ADDRESS, TOOL_DESCRIPTORS
from core.config import API_KEY_ENV, Settings
from core.errors import ConfigurationError, UnknownToolError, UpstreamError
from core.kenall import KenallClient
from core.models import (
    AddressRecord,
    Found,
    LookupOutcome,
    LookupPostalCodeInput,
    NotFound,
    SearchAddressInput,
    ToolCallRequest,
    ToolDescriptor,
    ToolResult,
)


MISSING_CREDENTIAL_MESSAGE = (
    f"{API_KEY_ENV} environment variable is not set. "
    "Please set it to use the Kenall API."
)


def render_outcome(
    outcome: LookupOutcome, shape: Callable[[AddressRecord], dict]
) -> ToolResult:
    """Turn an upstream outcome into a single-text-block ToolResult.

    Args:
        outcome: What the client returned.
        shape: Projection applied to each record before serialization.

    Raises:
        UpstreamError: for an UpstreamFailure outcome.
    """
    if isinstance(outcome, Found):
        rows = [shape(record) for record in outcome.records]
        return ToolResult.text(json.dumps(rows, indent=2, ensure_ascii=False))
    if isinstance(outcome, NotFound):
        return ToolResult.text(outcome.message)
    raise UpstreamError(outcome.message)


class LookupAdapter:
    """Translates tool calls into ken-all requests and back."""

    def __init__(self, settings: Settings, client: Optional[KenallClient] = None):
        self.settings = settings
        self.client = client or KenallClient(settings)
        self._handlers = {
            LOOKUP_POSTAL_CODE.name: self.lookup_postal_code,
            SEARCH_ADDRESS.name: self.search_address,
        }

    def list_tools(self) -> list[ToolDescriptor]:
        return list(TOOL_DESCRIPTORS)

    def require_credential(self) -> None:
        """Raise ConfigurationError unless an API key is configured."""
        if not self.settings.has_credential:
            raise ConfigurationError(MISSING_CREDENTIAL_MESSAGE)

    def dispatch(self, request: ToolCallRequest) -> ToolResult:
        """Run one tool call.

        Raises:
            ConfigurationError: no API key configured (checked first).
            UnknownToolError: ``request.name`` is not in the catalog.
            InvalidArgumentsError: arguments do not fit the tool's input.
            UpstreamError: the upstream call failed.
        """
        self.require_credential()

        handler = self._handlers.get(request.name)
        if handler is None:
            raise UnknownToolError(request.name)
        return handler(request.arguments)

    def lookup_postal_code(self, arguments) -> ToolResult:
        args = LookupPostalCodeInput.from_arguments(arguments)
        outcome = self.client.lookup_postal_code(args)
        return render_outcome(outcome, AddressRecord.to_lookup_dict)

    def search_address(self, arguments) -> ToolResult:
        args = SearchAddressInput.from_arguments(arguments)
        outcome = self.client.search_address(args)
        return render_outcome(outcome, AddressRecord.to_search_dict)
