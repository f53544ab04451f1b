# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (both tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Lookup Adapter (core/adapter.py) as two MCP tools.  Each tool
#   is a thin wrapper: it packs its parameters into a ToolCallRequest, hands
#   it to LookupAdapter.dispatch, and returns the single text block.
#
# HOW IT WORKS (the flow):
#   1. The MCP client lists tools and sees the catalog from core/catalog.py,
#      input schemas included, exactly as declared there
#   2. It calls one by name over stdio
#   3. CredentialCheck runs first: no API key means every call fails here,
#      whatever the tool name or arguments
#   4. FastMCP routes the call to one of the functions below, which
#      dispatches through core/ and makes one GET to ken-all
#   5. Text comes back: JSON for hits, a plain sentence for "not found"
#
# ERRORS:
#   Any KenallError (missing key, bad arguments, upstream failure) is re-raised
#   as FastMCP's ToolError, so the caller receives an isError result carrying
#   the message.  "Not found" is NOT an error and comes back as normal text.
#
# RUNNING THIS SERVER:
#     a) python main.py
#     b) python -m tools.mcp_server
#     c) kenall-mcp   (console script, after pip install)
# =============================================================================

import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import FunctionTool

from core.adapter import LookupAdapter
from core.catalog import LOOKUP_POSTAL_CODE, SEARCH_ADDRESS
from core.config import SERVER_NAME, SERVER_VERSION, load_settings
from core.errors import ConfigurationError, KenallError
from core.models import ToolCallRequest
# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON-RPC stream, so every log line goes to STDERR.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response text
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"     # Reset to default terminal color

_RESPONSE_LOG_LIMIT = 500

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the response text (newlines flattened, truncated) in GREEN, then return it."""
    flat = " ".join(text.split())
    if len(flat) > _RESPONSE_LOG_LIMIT:
        flat = flat[:_RESPONSE_LOG_LIMIT] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {flat}{_RESET}")
    return text


def _invoke(adapter: LookupAdapter, tool_name: str, **arguments) -> str:
    """Dispatch one call through the adapter and unwrap the text block.

    Parameters the caller left out are dropped rather than sent as None.
    """
    arguments = {k: v for k, v in arguments.items() if v is not None}
    _log_request(tool_name, **arguments)

    try:
        result = adapter.dispatch(ToolCallRequest(name=tool_name, arguments=arguments))
    except KenallError as e:
        _log_status(f"{type(e).__name__}: {e}")
        raise ToolError(str(e)) from e

    return _log_response(tool_name, result.first_text)


# =============================================================================
# Credential gate
# =============================================================================
# Middleware runs before FastMCP looks the tool up or validates arguments,
# so a missing key wins over an unknown tool name or a malformed payload.
# =============================================================================
class CredentialCheck(Middleware):
    def __init__(self, adapter: LookupAdapter):
        self.adapter = adapter

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        try:
            self.adapter.require_credential()
        except ConfigurationError as e:
            _log_request(context.message.name, **(context.message.arguments or {}))
            _log_status(f"{type(e).__name__}: {e}")
            raise ToolError(str(e)) from e
        return await call_next(context)


# =============================================================================
# Server factory
# =============================================================================
# The adapter is built once by main() and passed in; nothing in here reads
# the environment.  Tool names, descriptions and input schemas all come from
# adapter.list_tools(); the Python signatures below only receive the values.
# =============================================================================
def create_server(adapter: LookupAdapter) -> FastMCP:
    """Create the FastMCP server with both tools registered against ``adapter``."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    mcp.add_middleware(CredentialCheck(adapter))

    # -------------------------------------------------------------------------
    # TOOL 1: lookup_postal_code
    # -------------------------------------------------------------------------
    def lookup_postal_code(postalCode: str) -> str:
        return _invoke(adapter, LOOKUP_POSTAL_CODE.name, postalCode=postalCode)

    # -------------------------------------------------------------------------
    # TOOL 2: search_address
    # -------------------------------------------------------------------------
    # prefecture / city are optional filters; when omitted they never reach
    # the upstream query string.
    def search_address(
        query: str,
        prefecture: Optional[str] = None,
        city: Optional[str] = None,
    ) -> str:
        return _invoke(
            adapter, SEARCH_ADDRESS.name, query=query, prefecture=prefecture, city=city
        )

    functions = {
        LOOKUP_POSTAL_CODE.name: lookup_postal_code,
        SEARCH_ADDRESS.name: search_address,
    }
    for descriptor in adapter.list_tools():
        tool = FunctionTool.from_function(
            functions[descriptor.name],
            name=descriptor.name,
            description=descriptor.description,
        )
        # Serve the catalog's schema rather than the one inferred from the
        # signature.
        mcp.add_tool(tool.model_copy(update={"parameters": descriptor.input_schema()}))

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Load .env, read settings once, and serve over stdio until EOF."""
    load_dotenv()
    settings = load_settings()
    server = create_server(LookupAdapter(settings))

    logging.info("Kenall MCP server running on stdio")
    server.run(transport="stdio", show_banner=False)


if __name__ == "__main__":
    main()
