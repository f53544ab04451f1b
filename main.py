# =============================================================================
# main.py  —  Entry Point for the ken-all MCP server
# =============================================================================
#
# HOW TO RUN:
#   KENALL_API_KEY=... uv run python main.py
#
# WHAT HAPPENS:
#   1. Variables from a local .env file are loaded (KENALL_API_KEY, ...)
#   2. Settings are read once and handed to the Lookup Adapter
#   3. A FastMCP server is started on stdio; an MCP client (Claude Desktop,
#      an ADK agent, the MCP inspector, ...) launches this process and talks
#      to it over stdin/stdout
#   4. One line, "Kenall MCP server running on stdio", appears on stderr
#
# A missing KENALL_API_KEY does not stop the server from starting; every tool
# call fails with a configuration error until it is set.
# =============================================================================

from tools.mcp_server import main

if __name__ == "__main__":
    main()
