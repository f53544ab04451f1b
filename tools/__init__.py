# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/.
#
# tools/ is the translation layer between the MCP protocol and the Lookup
# Adapter: it declares the tool signatures FastMCP advertises, forwards each
# call to LookupAdapter.dispatch, and turns KenallError into ToolError.
# It holds no business logic of its own.
# =============================================================================
