# =============================================================================
# core/__init__.py
# =============================================================================
# Everything the adapter knows: settings, the tool catalog, data models, the
# ken-all HTTP client and the dispatch logic.
#
# Nothing in this package imports FastMCP.  It can be exercised from a plain
# Python REPL or a unit test with urllib patched out.
# =============================================================================
