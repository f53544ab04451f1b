# =============================================================================
# core/catalog.py  —  The two tools this server exposes
# =============================================================================
#
# Declared once, never mutated.  Discovery returns these verbatim, and the
# MCP layer registers its tool functions using the same names and text.
# =============================================================================

from core.models import ToolDescriptor, ToolParameter

LOOKUP_POSTAL_CODE = ToolDescriptor(
    name="lookup_postal_code",
    description="Look up address information from a Japanese postal code",
    parameters=(
        ToolParameter(
            name="postalCode",
            description="Japanese postal code (e.g., '1000001' or '100-0001')",
            required=True,
        ),
    ),
)

SEARCH_ADDRESS = ToolDescriptor(
    name="search_address",
    description="Search for postal codes by address",
    parameters=(
        ToolParameter(
            name="query",
            description="Address query in Japanese",
            required=True,
        ),
        ToolParameter(
            name="prefecture",
            description="Prefecture name to filter results",
        ),
        ToolParameter(
            name="city",
            description="City name to filter results",
        ),
    ),
)

TOOL_DESCRIPTORS: tuple[ToolDescriptor, ...] = (LOOKUP_POSTAL_CODE, SEARCH_ADDRESS)
