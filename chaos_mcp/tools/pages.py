"""
Page Tools

Generated documents derived from one or more thoughts.
"""

from ..base import ToolDefinition, ToolParameter
from .common import (
    PAGE_STATUSES,
    enum_param,
    limit_param,
    page_param,
    per_page_param,
    text_param,
    uuid_param,
)


TOOLS = [
    ToolDefinition(
        name="list_pages",
        description=(
            "List your generated pages (documents created from thoughts) with optional "
            "filters for status, pinned state, and pagination. Returns page metadata "
            "without full content."
        ),
        parameters=[
            page_param(),
            per_page_param(default=20, maximum=50),
            enum_param("status", PAGE_STATUSES, "Filter by page status"),
            ToolParameter(
                name="is_pinned",
                type="boolean",
                description="Filter by pinned state",
                required=False,
            ),
            enum_param(
                "sort_by",
                ("newest", "oldest", "recently_updated"),
                "Sort order (default: newest)",
            ),
        ],
        category="pages",
    ),
    ToolDefinition(
        name="get_page",
        description="Get a single page by ID with full content, metadata, and source thought IDs.",
        parameters=[uuid_param("page_id", "The page ID to retrieve", required=True)],
        category="pages",
    ),
    ToolDefinition(
        name="update_page",
        description=(
            "Update a page's title, content, and/or short description directly. This "
            "performs a direct edit without AI regeneration. Provide at least one of "
            "title, content, or short_description."
        ),
        parameters=[
            uuid_param("page_id", "The page ID to update", required=True),
            text_param("title", "New title for the page"),
            text_param("content", "New full markdown content for the page"),
            text_param(
                "short_description",
                "Short description/summary of the page (max 250 characters)",
            ),
        ],
        category="pages",
    ),
    ToolDefinition(
        name="search_pages",
        description=(
            "Search pages by title keywords or content text. "
            "Returns matching pages with content previews."
        ),
        parameters=[
            text_param(
                "query",
                "Search query to match against page titles and content (case-insensitive)",
                required=True,
            ),
            enum_param("status", PAGE_STATUSES, "Filter by page status (default: complete)"),
            limit_param(default=10, maximum=25, description="Maximum number of results"),
        ],
        category="pages",
    ),
]
