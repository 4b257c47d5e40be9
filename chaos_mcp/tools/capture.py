"""
Capture Tools

Thoughts and streams: listing, semantic search, stats, and capturing new
thoughts.
"""

from ..base import ToolDefinition, ToolParameter
from .common import (
    date_range_params,
    limit_param,
    min_score_param,
    page_param,
    per_page_param,
    taxonomy_params,
    text_param,
    uuid_param,
)

STREAM_FILTERS = [
    uuid_param("stream_id", "Filter by stream ID"),
    text_param("stream", "Filter by stream name (case-insensitive)"),
]


TOOLS = [
    # ---------------------------------------------------------------------------
    # Read
    # ---------------------------------------------------------------------------
    ToolDefinition(
        name="list_thoughts",
        description=(
            "List your captured thoughts with optional filtering by stream, classification, "
            "category, date range, or text search. Returns paginated results."
        ),
        parameters=[
            page_param(),
            per_page_param(default=50, maximum=100),
            *STREAM_FILTERS,
            *taxonomy_params('"task", "idea", "theory"', '"Technology", "Business"'),
            *date_range_params("thoughts"),
            text_param("search", "Search thoughts by content text"),
        ],
        category="capture",
    ),
    ToolDefinition(
        name="get_thought",
        description=(
            "Get a specific thought by ID with all content blocks, classification, "
            "category, and streams."
        ),
        parameters=[uuid_param("thought_id", "The thought ID to retrieve", required=True)],
        category="capture",
    ),
    ToolDefinition(
        name="search_similar",
        description=(
            "Find thoughts semantically similar to a text query using AI embeddings. "
            "Great for finding related ideas and concepts."
        ),
        parameters=[
            text_param("text", "Text to find similar thoughts for", required=True),
            limit_param(default=10, maximum=50, description="Maximum number of results"),
            min_score_param(),
        ],
        category="capture",
    ),
    ToolDefinition(
        name="search_thoughts",
        description=(
            "Search your thoughts using semantic similarity combined with structured filters. "
            "Finds thoughts that match the meaning of your query, optionally filtered by "
            "stream, category, classification, or date range."
        ),
        parameters=[
            text_param("text", "Text to search for semantically", required=True),
            *STREAM_FILTERS,
            *taxonomy_params('"task", "idea"', '"Technology"'),
            *date_range_params("thoughts"),
            limit_param(default=50, maximum=50),
            min_score_param(),
        ],
        category="capture",
    ),
    ToolDefinition(
        name="list_streams",
        description=(
            "List your streams (collections/folders for organizing thoughts). "
            "Streams can be nested hierarchically."
        ),
        parameters=[
            page_param(),
            per_page_param(default=50, maximum=100),
            text_param(
                "parent_id",
                'Filter by parent stream ID. Use "null" for root-level streams only.',
            ),
            ToolParameter(
                name="include_thought_count",
                type="boolean",
                description="Include count of thoughts in each stream",
                required=False,
                default=False,
            ),
            text_param("search", "Search streams by name or description (case-insensitive)"),
        ],
        category="capture",
    ),
    ToolDefinition(
        name="get_stream",
        description="Get a stream by ID with its thoughts and child streams.",
        parameters=[
            uuid_param("stream_id", "The stream ID to retrieve", required=True),
            ToolParameter(
                name="include_thoughts",
                type="boolean",
                description="Include thoughts in this stream (default: true)",
                required=False,
                default=True,
            ),
            ToolParameter(
                name="thoughts_page",
                type="integer",
                description="Page number for thoughts (default: 1)",
                required=False,
                default=1,
                minimum=1,
            ),
            ToolParameter(
                name="thoughts_per_page",
                type="integer",
                description="Thoughts per page (default: 20, max: 100)",
                required=False,
                default=20,
                minimum=1,
                maximum=100,
            ),
        ],
        category="capture",
    ),
    ToolDefinition(
        name="search_streams",
        description="Search your streams by name or description. Returns matching streams.",
        parameters=[
            text_param(
                "query",
                "Search query to match against stream name and description",
                required=True,
            ),
            limit_param(default=20, maximum=100, description="Maximum number of results"),
        ],
        category="capture",
    ),
    ToolDefinition(
        name="get_stats",
        description=(
            "Get summary statistics about your captured thoughts: total count, breakdown "
            "by classification and category, date range, and stream count."
        ),
        category="capture",
    ),
    ToolDefinition(
        name="list_recent_thoughts",
        description=(
            "Quickly get your most recently captured thoughts. A simpler alternative to "
            "list_thoughts when you just want to see recent activity."
        ),
        parameters=[
            limit_param(default=10, maximum=50, description="Number of recent thoughts to return"),
        ],
        category="capture",
    ),
    # ---------------------------------------------------------------------------
    # Write
    # ---------------------------------------------------------------------------
    ToolDefinition(
        name="create_thought",
        description=(
            "Capture a new thought with text, images, and/or links. At least one content "
            "type is required. Thoughts are automatically enriched with AI classification, "
            "categorization, entity extraction, and embeddings in the background."
        ),
        parameters=[
            text_param(
                "text",
                "Text content for the thought (max 3000 characters). "
                "If longer, split into multiple thoughts.",
            ),
            ToolParameter(
                name="image_urls",
                type="array",
                description=(
                    "Array of image URLs to attach (max 5). "
                    "If more, split across multiple thoughts."
                ),
                required=False,
                max_items=5,
            ),
            ToolParameter(
                name="link_urls",
                type="array",
                description=(
                    "Array of link URLs to attach (max 5). "
                    "If more, split across multiple thoughts."
                ),
                required=False,
                max_items=5,
            ),
            text_param(
                "stream",
                "Assign to a stream by name (case-insensitive). The stream must already exist.",
            ),
            uuid_param(
                "stream_id",
                "Assign to a stream by ID. Takes precedence over stream name.",
            ),
        ],
        category="capture",
    ),
]
