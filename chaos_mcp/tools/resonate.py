"""
Resonate Tools

Read access to the public Resonate feed: posts, votes, demographics and
topic clusters.
"""

from ..base import ToolDefinition
from .common import (
    VOTE_TYPES,
    date_range_params,
    enum_param,
    limit_param,
    min_score_param,
    page_param,
    per_page_param,
    taxonomy_params,
    text_param,
    uuid_param,
)


TOOLS = [
    ToolDefinition(
        name="search_posts",
        description=(
            "Search public Resonate posts using semantic similarity. Find posts about any "
            "topic by describing what you are looking for."
        ),
        parameters=[
            text_param("text", "Text to search for semantically", required=True),
            limit_param(default=20, maximum=50),
            min_score_param(),
        ],
        category="resonate",
    ),
    ToolDefinition(
        name="list_posts",
        description=(
            "Browse public Resonate posts with filters and sorting. "
            "Use this to find trending, recent, or popular posts."
        ),
        parameters=[
            page_param(),
            per_page_param(default=25, maximum=100),
            *taxonomy_params(None, '"Technology"'),
            enum_param(
                "sort_by",
                ("newest", "oldest", "most_upvoted", "most_downvoted"),
                "Sort order (default: newest)",
            ),
            *date_range_params("posts"),
            text_param(
                "search",
                "Text search in post content (case-insensitive substring match)",
            ),
        ],
        category="resonate",
    ),
    ToolDefinition(
        name="get_post",
        description=(
            "Get full details for a single Resonate post including votes, reactions "
            "breakdown, topic cluster, and entities."
        ),
        parameters=[uuid_param("post_id", "The post ID to retrieve", required=True)],
        category="resonate",
    ),
    ToolDefinition(
        name="get_post_demographics",
        description=(
            "Get demographic voting breakdown for a Resonate post. Shows how different "
            "age groups, sexes, regions, and locations voted."
        ),
        parameters=[
            uuid_param("post_id", "The post ID to get demographics for", required=True),
            enum_param(
                "dimension",
                ("age", "sex", "country", "state", "region", "zip"),
                "Filter to a specific demographic dimension (optional, returns all if omitted)",
            ),
        ],
        category="resonate",
    ),
    ToolDefinition(
        name="get_topic_clusters",
        description=(
            "Get trending and active topic clusters from Resonate. Shows what topics people "
            "are posting and voting about, with heat scores and sentiment."
        ),
        parameters=[
            enum_param(
                "status",
                ("emerging", "trending", "active", "cooling", "archived"),
                "Filter by lifecycle status",
            ),
            enum_param(
                "sort_by",
                ("heat_score", "post_count", "newest"),
                "Sort order (default: heat_score)",
            ),
            limit_param(default=20, maximum=50),
        ],
        category="resonate",
    ),
    ToolDefinition(
        name="get_my_votes",
        description=(
            "Get your voting history on Resonate posts. Search for posts you upvoted or "
            "downvoted by content text."
        ),
        parameters=[
            page_param(),
            per_page_param(default=25, maximum=100),
            enum_param("vote_type", VOTE_TYPES, "Filter by vote type"),
            text_param("search", "Search post content text (case-insensitive)"),
            *date_range_params("votes"),
        ],
        category="resonate",
    ),
    ToolDefinition(
        name="get_my_post_performance",
        description=(
            "Get performance data for posts you published to Resonate. Shows vote counts, "
            "reactions, and demographic breakdowns for your content."
        ),
        parameters=[
            page_param(),
            per_page_param(default=25, maximum=50),
            enum_param(
                "sort_by",
                ("newest", "most_upvoted", "most_downvoted"),
                "Sort order (default: newest)",
            ),
        ],
        category="resonate",
    ),
]
