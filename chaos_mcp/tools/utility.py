"""
Utility Tools

Account usage and the lookup tables used to filter everything else.
"""

from ..base import ToolDefinition
from .common import VOTE_TYPES, enum_param


TOOLS = [
    ToolDefinition(
        name="get_usage",
        description=(
            "Get your API usage statistics including current usage, rate limits, and when "
            "limits reset. Useful for monitoring your API consumption."
        ),
        category="utility",
    ),
    ToolDefinition(
        name="get_reactions",
        description=(
            "Get all available reaction types used on Resonate posts. Reactions are nuanced "
            'labels like "Resonates", "Insightful", "Fallacious" that people attach to '
            "their votes."
        ),
        parameters=[
            enum_param(
                "vote_type",
                VOTE_TYPES,
                "Filter by vote type (upvote reactions or downvote reactions)",
            ),
        ],
        category="utility",
    ),
    ToolDefinition(
        name="get_classifications",
        description=(
            "Get all available thought classifications/types (e.g., task, idea, theory, "
            "question). Use this to discover classification names for filtering thoughts."
        ),
        category="utility",
    ),
    ToolDefinition(
        name="get_categories",
        description=(
            "Get all available categories (e.g., Technology, Business, Health). Use this to "
            "discover category names for filtering thoughts."
        ),
        category="utility",
    ),
]
