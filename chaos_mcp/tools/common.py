"""
Shared parameter builders for the tool catalog.

Many tools take the same paging, filter, and date-range arguments; these
helpers keep their declarations identical across modules.
"""

from typing import List, Optional, Sequence

from ..base import ToolParameter

VOTE_TYPES = ("upvote", "downvote")
PAGE_STATUSES = ("generating", "complete", "failed", "updating")


def page_param() -> ToolParameter:
    return ToolParameter(
        name="page",
        type="integer",
        description="Page number (default: 1)",
        required=False,
        default=1,
        minimum=1,
    )


def per_page_param(default: int, maximum: int) -> ToolParameter:
    return ToolParameter(
        name="per_page",
        type="integer",
        description=f"Items per page (default: {default}, max: {maximum})",
        required=False,
        default=default,
        minimum=1,
        maximum=maximum,
    )


def limit_param(default: int, maximum: int, description: str = "Maximum results") -> ToolParameter:
    return ToolParameter(
        name="limit",
        type="integer",
        description=f"{description} (default: {default}, max: {maximum})",
        required=False,
        default=default,
        minimum=1,
        maximum=maximum,
    )


def min_score_param() -> ToolParameter:
    return ToolParameter(
        name="min_score",
        type="number",
        description="Minimum similarity score 0-1 (default: 0.5)",
        required=False,
        default=0.5,
        minimum=0,
        maximum=1,
    )


def uuid_param(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(
        name=name,
        type="string",
        description=description,
        required=required,
        format="uuid",
    )


def text_param(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, type="string", description=description, required=required)


def enum_param(name: str, values: Sequence[str], description: str) -> ToolParameter:
    return ToolParameter(
        name=name,
        type="string",
        description=description,
        required=False,
        enum=tuple(values),
    )


def date_range_params(noun: str) -> List[ToolParameter]:
    return [
        ToolParameter(
            name="created_after",
            type="string",
            description=f"Filter {noun} created after this date (ISO 8601)",
            required=False,
            format="date-time",
        ),
        ToolParameter(
            name="created_before",
            type="string",
            description=f"Filter {noun} created before this date (ISO 8601)",
            required=False,
            format="date-time",
        ),
    ]


def taxonomy_params(classification_hint: Optional[str], category_hint: Optional[str]) -> List[ToolParameter]:
    """classification/category filters, by ID and by case-insensitive name."""
    classification = "Filter by classification name"
    if classification_hint:
        classification += f" (e.g., {classification_hint})"
    category = "Filter by category name"
    if category_hint:
        category += f" (e.g., {category_hint})"

    return [
        uuid_param("classification_id", "Filter by classification ID"),
        text_param("classification", f"{classification}. Case-insensitive."),
        uuid_param("category_id", "Filter by category ID"),
        text_param("category", f"{category}. Case-insensitive."),
    ]
