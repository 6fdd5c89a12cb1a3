from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

UNCATEGORIZED = "Uncategorized"


@dataclass
class ToolUsageSummary(Generic[T]):
    most_used: T | None
    category_count: int


def summarize_tools(tools: Iterable[T]) -> ToolUsageSummary[T]:
    """Pick the tool with the highest usage_count and count distinct categories.

    A missing usage_count counts as 0; on a tie the earlier tool wins.
    """
    most_used = None
    categories: set[str] = set()
    for tool in tools:
        categories.add(tool.category or UNCATEGORIZED)
        if most_used is None or (tool.usage_count or 0) > (most_used.usage_count or 0):
            most_used = tool
    return ToolUsageSummary(most_used=most_used, category_count=len(categories))
