"""Client-side list filters used by the incident, tool and log pages.

A filter value of ``"all"`` (or an empty value) lets everything through.
"""

from typing import Iterable, TypeVar

T = TypeVar("T")

ALL = "all"


def _value(item, field: str):
    value = getattr(item, field, None)
    # enums compare by their string value
    return getattr(value, "value", value)


def matches_choice(item, field: str, choice: str | None) -> bool:
    if not choice or choice == ALL:
        return True
    return _value(item, field) == choice


def contains_ci(haystack: str | None, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def filter_incidents(
    incidents: Iterable[T],
    search: str = "",
    severity: str | None = ALL,
    status: str | None = ALL,
) -> list[T]:
    return [
        i for i in incidents
        if (contains_ci(i.title, search) or contains_ci(i.reference_id, search))
        and matches_choice(i, "severity", severity)
        and matches_choice(i, "status", status)
    ]


def filter_tools(
    tools: Iterable[T],
    search: str = "",
    category: str | None = ALL,
    effectiveness: str | None = ALL,
) -> list[T]:
    return [
        t for t in tools
        if (contains_ci(t.name, search) or contains_ci(t.description, search))
        and matches_choice(t, "category", category)
        and matches_choice(t, "effectiveness", effectiveness)
    ]


def filter_logs(
    logs: Iterable[T],
    search: str = "",
    severity: str | None = ALL,
    source: str | None = ALL,
) -> list[T]:
    # source_ip is matched as-is, the text fields ignore case
    return [
        log for log in logs
        if (
            contains_ci(log.description, search)
            or search in (log.source_ip or "")
            or contains_ci(log.action, search)
        )
        and matches_choice(log, "severity", severity)
        and matches_choice(log, "source", source)
    ]
