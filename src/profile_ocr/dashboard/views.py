"""
Pure projections over extracted profiles: filtering, analytics and CSV.
"""
import csv
import io
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from ..models import ProfileRecord, ProfileStatus

STATUS_FILTER_ALL = "all"

CSV_HEADER = [
    "Username",
    "Display Name",
    "Platform",
    "Followers",
    "Bio",
    "Links",
    "Generated Page",
    "Revenue",
    "Status",
]


@dataclass(frozen=True)
class Aggregates:
    """Analytics figures shown on the dashboard."""

    total_revenue: float = 0.0
    completed_count: int = 0
    average_revenue: float = 0.0
    profile_count: int = 0
    platform_counts: Dict[str, int] = field(default_factory=dict)


def filter_profiles(
    profiles: Iterable[ProfileRecord],
    search_term: str = "",
    status_filter: str = STATUS_FILTER_ALL,
) -> List[ProfileRecord]:
    """Profiles whose username or display name contains ``search_term``
    (case-insensitive) and whose status matches ``status_filter``."""
    needle = search_term.lower()
    matches = []
    for profile in profiles:
        if needle not in profile.username.lower() and needle not in profile.display_name.lower():
            continue
        if status_filter != STATUS_FILTER_ALL and profile.status.value != status_filter:
            continue
        matches.append(profile)
    return matches


def compute_aggregates(profiles: Sequence[ProfileRecord]) -> Aggregates:
    total = sum(p.revenue_estimate or 0 for p in profiles)
    count = len(profiles)
    platforms = Counter(p.platform or "Unknown" for p in profiles)
    return Aggregates(
        total_revenue=total,
        completed_count=sum(1 for p in profiles if p.status == ProfileStatus.COMPLETED),
        average_revenue=total / count if count else 0,
        profile_count=count,
        platform_counts=dict(platforms),
    )


def format_revenue(value: Optional[float]) -> str:
    if value is None:
        return ""
    if float(value).is_integer():
        return f"${int(value)}"
    return f"${value:.2f}"


def _substitute_delimiters(text: str) -> str:
    # No quoting in this mode: commas become semicolons, line breaks become spaces.
    return text.replace(",", ";").replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def _csv_row(profile: ProfileRecord) -> List[str]:
    return [
        profile.username,
        profile.display_name,
        profile.platform,
        profile.follower_count_text,
        profile.bio,
        "; ".join(profile.bio_links),
        profile.generated_page_url or "",
        format_revenue(profile.revenue_estimate),
        profile.status.value,
    ]


def profiles_to_csv(profiles: Iterable[ProfileRecord], quote_fields: bool = False) -> str:
    """
    Serialize profiles as CSV with a fixed nine-column header.

    Args:
        profiles: Profiles to export, one row each
        quote_fields: Use standard CSV quoting instead of replacing embedded
            commas with semicolons

    Returns:
        str: CSV text, every row terminated by a newline
    """
    if quote_fields:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for profile in profiles:
            writer.writerow(_csv_row(profile))
        return buffer.getvalue()

    lines = [",".join(CSV_HEADER)]
    for profile in profiles:
        lines.append(",".join(_substitute_delimiters(cell) for cell in _csv_row(profile)))
    return "\n".join(lines) + "\n"
