"""
Read-time aggregation of analytics events and submissions for the admin
dashboards. Everything here is a pure function over rows already fetched
from the data layer; times are compared in UTC.
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone, timedelta
from typing import List

PAGE_VIEW = "page_view"
TOP_N = 5


@dataclass
class AnalyticsSummary:
    total_page_views: int = 0
    page_views_today: int = 0
    page_views_this_week: int = 0
    page_views_this_month: int = 0
    total_quotes: int = 0
    quotes_this_month: int = 0
    total_contacts: int = 0
    contacts_this_month: int = 0
    popular_pages: List[dict] = field(default_factory=list)
    popular_services: List[dict] = field(default_factory=list)
    quotes_by_status: List[dict] = field(default_factory=list)
    recent_activity: List[dict] = field(default_factory=list)


def _aware(value):
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def period_starts(now=None):
    """Start of today, of the trailing seven days and of the current month"""
    now = _aware(now) or datetime.now(timezone.utc)
    today = now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    return {
        "today": today,
        "week": now - timedelta(days=7),
        "month": today.replace(day=1),
    }


def count_since(rows, since, key="created_at"):
    return len([r for r in rows if _aware(r.get(key)) is not None and _aware(r.get(key)) >= since])


def top_counts(values, label, limit=TOP_N):
    """Most common non-empty values, highest count first; ties keep first-seen order"""
    counts = Counter(v for v in values if v)
    return [{label: value, "count": count} for value, count in counts.most_common(limit)]


def page_view_count_since(events, since):
    return count_since([e for e in events if e.get("event_type") == PAGE_VIEW], since)


def recent_activity(quotes, contacts, per_kind=3, limit=TOP_N):
    activity = []
    for quote in _newest(quotes)[:per_kind]:
        activity.append({
            "type": "quote",
            "description": f"{quote.get('contact_name')} requested a quote for {quote.get('service_name') or 'General inquiry'}",
            "time": _aware(quote.get("created_at")),
        })
    for contact in _newest(contacts)[:per_kind]:
        activity.append({
            "type": "contact",
            "description": f"{contact.get('name')} sent a message",
            "time": _aware(contact.get("created_at")),
        })
    activity.sort(key=lambda item: item["time"] or datetime.min.replace(tzinfo=timezone.utc), reverse=True)
    return activity[:limit]


def _newest(rows):
    return sorted(rows, key=lambda r: _aware(r.get("created_at")) or datetime.min.replace(tzinfo=timezone.utc), reverse=True)


def summarize(events, quotes, contacts, now=None):
    starts = period_starts(now)
    page_views = [e for e in events if e.get("event_type") == PAGE_VIEW]

    return AnalyticsSummary(
        total_page_views=len(page_views),
        page_views_today=count_since(page_views, starts["today"]),
        page_views_this_week=count_since(page_views, starts["week"]),
        page_views_this_month=count_since(page_views, starts["month"]),
        total_quotes=len(quotes),
        quotes_this_month=count_since(quotes, starts["month"]),
        total_contacts=len(contacts),
        contacts_this_month=count_since(contacts, starts["month"]),
        popular_pages=top_counts([e.get("page_path") for e in page_views], "path"),
        popular_services=top_counts([q.get("service_name") for q in quotes], "name"),
        quotes_by_status=[
            {"status": status, "count": count}
            for status, count in Counter(q.get("status") for q in quotes if q.get("status")).items()
        ],
        recent_activity=recent_activity(quotes, contacts),
    )
