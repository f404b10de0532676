from datetime import datetime, timezone, timedelta

from fixitpapa.analytics import period_starts, summarize, top_counts, recent_activity

NOW = datetime(2025, 3, 15, 14, 30, tzinfo=timezone.utc)


def _view(path, when):
    return {"event_type": "page_view", "page_path": path, "created_at": when}


def test_period_starts():
    starts = period_starts(NOW)
    assert starts["today"] == datetime(2025, 3, 15, tzinfo=timezone.utc)
    assert starts["week"] == NOW - timedelta(days=7)
    assert starts["month"] == datetime(2025, 3, 1, tzinfo=timezone.utc)


def test_period_starts_do_not_depend_on_each_other():
    starts = period_starts(datetime(2025, 3, 3, 9, 0, tzinfo=timezone.utc))
    assert starts["week"] == datetime(2025, 2, 24, 9, 0, tzinfo=timezone.utc)
    assert starts["month"] == datetime(2025, 3, 1, tzinfo=timezone.utc)


def test_top_counts_orders_by_count():
    assert top_counts(["/a", "/b", "/b", None, "", "/c", "/b", "/a"], "path", limit=2) == [
        {"path": "/b", "count": 3},
        {"path": "/a", "count": 2},
    ]


def test_summarize_counts_periods():
    events = [
        _view("/", NOW - timedelta(hours=1)),
        _view("/", NOW - timedelta(days=3)),
        _view("/services", NOW - timedelta(days=20)),
        {"event_type": "service_view", "page_path": "/services/x", "created_at": NOW},
        _view("/about", "2025-03-15T10:00:00Z"),
    ]
    quotes = [
        {"status": "new", "service_name": "Fans", "created_at": NOW - timedelta(days=2), "contact_name": "Jane"},
        {"status": "completed", "service_name": "Fans", "created_at": NOW - timedelta(days=40), "contact_name": "Joe"},
    ]
    contacts = [{"name": "Sam", "status": "new", "created_at": NOW - timedelta(days=1)}]

    summary = summarize(events, quotes, contacts, now=NOW)
    assert summary.total_page_views == 4
    assert summary.page_views_today == 2
    assert summary.page_views_this_week == 3
    assert summary.page_views_this_month == 3
    assert summary.total_quotes == 2
    assert summary.quotes_this_month == 1
    assert summary.contacts_this_month == 1
    assert summary.popular_pages[0] == {"path": "/", "count": 2}
    assert summary.popular_services == [{"name": "Fans", "count": 2}]
    assert {"status": "completed", "count": 1} in summary.quotes_by_status


def test_summarize_with_no_data():
    summary = summarize([], [], [], now=NOW)
    assert summary.total_page_views == 0
    assert summary.popular_pages == []
    assert summary.recent_activity == []


def test_recent_activity_mixes_quotes_and_messages():
    quotes = [{"contact_name": "Jane", "service_name": None, "created_at": NOW - timedelta(hours=2)}]
    contacts = [{"name": "Sam", "created_at": NOW - timedelta(hours=1)}]
    activity = recent_activity(quotes, contacts)
    assert [a["description"] for a in activity] == [
        "Sam sent a message",
        "Jane requested a quote for General inquiry",
    ]
