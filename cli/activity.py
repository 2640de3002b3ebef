"""Breach check activity review.

Summarizes recent breach check events from the SIEM log. Events hold only
outcomes and counts, never the passwords that were checked.
"""

from core.siem import count_events_by_status, get_siem_events


def review_breach_activity(count: int = 10) -> list[dict]:
    """Print the most recent breach check events.

    Args:
        count: Number of recent entries to show

    Returns:
        List of the events shown
    """
    events = [e for e in get_siem_events(limit=10000) if e.get("event_type") == "breach_check"]
    events = events[-count:]

    if not events:
        print("No breach checks recorded yet.")
        return []

    print(f"\n=== Last {len(events)} Breach Checks ===")
    for event in events:
        line = f"{event.get('timestamp', '?')} - {event.get('status', 'UNKNOWN')}"
        details = event.get("details") or {}
        if "count" in details:
            line += f" - seen {details['count']:,} times"
        elif "error" in details:
            line += f" - {details['error']}"
        print(line)

    totals = count_events_by_status("breach_check")
    summary = ", ".join(f"{status}: {n}" for status, n in sorted(totals.items()))
    print(f"Totals - {summary}")

    if totals.get("ERROR", 0) >= 3:
        print("Warning: Repeated failures reaching the breach database.")

    return events
