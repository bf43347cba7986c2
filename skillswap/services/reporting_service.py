from datetime import datetime, timedelta, timezone

from skillswap.models import SWAP_STATUSES


def _count(row, key="count"):
    return int(row[key] or 0) if row else 0


class ReportingService:
    """Read-only aggregates over users and swap requests."""

    def __init__(self, gateway):
        self.gateway = gateway

    def swap_status_counts(self):
        rows = self.gateway.query_all("SELECT status, COUNT(*) AS count FROM swap_requests GROUP BY status")
        counts = {status: 0 for status in SWAP_STATUSES}
        for row in rows:
            if row["status"] in counts:
                counts[row["status"]] = int(row["count"] or 0)
        return counts

    def dashboard_stats(self):
        week_ago = (datetime.now(timezone.utc) - timedelta(days=7)).strftime("%Y-%m-%d %H:%M:%S")
        total_users = self.gateway.query_one(
            "SELECT COUNT(*) AS count FROM users WHERE status = ? OR status IS NULL", ("active",)
        )
        new_users = self.gateway.query_one("SELECT COUNT(*) AS count FROM users WHERE created_at >= ?", (week_ago,))
        swaps = self.swap_status_counts()
        return {
            "totalUsers": _count(total_users),
            "successfulSwaps": swaps["accepted"],
            "pendingSwaps": swaps["pending"],
            "newThisWeek": _count(new_users),
        }
