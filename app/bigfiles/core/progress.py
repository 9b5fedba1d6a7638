"""Progress accounting shared by scan and deletion sessions.

Both sessions report coarse progress as "units completed out of units
planned" (roots for a scan, items for a deletion run). The percentage
is floored so it only reaches 100 once the last unit is done.
"""


def percent(completed: int, total: int) -> int:
    """Convert a completed/total pair into an integer percentage.

    Args:
        completed: Number of finished units.
        total: Number of planned units.

    Returns:
        Integer percentage between 0 and 100. An empty plan counts as done.
    """
    if total <= 0:
        return 100
    completed = max(0, min(completed, total))
    return completed * 100 // total
