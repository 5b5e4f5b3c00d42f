"""
Login activity log: one appended line per login attempt.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from scheduling_core.core.config import settings
from scheduling_core.utils.time_format import format_date, format_time


def format_login(username: str, succeeded: bool, now: datetime) -> str:
    """Render one login log line."""
    outcome = "succeeded" if succeeded else "failed"
    return (
        f"Login on {format_date(now)} at {format_time(now)} "
        f"by username '{username}' - {outcome}"
    )


def append_login(
    username: str,
    succeeded: bool,
    now: Optional[datetime] = None,
    path: Optional[Union[str, Path]] = None,
) -> None:
    """
    Append a login attempt to the activity log, creating the file if needed.

    Args:
        username: Name the user typed
        succeeded: Whether the credentials were accepted
        now: Time of the attempt; defaults to datetime.now()
        path: Log file; defaults to LOGIN_LOG_FILE
    """
    line = format_login(username, succeeded, now or datetime.now())
    with open(path or settings.LOGIN_LOG_FILE, "a", encoding="utf-8") as log_file:
        log_file.write(line + "\n")
