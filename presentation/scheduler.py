"""Daily scheduled trigger."""
from typing import Optional

from config import Settings, settings as default_settings
from core.logging import get_logger

log = get_logger(__name__, service="scheduler")


def daily_sync_hook(cfg: Optional[Settings] = None) -> None:
    """
    Entry point for the daily schedule (SYNC_SCHEDULE_CRON in
    SYNC_SCHEDULE_TIMEZONE).

    It only records that it fired. Loading stays an explicit request to the
    HTTP endpoint or the `sync` command until automatic loading is decided on.
    """
    cfg = cfg or default_settings
    log.info(
        "Scheduled trigger fired; no sync started",
        cron=cfg.SYNC_SCHEDULE_CRON,
        timezone=cfg.SYNC_SCHEDULE_TIMEZONE,
    )
    return None
