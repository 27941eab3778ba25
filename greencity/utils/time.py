"""시간대 유틸리티.

Timezone helpers. Place modification timestamps are recorded in one fixed
reference zone regardless of the server's local zone.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

from greencity.config import settings


def now_in_zone(zone_name: str | None = None) -> datetime:
    """주어진 시간대의 현재 시각 (tz-aware).

    Return the current time in ``zone_name`` (default: ``settings.REFERENCE_TIMEZONE``).
    """
    return datetime.now(ZoneInfo(zone_name or settings.REFERENCE_TIMEZONE))
