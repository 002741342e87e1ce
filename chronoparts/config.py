"""
ChronoParts - Configuration Module.

Process-wide settings used when a DateTime is built without an explicit
time zone offset, or from the current time.

Time Zone Offset Resolution Order:
    1. Explicit argument to Settings
    2. Environment variable CHRONOPARTS_TIME_ZONE_OFFSET (hours, e.g. "5.5")
    3. Offset of the host's local time zone, computed once per process

The local offset is the offset in force when it is first computed, not
the one that prevails at the date being built: in Paris, a date in July
built in winter gets +1 and not +2.
"""

import logging
import os
import time
from functools import lru_cache
from typing import Callable, Optional

from chronoparts.zone_offset import check_offset

logger = logging.getLogger(__name__)

TIME_ZONE_OFFSET_ENV_VAR = "CHRONOPARTS_TIME_ZONE_OFFSET"


@lru_cache(maxsize=None)
def local_time_zone_offset() -> float:
    """
    Returns the offset in hours of the host's local time zone.

    Computed on first call and cached for the lifetime of the process.
    """
    return time.localtime().tm_gmtoff / 3600


def system_clock() -> int:
    """Returns the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _offset_from_environment() -> Optional[float]:
    raw_value = os.environ.get(TIME_ZONE_OFFSET_ENV_VAR)
    if raw_value is None:
        return None

    try:
        offset = float(raw_value)
    except ValueError:
        logger.warning(
            "Ignoring %s=%r: not a number", TIME_ZONE_OFFSET_ENV_VAR, raw_value
        )
        return None

    error = check_offset(offset)
    if error is not None:
        logger.warning("Ignoring %s: %s", TIME_ZONE_OFFSET_ENV_VAR, error)
        return None

    return offset


class Settings:
    """
    Settings consulted by the DateTime constructors.

    Attributes:
        clock: Callable returning the current timestamp in milliseconds.

    Example:
        >>> settings = Settings(time_zone_offset=2, clock=lambda: 0)
        >>> DateTime.now(settings=settings).value.hour24
        2
    """

    def __init__(
        self,
        time_zone_offset: Optional[float] = None,
        clock: Optional[Callable[[], int]] = None
    ):
        """
        Initialize settings.

        Args:
            time_zone_offset: Default offset in hours. If None, resolved
                from the environment then from the host on first use,
                and kept from then on.
            clock: Source of the current time. Defaults to the system clock.
        """
        self._time_zone_offset = time_zone_offset
        self.clock = clock if clock is not None else system_clock

    @property
    def time_zone_offset(self) -> float:
        """
        Returns the default time zone offset in hours.

        Resolved on first access, then fixed for the lifetime of self.
        """
        if self._time_zone_offset is None:
            offset = _offset_from_environment()
            if offset is None:
                offset = local_time_zone_offset()
            self._time_zone_offset = offset

        return self._time_zone_offset

    def now(self) -> int:
        """Returns the current timestamp in milliseconds."""
        return self.clock()


# Default settings instance
default_settings = Settings()
