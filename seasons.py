"""
Seasons Module

Calendar month to season lookup for the PlanTings game. The season is
snapshotted once when a session starts and is only shown to the player;
it never feeds into plant arithmetic.
"""

import datetime as dt
import logging
from enum import Enum
from typing import Optional

log = logging.getLogger(__name__)


class Season(Enum):
    EARLY_SPRING = "Early Spring"
    SPRING = "Spring"
    LATE_SPRING = "Late Spring"
    SUMMER = "Summer"
    EARLY_AUTUMN = "Early Autumn"
    AUTUMN = "Autumn"
    EARLY_WINTER = "Early Winter"
    WINTER = "Winter"

    @property
    def label(self) -> str:
        return self.value


MONTH_SEASONS = {
    1: Season.WINTER,
    2: Season.EARLY_SPRING,
    3: Season.EARLY_SPRING,
    4: Season.SPRING,
    5: Season.LATE_SPRING,
    6: Season.SUMMER,
    7: Season.EARLY_AUTUMN,
    8: Season.EARLY_AUTUMN,
    9: Season.AUTUMN,
    10: Season.AUTUMN,
    11: Season.EARLY_WINTER,
    12: Season.WINTER,
}

DEFAULT_SEASON = Season.SPRING


def season_for_month(month: int) -> Season:
    """
    Map a calendar month (1-12) to its season.

    Months outside 1..12 cannot come from a real date; they fall back to
    DEFAULT_SEASON instead of raising.
    """
    season = MONTH_SEASONS.get(month)
    if season is None:
        log.warning("No season for month %r, using %s", month, DEFAULT_SEASON.label)
        return DEFAULT_SEASON
    return season


def current_season(today: Optional[dt.date] = None) -> Season:
    if today is None:
        today = dt.date.today()
    return season_for_month(today.month)
