from __future__ import annotations

from enum import Enum


class FilterKind(str, Enum):
    """Granularidade do filtro do painel."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class ExportPeriod(str, Enum):
    """Período selecionado na exportação CSV."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class ZeroTotalPolicy(str, Enum):
    """What to do with a submitted record whose total is zero."""

    REJECT = "reject"
    ACCEPT = "accept"


class GrowthTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"
