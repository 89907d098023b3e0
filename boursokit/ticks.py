"""End-of-day ticks (quotes over a time frame) from the public quote service."""

from __future__ import annotations

import functools
import json
import math
import operator
import sys
from dataclasses import dataclass, field
from typing import Any, Mapping

TICKS_BASE_URL = "https://www.boursorama.com/bourse/action/graph/ws/GetTicksEOD"


def _get(data: Mapping[str, Any], key: str, what: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    if key not in data:
        raise ValueError(f"{what}: missing field `{key}`")
    return data[key]


def _str(data: Mapping[str, Any], key: str, what: str) -> str:
    value = _get(data, key, what)
    if not isinstance(value, str):
        raise ValueError(f"{what}: field `{key}` must be a string")
    return value


def _float(data: Mapping[str, Any], key: str, what: str) -> float:
    value = _get(data, key, what)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what}: field `{key}` must be a number")
    return float(value)


def _int(data: Mapping[str, Any], key: str, what: str) -> int:
    value = _get(data, key, what)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what}: field `{key}` must be an integer")
    return value


@dataclass
class QuoteTab:
    """One quote: date (days since the epoch), open, high, low, close and volume."""

    date: int = 0
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuoteTab:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "quote"
        return cls(
            date=_int(data, "d", what),
            open=_float(data, "o", what),
            high=_float(data, "h", what),
            low=_float(data, "l", what),
            close=_float(data, "c", what),
            volume=_int(data, "v", what),
        )


def _optional_quote(data: Mapping[str, Any], key: str) -> QuoteTab | None:
    value = data.get(key)
    return None if value is None else QuoteTab.from_dict(value)


@dataclass
class Ticks:
    """Quotes of a symbol for a given period (interval) and length (time frame)."""

    name: str = ""
    symbol_id: str = ""
    xperiod: int = 0
    quote_tab: list[QuoteTab] = field(default_factory=list)
    second_to_last_quote: QuoteTab | None = None
    """Quote of the day before the last one."""
    last_quote: QuoteTab | None = None
    """Quote of the previous day."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ticks:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "ticks"
        quotes = _get(data, "QuoteTab", what)
        if not isinstance(quotes, list):
            raise ValueError(f"{what}: field `QuoteTab` must be a list")
        return cls(
            name=_str(data, "Name", what),
            symbol_id=_str(data, "SymbolId", what),
            xperiod=_int(data, "Xperiod", what),
            quote_tab=[QuoteTab.from_dict(quote) for quote in quotes],
            second_to_last_quote=_optional_quote(data, "qv"),
            last_quote=_optional_quote(data, "qd"),
        )

    def highest(self) -> float:
        """Highest value over the quotes, never below 0.0."""
        return max([0.0, *(quote.high for quote in self.quote_tab)])

    def lowest(self) -> float:
        """Lowest value over the quotes; the largest float when there are none."""
        return min([sys.float_info.max, *(quote.low for quote in self.quote_tab)])

    def average(self) -> float:
        """Average closing value over the quotes; NaN when there are none."""
        if not self.quote_tab:
            return math.nan
        total = functools.reduce(operator.add, (quote.close for quote in self.quote_tab), 0.0)
        return total / len(self.quote_tab)

    def volume(self) -> int:
        """Total volume over the quotes."""
        return sum(quote.volume for quote in self.quote_tab)


@dataclass
class TicksResponse:
    """Body of a ticks response."""

    d: Ticks = field(default_factory=Ticks)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TicksResponse:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        return cls(d=Ticks.from_dict(_get(data, "d", "ticks response")))


def ticks_url(symbol: str, length: int, period: int) -> str:
    """URL of the ticks of a symbol over `length` days at the given period."""
    return f"{TICKS_BASE_URL}?symbol={symbol}&length={length}&period={period}&guid="


def parse_ticks(text: str) -> TicksResponse:
    """Parse the body of a ticks response, raising ValueError when invalid."""
    try:
        return TicksResponse.from_dict(json.loads(text))
    except ValueError as exc:
        raise ValueError("Failed to parse get ticks response") from exc