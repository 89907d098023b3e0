"""Public market data feed: instrument quotes and trading hours."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, Mapping

_TIME_FORMAT = "%H:%M:%S"
_QUOTE_HOST = "tradingboard.boursobank.com"


def _get(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"instrument quote: missing field `{key}`")
    return data[key]


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise ValueError(f"instrument quote: field `{key}` must be a string")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"instrument quote: field `{key}` must be a number")
    return float(value)


def _int(data: Mapping[str, Any], key: str) -> int:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"instrument quote: field `{key}` must be an integer")
    return value


def _parse_time(text: str) -> time:
    return datetime.strptime(text, _TIME_FORMAT).time()


@dataclass
class InstrumentQuote:
    """Quote of an instrument as published by the public feed."""

    symbol: str = ""
    label: str = ""
    isin: str = ""
    last: float = 0.0
    currency: str = ""
    previous_close: float = 0.0
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    total_volume: int = 0
    exchange_id: int = 0
    exchange_code: str = ""
    exchange_label: str = ""
    opening_time: str = ""
    """Market opening time as HH:MM:SS."""
    closing_time: str = ""
    """Market closing time as HH:MM:SS."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InstrumentQuote:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("instrument quote must be an object")
        return cls(
            symbol=_str(data, "symbol"),
            label=_str(data, "label"),
            isin=_str(data, "isin"),
            last=_float(data, "last"),
            currency=_str(data, "currency"),
            previous_close=_float(data, "previousClose"),
            open=_float(data, "open"),
            high=_float(data, "high"),
            low=_float(data, "low"),
            total_volume=_int(data, "totalVolume"),
            exchange_id=_int(data, "exchangeId"),
            exchange_code=_str(data, "exchangeCode"),
            exchange_label=_str(data, "exchangeLabel"),
            opening_time=_str(data, "openingTime"),
            closing_time=_str(data, "closingTime"),
        )

    def is_open_at(self, moment: time | datetime | None = None) -> bool:
        """Tell whether the market is open at the given time (local now by default).

        The opening time is included, the closing time is not. Raises
        ValueError when the quote's times are not in HH:MM:SS form.
        """
        if moment is None:
            current = datetime.now().time()
        elif isinstance(moment, datetime):
            current = moment.time()
        else:
            current = moment.replace(tzinfo=None)
        opening = _parse_time(self.opening_time)
        closing = _parse_time(self.closing_time)
        return opening <= current < closing


def feed_base_url(api_url: str) -> str:
    """Base URL of the public feed."""
    return f"{api_url}/_public_/feed"


def instrument_quote_url(api_url: str, symbol: str) -> str:
    """URL of the quote of one instrument."""
    return f"{feed_base_url(api_url)}/instrument/quote/{symbol}?_host={_QUOTE_HOST}"


def parse_instrument_quote(text: str) -> InstrumentQuote:
    """Parse the body of an instrument quote response, raising ValueError when invalid."""
    try:
        return InstrumentQuote.from_dict(json.loads(text))
    except ValueError as exc:
        raise ValueError(
            f"Failed to parse instrument quote response. Response: {text}"
        ) from exc