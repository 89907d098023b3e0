"""Data exchanged with the order endpoints: prepare, check and confirm."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


def _get(data: Mapping[str, Any], key: str, what: str) -> Any:
    _mapping(data, what)
    if key not in data:
        raise ValueError(f"{what}: missing field `{key}`")
    return data[key]


def _str(data: Mapping[str, Any], key: str, what: str) -> str:
    value = _get(data, key, what)
    if not isinstance(value, str):
        raise ValueError(f"{what}: field `{key}` must be a string")
    return value


def _check_str(value: Any, key: str, what: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{what}: field `{key}` must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str, what: str, default: str | None = None) -> str | None:
    value = _mapping(data, what).get(key, default)
    return _check_str(value, key, what)


def _check_float(value: Any, key: str, what: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what}: field `{key}` must be a number")
    return float(value)


def _float(data: Mapping[str, Any], key: str, what: str) -> float:
    value = _check_float(_get(data, key, what), key, what)
    if value is None:
        raise ValueError(f"{what}: field `{key}` must be a number")
    return value


def _optional_float(data: Mapping[str, Any], key: str, what: str) -> float | None:
    return _check_float(_mapping(data, what).get(key), key, what)


def _int(data: Mapping[str, Any], key: str, what: str) -> int:
    value = _get(data, key, what)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what}: field `{key}` must be an integer")
    return value


def _optional_bool(data: Mapping[str, Any], key: str, what: str, default: bool = False) -> bool:
    value = _mapping(data, what).get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{what}: field `{key}` must be a boolean")
    return value


def _optional_dict(data: Mapping[str, Any], key: str, what: str) -> dict[str, Any]:
    value = _mapping(data, what).get(key, {})
    if not isinstance(value, Mapping):
        raise ValueError(f"{what}: field `{key}` must be an object")
    return dict(value)


def _optional_list(data: Mapping[str, Any], key: str, what: str) -> list[Any] | None:
    value = _mapping(data, what).get(key)
    if value is not None and not isinstance(value, list):
        raise ValueError(f"{what}: field `{key}` must be a list")
    return value


class OrderKind(enum.Enum):
    """Type of order, by its wire code."""

    LIMIT = "LIM"
    MARKET = "ATP"
    STOP_LOSS = "STP"
    """Trigger threshold."""
    STOP_LOSS_MARGIN = "SLM"
    """Trigger range."""
    TRAILING_STOP_ORDER = "TSO"
    ONE_CANCELS_OTHER = "OCO"
    TRADE_AT_LAST = "TAL"


class OrderSide(enum.Enum):
    """Side of an order, by its wire code."""

    BUY = "B"
    SELL = "S"


def _enum(kind: type[enum.Enum], value: Any, key: str, what: str) -> Any:
    if not isinstance(value, str):
        raise ValueError(f"{what}: field `{key}` must be a string")
    try:
        return kind(value)
    except ValueError as exc:
        raise ValueError(f"{what}: unknown value {value!r} for `{key}`") from exc


@dataclass
class AcceptabilityMessage:
    """A message returned when an order is checked."""

    type: str = ""
    content: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AcceptabilityMessage:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "acceptability message"
        return cls(type=_str(data, "type", what), content=_str(data, "content", what))


@dataclass
class EstimatedFee:
    """A fee estimated for an order."""

    type: str = ""
    label: str = ""
    amount: float = 0.0
    percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EstimatedFee:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "estimated fee"
        return cls(
            type=_str(data, "type", what),
            label=_str(data, "label", what),
            amount=_float(data, "amount", what),
            percentage=_float(data, "percentage", what),
        )


def _fee_to_dict(fee: EstimatedFee) -> dict[str, Any]:
    return {"type": fee.type, "label": fee.label, "amount": fee.amount, "percentage": fee.percentage}


@dataclass
class OrderData:
    """Order data submitted to the check endpoint, also prefilled by the prepare endpoint."""

    order_type: OrderKind = OrderKind.LIMIT
    order_side: OrderSide | None = None
    order_quantity: int | None = None
    order_expiration_date: str | None = None
    """Expiration date as YYYY-MM-DD."""
    order_risk_mode: str = ""
    order_price_limit: float | None = None
    order_amount: float | None = None
    resource_id: str | None = None
    order_validity: str | None = None
    """Validity date as YYYY-MM-DD."""
    buying_power: float | None = None
    stop_px: Any = None
    trail_pct: Any = None
    estimated_fees: list[EstimatedFee] | None = None
    exchange_label: str | None = None
    fees_explanation: dict[str, Any] | None = None
    estimated_balance: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrderData:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "order data"
        _mapping(data, what)
        side = data.get("orderSide")
        quantity = data.get("orderQuantity")
        if quantity is not None and (
            isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0
        ):
            raise ValueError(f"{what}: field `orderQuantity` must be a non-negative integer")
        fees = _optional_list(data, "estimatedFees", what)
        explanation = data.get("feesExplanation")
        if explanation is not None and not isinstance(explanation, Mapping):
            raise ValueError(f"{what}: field `feesExplanation` must be an object")
        return cls(
            order_type=_enum(OrderKind, _get(data, "orderType", what), "orderType", what),
            order_side=None if side is None else _enum(OrderSide, side, "orderSide", what),
            order_quantity=quantity,
            order_expiration_date=_optional_str(data, "orderExpirationDate", what),
            order_risk_mode=_str(data, "orderRiskMode", what),
            order_price_limit=_optional_float(data, "orderPriceLimit", what),
            order_amount=_optional_float(data, "orderAmount", what),
            resource_id=_optional_str(data, "resourceId", what),
            order_validity=_optional_str(data, "orderValidity", what),
            buying_power=_optional_float(data, "buyingPower", what),
            stop_px=data.get("stopPx"),
            trail_pct=data.get("trailPct"),
            estimated_fees=None if fees is None else [EstimatedFee.from_dict(fee) for fee in fees],
            exchange_label=_optional_str(data, "exchangeLabel", what),
            fees_explanation=None if explanation is None else dict(explanation),
            estimated_balance=_optional_float(data, "estimatedBalance", what),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON object the check endpoint expects; unset fields are null."""
        return {
            "orderType": self.order_type.value,
            "orderSide": None if self.order_side is None else self.order_side.value,
            "orderQuantity": self.order_quantity,
            "orderExpirationDate": self.order_expiration_date,
            "orderRiskMode": self.order_risk_mode,
            "orderPriceLimit": self.order_price_limit,
            "orderAmount": self.order_amount,
            "resourceId": self.resource_id,
            "orderValidity": self.order_validity,
            "buyingPower": self.buying_power,
            "stopPx": self.stop_px,
            "trailPct": self.trail_pct,
            "estimatedFees": (
                None if self.estimated_fees is None else [_fee_to_dict(fee) for fee in self.estimated_fees]
            ),
            "exchangeLabel": self.exchange_label,
            "feesExplanation": self.fees_explanation,
            "estimatedBalance": self.estimated_balance,
        }


@dataclass
class PrepareSymbol:
    """The traded symbol as described by the prepare endpoint."""

    exchange_label: str = ""
    symbol: str = ""
    nb_decimals: int = 0
    currency: str = ""
    label: str = ""
    isin: str = ""
    last_price: float = 0.0
    fund_morning_star_pdf_url: str = ""
    direct_issuer_kid_url: Any = None
    priips_kid_url: Any = None
    allow_tactical_orders: bool = False
    details: dict[str, Any] = field(default_factory=dict)
    extended_hours: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrepareSymbol:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "symbol"
        return cls(
            exchange_label=_str(data, "exchangeLabel", what),
            symbol=_str(data, "symbol", what),
            nb_decimals=_int(data, "nbDecimals", what),
            currency=_str(data, "currency", what),
            label=_str(data, "label", what),
            isin=_str(data, "isin", what),
            last_price=_float(data, "lastPrice", what),
            fund_morning_star_pdf_url=_optional_str(data, "fundMorningStarPdfUrl", what, "") or "",
            direct_issuer_kid_url=data.get("directIssuerKidUrl"),
            priips_kid_url=data.get("priipsKidUrl"),
            allow_tactical_orders=_optional_bool(data, "allowTacticalOrders", what),
            details=_optional_dict(data, "details", what),
            extended_hours=_optional_dict(data, "extendedHours", what),
        )


@dataclass
class OrderPrepareResponse:
    """Data returned by the prepare endpoint for a symbol on an account."""

    resource_id: str = ""
    """Id of the order, used to confirm it."""
    symbol: PrepareSymbol = field(default_factory=PrepareSymbol)
    prefill_order_data: OrderData = field(default_factory=OrderData)
    is_pcc: bool = False
    account: dict[str, Any] = field(default_factory=dict)
    position: dict[str, Any] = field(default_factory=dict)
    prepare_order_data: dict[str, Any] = field(default_factory=dict)
    acceptability_messages: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrderPrepareResponse:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "order prepare response"
        return cls(
            resource_id=_str(data, "resourceId", what),
            symbol=PrepareSymbol.from_dict(_get(data, "symbol", what)),
            prefill_order_data=OrderData.from_dict(_get(data, "prefillOrderData", what)),
            is_pcc=_optional_bool(data, "isPcc", what),
            account=_optional_dict(data, "account", what),
            position=_optional_dict(data, "position", what),
            prepare_order_data=_optional_dict(data, "prepareOrderData", what),
            acceptability_messages=list(_optional_list(data, "acceptabilityMessages", what) or []),
        )


@dataclass
class OrderCheckResponse:
    """Data returned by the check endpoint."""

    acceptability_messages: list[AcceptabilityMessage] | None = None
    check_order_data: OrderData = field(default_factory=OrderData)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrderCheckResponse:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "order check response"
        messages = _optional_list(data, "acceptabilityMessages", what)
        return cls(
            acceptability_messages=(
                None if messages is None else [AcceptabilityMessage.from_dict(m) for m in messages]
            ),
            check_order_data=OrderData.from_dict(_get(data, "checkOrderData", what)),
        )


@dataclass
class OrderConfirmResponse:
    """Data returned by the confirm endpoint."""

    order_id: str = ""
    order_state_label: str = ""
    ord_stat: str = ""
    action_message: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrderConfirmResponse:
        """Build from a decoded JSON object, raising ValueError when it is malformed."""
        what = "order confirm response"
        message = _get(data, "actionMessage", what)
        if not isinstance(message, Mapping):
            raise ValueError(f"{what}: field `actionMessage` must be an object")
        return cls(
            order_id=_str(data, "orderId", what),
            order_state_label=_str(data, "orderStateLabel", what),
            ord_stat=_str(data, "ordStat", what),
            action_message=dict(message),
        )