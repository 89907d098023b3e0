import pytest

from boursokit.order_models import (
    AcceptabilityMessage,
    EstimatedFee,
    OrderCheckResponse,
    OrderConfirmResponse,
    OrderData,
    OrderKind,
    OrderPrepareResponse,
    OrderSide,
    PrepareSymbol,
)


def _symbol_dict():
    return {
        "exchangeLabel": "Euronext Paris",
        "symbol": "1rTCW8",
        "nbDecimals": 3,
        "currency": "EUR",
        "label": "AMUNDI ETF MSCI WORLD UCITS ETF",
        "isin": "FR0013412285",
        "lastPrice": 29.36,
        "allowTacticalOrders": True,
        "details": {"tracker": True},
        "extendedHours": {"isOpen": False},
    }


def _prefill_dict():
    return {
        "orderType": "LIM",
        "orderSide": None,
        "orderQuantity": None,
        "orderRiskMode": "CASH",
        "orderValidity": "2022-11-01",
        "orderAmount": 29.5,
    }


def test_wire_codes():
    assert OrderKind("LIM") is OrderKind.LIMIT
    assert OrderKind("ATP") is OrderKind.MARKET
    assert OrderKind("OCO") is OrderKind.ONE_CANCELS_OTHER
    assert OrderSide("B") is OrderSide.BUY
    assert OrderSide("S") is OrderSide.SELL


def test_order_data_defaults():
    data = OrderData()
    assert data.order_type is OrderKind.LIMIT
    assert data.order_side is None
    assert data.order_quantity is None


def test_order_data_round_trip():
    original = OrderData(
        order_type=OrderKind.LIMIT,
        order_side=OrderSide.SELL,
        order_quantity=4,
        order_expiration_date="2022-11-01",
        order_risk_mode="CASH",
        order_price_limit=29.36,
        resource_id="resource",
        estimated_fees=[EstimatedFee(type="order", label="Courtage", amount=1.99, percentage=0.5)],
        fees_explanation={"startAmount": "100"},
    )
    assert OrderData.from_dict(original.to_dict()) == original


def test_order_data_to_dict_uses_wire_names():
    result = OrderData(order_side=OrderSide.BUY, order_quantity=2, order_risk_mode="CASH").to_dict()
    assert result["orderType"] == "LIM"
    assert result["orderSide"] == "B"
    assert result["orderQuantity"] == 2
    assert result["resourceId"] is None
    assert result["estimatedFees"] is None


def test_order_data_missing_optionals_are_none():
    data = OrderData.from_dict({"orderType": "ATP", "orderRiskMode": "CASH"})
    assert data.order_type is OrderKind.MARKET
    assert data.order_price_limit is None
    assert data.estimated_fees is None


def test_order_data_integer_price_becomes_float():
    data = OrderData.from_dict({"orderType": "LIM", "orderRiskMode": "", "orderPriceLimit": 12})
    assert data.order_price_limit == 12.0
    assert isinstance(data.order_price_limit, float)


@pytest.mark.parametrize(
    "payload",
    [
        {"orderRiskMode": "CASH"},
        {"orderType": "XXX", "orderRiskMode": "CASH"},
        {"orderType": "LIM"},
        {"orderType": "LIM", "orderRiskMode": "CASH", "orderSide": "X"},
        {"orderType": "LIM", "orderRiskMode": "CASH", "orderQuantity": -1},
        {"orderType": "LIM", "orderRiskMode": "CASH", "orderQuantity": True},
        {"orderType": "LIM", "orderRiskMode": "CASH", "orderPriceLimit": "12"},
        {"orderType": "LIM", "orderRiskMode": "CASH", "estimatedFees": {}},
    ],
)
def test_order_data_rejects_malformed(payload):
    with pytest.raises(ValueError):
        OrderData.from_dict(payload)


def test_prepare_symbol():
    symbol = PrepareSymbol.from_dict(_symbol_dict())
    assert symbol.symbol == "1rTCW8"
    assert symbol.last_price == 29.36
    assert symbol.isin == "FR0013412285"
    assert symbol.allow_tactical_orders is True
    assert symbol.details == {"tracker": True}
    assert symbol.fund_morning_star_pdf_url == ""


def test_prepare_symbol_missing_price():
    payload = _symbol_dict()
    del payload["lastPrice"]
    with pytest.raises(ValueError):
        PrepareSymbol.from_dict(payload)


def test_prepare_response():
    response = OrderPrepareResponse.from_dict(
        {
            "resourceId": "resource",
            "isPcc": False,
            "symbol": _symbol_dict(),
            "prefillOrderData": _prefill_dict(),
            "acceptabilityMessages": [],
        }
    )
    assert response.resource_id == "resource"
    assert response.symbol.label == "AMUNDI ETF MSCI WORLD UCITS ETF"
    assert response.prefill_order_data.order_validity == "2022-11-01"
    assert response.prefill_order_data.order_amount == 29.5
    assert response.acceptability_messages == []


def test_prepare_response_requires_prefill():
    with pytest.raises(ValueError):
        OrderPrepareResponse.from_dict({"resourceId": "resource", "symbol": _symbol_dict()})


def test_check_response():
    fee = {"type": "order", "label": "Courtage", "amount": 1.99, "percentage": 0.5}
    check = dict(_prefill_dict(), estimatedFees=[fee], buyingPower=1000)
    response = OrderCheckResponse.from_dict(
        {
            "acceptabilityMessages": [{"type": "warning", "content": "Attention"}],
            "checkOrderData": check,
        }
    )
    assert response.acceptability_messages == [AcceptabilityMessage(type="warning", content="Attention")]
    assert response.check_order_data.estimated_fees == [EstimatedFee.from_dict(fee)]
    assert response.check_order_data.buying_power == 1000.0


def test_check_response_without_messages():
    response = OrderCheckResponse.from_dict({"checkOrderData": _prefill_dict()})
    assert response.acceptability_messages is None


def test_estimated_fee_rejects_bad_amount():
    with pytest.raises(ValueError):
        EstimatedFee.from_dict({"type": "t", "label": "l", "amount": "x", "percentage": 0})


def test_confirm_response():
    response = OrderConfirmResponse.from_dict(
        {
            "orderId": "order-1",
            "orderStateLabel": "En cours",
            "ordStat": "0",
            "actionMessage": {"id": "msg", "actions": []},
        }
    )
    assert response.order_id == "order-1"
    assert response.ord_stat == "0"
    assert response.action_message == {"id": "msg", "actions": []}


def test_confirm_response_requires_object_message():
    with pytest.raises(ValueError):
        OrderConfirmResponse.from_dict(
            {"orderId": "o", "orderStateLabel": "l", "ordStat": "s", "actionMessage": []}
        )


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        OrderData.from_dict([])