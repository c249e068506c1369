"""Tests unitarios para los normalizadores de actualización de pedidos."""

from datetime import date

import pytest

from rakuten_rms.domain.models.codes import is_valid_shipping_term
from rakuten_rms.domain.models.conditions import BasketUpdate, ShippingUpdate, UpdateOrderMemoCondition
from rakuten_rms.services.orders.condition_normalizer import FieldOutcome
from rakuten_rms.services.orders.update_normalizer import normalize_memo_update, normalize_shipping_update

ORDER_NUMBER = "123456-20200515-0000000001"


class TestMemoUpdate:
    """Tests para normalize_memo_update."""

    def test_only_order_number(self):
        result = normalize_memo_update(UpdateOrderMemoCondition(order_number=ORDER_NUMBER))

        assert result.request.to_wire() == {"orderNumber": ORDER_NUMBER}

    def test_all_valid_fields(self):
        condition = UpdateOrderMemoCondition(
            order_number=ORDER_NUMBER,
            sub_status_id=101,
            delivery_class=2,
            delivery_date=date(2020, 5, 20),
            shipping_term=1012,
            memo="要確認",
            operator="山田",
            mail_plug_sentence="ご注文ありがとうございます。",
        )

        wire = normalize_memo_update(condition).request.to_wire()

        assert wire == {
            "orderNumber": ORDER_NUMBER,
            "subStatusId": 101,
            "deliveryClass": 2,
            "deliveryDate": "2020-05-20",
            "shippingTerm": 1012,
            "memo": "要確認",
            "operator": "山田",
            "mailPlugSentence": "ご注文ありがとうございます。",
        }

    @pytest.mark.parametrize(
        "field,value,wire_name",
        [
            ("delivery_class", 9, "deliveryClass"),
            ("shipping_term", 3, "shippingTerm"),
            ("memo", "x" * 33, "memo"),
            ("operator", "x" * 7, "operator"),
            ("mail_plug_sentence", "x" * 1025, "mailPlugSentence"),
        ],
    )
    def test_invalid_values_are_dropped(self, field, value, wire_name):
        """Valores fuera de rango o demasiado largos se omiten sin error."""
        condition = UpdateOrderMemoCondition(order_number=ORDER_NUMBER, **{field: value})

        result = normalize_memo_update(condition)

        assert wire_name not in result.request.to_wire()
        assert result.outcome(wire_name) is FieldOutcome.DROPPED_INVALID

    def test_length_limits_are_inclusive(self):
        condition = UpdateOrderMemoCondition(order_number=ORDER_NUMBER, memo="x" * 32, operator="x" * 6)

        wire = normalize_memo_update(condition).request.to_wire()

        assert wire["memo"] == "x" * 32
        assert wire["operator"] == "x" * 6

    def test_empty_strings_are_sent_to_clear_values(self):
        """Una cadena vacía borra memo, operador y texto de correo en RMS."""
        condition = UpdateOrderMemoCondition(order_number=ORDER_NUMBER, memo="", operator="", mail_plug_sentence="")

        result = normalize_memo_update(condition)

        assert result.request.to_wire() == {
            "orderNumber": ORDER_NUMBER,
            "memo": "",
            "operator": "",
            "mailPlugSentence": "",
        }
        assert result.outcome("memo") is FieldOutcome.APPLIED

    def test_none_is_not_sent(self):
        result = normalize_memo_update(UpdateOrderMemoCondition(order_number=ORDER_NUMBER, memo=None))

        assert "memo" not in result.request.to_wire()
        assert result.outcome("memo") is FieldOutcome.OMITTED_UNSET

    def test_order_number_is_required(self):
        with pytest.raises(ValueError):
            UpdateOrderMemoCondition(order_number="")


class TestShippingTerm:
    """Tests para la validación de franjas horarias."""

    @pytest.mark.parametrize("value", [0, 1, 2, 9, 709, 1012, 1824, 2424])
    def test_valid(self, value):
        assert is_valid_shipping_term(value) is True

    @pytest.mark.parametrize("value", [3, 8, 10, 609, 1260, 2400, 2425, 10000])
    def test_invalid(self, value):
        assert is_valid_shipping_term(value) is False


class TestShippingUpdate:
    """Tests para normalize_shipping_update."""

    def test_full_entry(self):
        baskets = [
            BasketUpdate(
                basket_id=1,
                shipping_list=[
                    ShippingUpdate(
                        shipping_detail_id=10,
                        delivery_company="1001",
                        shipping_number="1000",
                        shipping_date=date(2020, 5, 15),
                    )
                ],
            )
        ]

        wire = normalize_shipping_update(ORDER_NUMBER, baskets).to_wire()

        assert wire == {
            "orderNumber": ORDER_NUMBER,
            "BasketidModelList": [
                {
                    "basketId": 1,
                    "ShippingModelList": [
                        {
                            "shippingDetailId": 10,
                            "deliveryCompany": "1001",
                            "shippingNumber": "1000",
                            "shippingDate": "2020-05-15",
                        }
                    ],
                }
            ],
        }

    def test_unknown_delivery_company_is_dropped(self):
        baskets = [BasketUpdate(basket_id=1, shipping_list=[ShippingUpdate(shipping_detail_id=10, delivery_company="999")])]

        shipping = normalize_shipping_update(ORDER_NUMBER, baskets).to_wire()["BasketidModelList"][0]["ShippingModelList"]

        assert shipping == [{"shippingDetailId": 10}]

    def test_integer_delivery_company_is_accepted(self):
        baskets = [BasketUpdate(basket_id=1, shipping_list=[ShippingUpdate(delivery_company=1028)])]

        shipping = normalize_shipping_update(ORDER_NUMBER, baskets).to_wire()["BasketidModelList"][0]["ShippingModelList"]

        assert shipping == [{"deliveryCompany": "1028"}]

    def test_delete_flag(self):
        baskets = [BasketUpdate(basket_id=1, shipping_list=[ShippingUpdate(shipping_detail_id=10, shipping_delete_flag=True)])]

        shipping = normalize_shipping_update(ORDER_NUMBER, baskets).to_wire()["BasketidModelList"][0]["ShippingModelList"]

        assert shipping == [{"shippingDetailId": 10, "shippingDeleteFlag": 1}]

    def test_empty_tracking_number_is_sent(self):
        """Un número vacío borra el número de guía existente."""
        baskets = [BasketUpdate(basket_id=1, shipping_list=[ShippingUpdate(shipping_detail_id=10, shipping_number="")])]

        shipping = normalize_shipping_update(ORDER_NUMBER, baskets).to_wire()["BasketidModelList"][0]["ShippingModelList"]

        assert shipping == [{"shippingDetailId": 10, "shippingNumber": ""}]

    def test_entries_without_data_are_skipped(self):
        baskets = [
            BasketUpdate(
                basket_id=2,
                shipping_list=[ShippingUpdate(), ShippingUpdate(delivery_company="abc")],
            )
        ]

        wire = normalize_shipping_update(ORDER_NUMBER, baskets).to_wire()

        assert wire["BasketidModelList"] == [{"basketId": 2, "ShippingModelList": []}]
