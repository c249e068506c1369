"""
Normalizers for the order update endpoints (memo and shipping).

Same permissive contract as the search normalizer: out-of-range or
over-length optional values are left out of the request, never raised.
"""

import logging

from rakuten_rms.domain.models.codes import (
    DELIVERY_CLASS_CODES,
    DELIVERY_COMPANY_CODES,
    MAX_MAIL_PLUG_SENTENCE_LENGTH,
    MAX_MEMO_LENGTH,
    MAX_OPERATOR_LENGTH,
    is_valid_shipping_term,
)
from rakuten_rms.domain.models.conditions import BasketUpdate, ShippingUpdate, UpdateOrderMemoCondition
from rakuten_rms.schemas.order_schemas import (
    BasketidModel,
    ShippingRequestModel,
    UpdateOrderMemoRequest,
    UpdateOrderShippingRequest,
)
from rakuten_rms.services.orders.condition_normalizer import FieldCollector, NormalizationResult

logger = logging.getLogger(__name__)


def normalize_memo_update(condition: UpdateOrderMemoCondition) -> NormalizationResult:
    """
    Build an ``updateOrderMemo`` body.

    Args:
        condition: Fields to update; ``order_number`` is mandatory

    Returns:
        NormalizationResult: ``UpdateOrderMemoRequest`` and field ledger
    """
    fields = FieldCollector("updateOrderMemo")

    if condition.sub_status_id is None:
        fields.unset("sub_status_id")
    else:
        fields.apply("sub_status_id", condition.sub_status_id)

    fields.code("delivery_class", condition.delivery_class, DELIVERY_CLASS_CODES)

    if condition.delivery_date is None:
        fields.unset("delivery_date")
    else:
        fields.apply("delivery_date", condition.delivery_date)

    if condition.shipping_term is None:
        fields.unset("shipping_term")
    elif is_valid_shipping_term(condition.shipping_term):
        fields.apply("shipping_term", condition.shipping_term)
    else:
        fields.drop("shipping_term", condition.shipping_term, "not 0, 1, 2, 9 or h1h2 with hours in 7..24")

    # An empty string clears the stored value
    fields.text("memo", condition.memo, MAX_MEMO_LENGTH, allow_empty=True)
    fields.text("operator", condition.operator, MAX_OPERATOR_LENGTH, allow_empty=True)
    fields.text("mail_plug_sentence", condition.mail_plug_sentence, MAX_MAIL_PLUG_SENTENCE_LENGTH, allow_empty=True)

    request = UpdateOrderMemoRequest(order_number=condition.order_number, **fields.values)
    return NormalizationResult(request=request, outcomes=fields.outcomes)


def _normalize_shipping(shipping: ShippingUpdate, context: str) -> ShippingRequestModel | None:
    fields = FieldCollector(context)

    if shipping.shipping_detail_id is not None:
        fields.apply("shipping_detail_id", shipping.shipping_detail_id)

    company = str(shipping.delivery_company) if shipping.delivery_company is not None else None
    fields.code("delivery_company", company, DELIVERY_COMPANY_CODES)

    # An empty tracking number clears the existing one
    if shipping.shipping_number is not None:
        fields.apply("shipping_number", shipping.shipping_number)
    if shipping.shipping_date is not None:
        fields.apply("shipping_date", shipping.shipping_date)
    fields.flag("shipping_delete_flag", shipping.shipping_delete_flag)

    if not fields.values:
        logger.debug(f"{context}: skipping shipping entry with no data")
        return None
    return ShippingRequestModel(**fields.values)


def normalize_shipping_update(order_number: str, baskets: list[BasketUpdate]) -> UpdateOrderShippingRequest:
    """
    Build an ``updateOrderShipping`` body.

    Shipping entries with no usable data after normalization are skipped;
    a basket is kept even if all its entries were skipped so RMS reports it.

    Args:
        order_number: Target order
        baskets: Shipments grouped by basket

    Returns:
        UpdateOrderShippingRequest: Request body
    """
    basket_models = []
    for basket in baskets:
        context = f"updateOrderShipping[{order_number}/{basket.basket_id}]"
        shipping_models = []
        for shipping in basket.shipping_list:
            if shipping.is_empty:
                continue
            model = _normalize_shipping(shipping, context)
            if model is not None:
                shipping_models.append(model)
        basket_models.append(BasketidModel(basket_id=basket.basket_id, shipping_model_list=shipping_models))

    return UpdateOrderShippingRequest(order_number=order_number, basketid_model_list=basket_models)
