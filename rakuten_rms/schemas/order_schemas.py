"""
Modelos Pydantic para la API de pedidos de RMS (楽天ペイ受注API).

Cubre los cuatro endpoints JSON: searchOrder, getOrder, updateOrderMemo y
updateOrderShipping. Los registros de respuesta solo tipan los campos que el
cliente usa; el resto se conserva como campos extra.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field

from rakuten_rms.domain.value_objects.rms_datetime import RMSDate, RMSDateTime
from rakuten_rms.schemas.common import MessageEnvelope, RMSRequestModel, RMSResponseModel

# =============================================================================
# SEARCH ORDER
# =============================================================================


class SortModel(RMSRequestModel):
    """Criterio de ordenamiento de resultados."""

    sort_column: int = Field(..., description="1: fecha de pedido")
    sort_direction: int = Field(..., description="1: ascendente, 2: descendente")


class PaginationRequestModel(RMSRequestModel):
    """Paginación del request de búsqueda."""

    request_records_amount: int = Field(30, ge=1, le=1000)
    request_page: int = Field(1, ge=1)
    sort_model_list: Optional[List[SortModel]] = Field(None, alias="SortModelList")


class SearchOrderRequest(RMSRequestModel):
    """Cuerpo de ``searchOrder``. Construido por el normalizador de condiciones."""

    date_type: int
    start_datetime: RMSDateTime
    end_datetime: RMSDateTime

    order_progress_list: Optional[List[int]] = None
    sub_status_id_list: Optional[List[int]] = None
    order_type_list: Optional[List[int]] = None
    settlement_method: Optional[int] = None
    delivery_name: Optional[str] = None
    shipping_date_blank_flag: Optional[int] = None
    shipping_number_blank_flag: Optional[int] = None
    search_keyword_type: Optional[int] = None
    search_keyword: Optional[str] = None
    mail_send_type: Optional[int] = None
    orderer_mail_address: Optional[str] = None
    phone_number_type: Optional[int] = None
    phone_number: Optional[str] = None
    reserve_number: Optional[str] = None
    purchase_site_type: Optional[int] = None
    asuraku_flag: Optional[int] = None
    coupon_use_flag: Optional[int] = None
    drug_flag: Optional[int] = None
    overseas_flag: Optional[int] = None

    pagination_request_model: PaginationRequestModel = Field(
        default_factory=PaginationRequestModel, alias="PaginationRequestModel"
    )


class PaginationResponseModel(RMSResponseModel):
    """Paginación devuelta por ``searchOrder``."""

    total_records_amount: Optional[int] = None
    total_pages: Optional[int] = None
    request_page: Optional[int] = None


class SearchOrderResponse(MessageEnvelope):
    """Respuesta de ``searchOrder``: números de pedido de la página solicitada."""

    order_number_list: List[str] = Field(default_factory=list)
    pagination_response_model: Optional[PaginationResponseModel] = Field(None, alias="PaginationResponseModel")


# =============================================================================
# GET ORDER
# =============================================================================


class GetOrderRequest(RMSRequestModel):
    """Cuerpo de ``getOrder``."""

    order_number_list: List[str]
    version: int = Field(3, ge=1, le=4)


class OrdererModel(RMSResponseModel):
    """Datos del comprador."""

    zip_code1: Optional[str] = None
    zip_code2: Optional[str] = None
    prefecture: Optional[str] = None
    city: Optional[str] = None
    sub_address: Optional[str] = None
    family_name: Optional[str] = None
    first_name: Optional[str] = None
    family_name_kana: Optional[str] = None
    first_name_kana: Optional[str] = None
    phone_number1: Optional[str] = None
    phone_number2: Optional[str] = None
    phone_number3: Optional[str] = None
    email_address: Optional[str] = None
    sex: Optional[str] = None
    birth_year: Optional[int] = None
    birth_month: Optional[int] = None
    birth_day: Optional[int] = None


class SettlementModel(RMSResponseModel):
    """Forma de pago del pedido."""

    settlement_method: Optional[str] = None
    rpay_settlement_flag: Optional[int] = None
    card_name: Optional[str] = None
    card_number: Optional[str] = None
    card_owner: Optional[str] = None
    card_ym: Optional[str] = None
    card_pay_type: Optional[int] = None
    card_installment_desc: Optional[str] = None


class DeliveryModel(RMSResponseModel):
    """Método de entrega."""

    delivery_name: Optional[str] = None
    delivery_class: Optional[int] = None


class PointModel(RMSResponseModel):
    """Puntos usados en el pedido."""

    used_point: Optional[int] = None


class WrappingModel(RMSResponseModel):
    """Envoltorio de regalo."""

    title: Optional[int] = None
    name: Optional[str] = None
    price: Optional[int] = None
    include_tax_flag: Optional[int] = None
    delete_wrapping_flag: Optional[int] = None
    tax_rate: Optional[float] = None
    tax_price: Optional[int] = None


class SenderModel(RMSResponseModel):
    """Destinatario de un paquete."""

    zip_code1: Optional[str] = None
    zip_code2: Optional[str] = None
    prefecture: Optional[str] = None
    city: Optional[str] = None
    sub_address: Optional[str] = None
    family_name: Optional[str] = None
    first_name: Optional[str] = None
    family_name_kana: Optional[str] = None
    first_name_kana: Optional[str] = None
    phone_number1: Optional[str] = None
    phone_number2: Optional[str] = None
    phone_number3: Optional[str] = None
    isolated_island_flag: Optional[int] = None


class ItemModel(RMSResponseModel):
    """Línea de producto dentro de un paquete."""

    item_detail_id: Optional[int] = None
    item_name: Optional[str] = None
    item_id: Optional[int] = None
    item_number: Optional[str] = None
    manage_number: Optional[str] = None
    price: Optional[int] = None
    units: Optional[int] = None
    include_postage_flag: Optional[int] = None
    include_tax_flag: Optional[int] = None
    include_cash_on_delivery_postage_flag: Optional[int] = None
    selected_choice: Optional[str] = None
    point_rate: Optional[int] = None
    point_type: Optional[int] = None
    inventory_type: Optional[int] = None
    delvdate_info: Optional[str] = None
    restore_inventory_flag: Optional[int] = None
    deal_flag: Optional[int] = None
    drug_flag: Optional[int] = None
    delete_item_flag: Optional[int] = None
    tax_rate: Optional[float] = None
    price_tax_incl: Optional[int] = None
    is_single_item_shipping: Optional[int] = None


class ShippingModel(RMSResponseModel):
    """Envío registrado para un paquete."""

    shipping_detail_id: Optional[int] = None
    shipping_number: Optional[str] = None
    delivery_company: Optional[str] = None
    delivery_company_name: Optional[str] = None
    shipping_date: Optional[RMSDate] = None


class DeliveryCvsModel(RMSResponseModel):
    """Tienda de conveniencia de recogida."""

    cvs_code: Optional[int] = None
    store_genre_code: Optional[str] = None
    store_code: Optional[str] = None
    store_name: Optional[str] = None
    store_zip: Optional[str] = None
    store_prefecture: Optional[str] = None
    store_address: Optional[str] = None
    area_code: Optional[str] = None
    depo: Optional[str] = None
    open_time: Optional[str] = None
    close_time: Optional[str] = None
    cvs_remarks: Optional[str] = None


class PackageModel(RMSResponseModel):
    """Paquete (canasta) de un pedido."""

    basket_id: Optional[int] = None
    postage_price: Optional[int] = None
    postage_tax_rate: Optional[float] = None
    delivery_price: Optional[int] = None
    delivery_tax_rate: Optional[float] = None
    goods_tax: Optional[int] = None
    goods_price: Optional[int] = None
    total_price: Optional[int] = None
    noshi: Optional[str] = None
    package_delete_flag: Optional[int] = None
    default_delivery_company_code: Optional[str] = None

    sender_model: Optional[SenderModel] = Field(
        None, alias="SenderModel", validation_alias=AliasChoices("SenderModel", "senderModel")
    )
    item_model_list: List[ItemModel] = Field(default_factory=list, alias="ItemModelList")
    shipping_model_list: List[ShippingModel] = Field(default_factory=list, alias="ShippingModelList")
    delivery_cvs_model: Optional[DeliveryCvsModel] = Field(None, alias="DeliveryCvsModel")


class CouponModel(RMSResponseModel):
    """Cupón aplicado."""

    coupon_code: Optional[str] = None
    item_id: Optional[int] = None
    coupon_name: Optional[str] = None
    coupon_summary: Optional[str] = None
    coupon_capital: Optional[str] = None
    coupon_capital_code: Optional[int] = None
    expiry_date: Optional[RMSDate] = None
    coupon_price: Optional[int] = None
    coupon_unit: Optional[int] = None
    coupon_total_price: Optional[int] = None


class ChangeReasonModel(RMSResponseModel):
    """Solicitud de cambio o cancelación."""

    change_id: Optional[int] = None
    change_type: Optional[int] = None
    change_type_detail: Optional[int] = None
    change_reason: Optional[int] = None
    change_reason_detail: Optional[int] = None
    change_apply_datetime: Optional[RMSDateTime] = None
    change_fix_datetime: Optional[RMSDateTime] = None
    change_cmpl_datetime: Optional[RMSDateTime] = None


class TaxSummaryModel(RMSResponseModel):
    """Resumen de impuestos por tasa."""

    tax_rate: Optional[float] = None
    req_price: Optional[int] = None
    req_price_tax: Optional[int] = None
    total_price: Optional[int] = None
    payment_charge: Optional[int] = None
    coupon_price: Optional[int] = None
    point: Optional[int] = None


class OrderModel(RMSResponseModel):
    """Pedido completo devuelto por ``getOrder``."""

    order_number: str
    order_progress: Optional[int] = None
    sub_status_id: Optional[int] = None
    sub_status_name: Optional[str] = None

    order_datetime: Optional[RMSDateTime] = None
    shop_order_cfm_datetime: Optional[RMSDateTime] = None
    order_fix_datetime: Optional[RMSDateTime] = None
    shipping_inst_datetime: Optional[RMSDateTime] = None
    shipping_cmpl_rpt_datetime: Optional[RMSDateTime] = None
    cancel_due_date: Optional[RMSDate] = None
    delivery_date: Optional[RMSDate] = None

    shipping_term: Optional[int] = None
    remarks: Optional[str] = None
    gift_check_flag: Optional[int] = None
    several_sender_flag: Optional[int] = None
    equal_sender_flag: Optional[int] = None
    isolated_island_flag: Optional[int] = None
    rakuten_member_flag: Optional[int] = None
    carrier_code: Optional[int] = None
    email_carrier_code: Optional[int] = None
    order_type: Optional[int] = None
    reserve_number: Optional[str] = None
    reserve_delivery_count: Optional[int] = None
    caution_display_type: Optional[int] = None
    rakuten_confirm_flag: Optional[int] = None

    goods_price: Optional[int] = None
    goods_tax: Optional[int] = None
    postage_price: Optional[int] = None
    delivery_price: Optional[int] = None
    payment_charge: Optional[int] = None
    payment_charge_tax_rate: Optional[float] = None
    total_price: Optional[int] = None
    request_price: Optional[int] = None
    coupon_all_total_price: Optional[int] = None
    coupon_shop_price: Optional[int] = None
    coupon_other_price: Optional[int] = None
    additional_fee_occur_amount_to_user: Optional[int] = None
    additional_fee_occur_amount_to_shop: Optional[int] = None

    asuraku_flag: Optional[int] = None
    drug_flag: Optional[int] = None
    deal_flag: Optional[int] = None
    membership_type: Optional[int] = None
    memo: Optional[str] = None
    operator: Optional[str] = None
    mail_plug_sentence: Optional[str] = None
    modify_flag: Optional[int] = None
    is_tax_recalc: Optional[int] = None

    orderer_model: Optional[OrdererModel] = Field(None, alias="OrdererModel")
    settlement_model: Optional[SettlementModel] = Field(None, alias="SettlementModel")
    delivery_model: Optional[DeliveryModel] = Field(None, alias="DeliveryModel")
    point_model: Optional[PointModel] = Field(None, alias="PointModel")
    wrapping_model1: Optional[WrappingModel] = Field(None, alias="WrappingModel1")
    wrapping_model2: Optional[WrappingModel] = Field(None, alias="WrappingModel2")
    package_model_list: List[PackageModel] = Field(default_factory=list, alias="PackageModelList")
    coupon_model_list: List[CouponModel] = Field(default_factory=list, alias="CouponModelList")
    change_reason_model_list: List[ChangeReasonModel] = Field(default_factory=list, alias="ChangeReasonModelList")
    tax_summary_model_list: List[TaxSummaryModel] = Field(default_factory=list, alias="TaxSummaryModelList")


class GetOrderResponse(MessageEnvelope):
    """Respuesta de ``getOrder``. Los mensajes llevan ``orderNumber``."""

    order_model_list: List[OrderModel] = Field(default_factory=list, alias="OrderModelList")

    def get_order(self, order_number: str) -> Optional[OrderModel]:
        """Busca un pedido de la respuesta por número."""
        return next((order for order in self.order_model_list if order.order_number == order_number), None)


# =============================================================================
# UPDATE ORDER MEMO / SHIPPING
# =============================================================================


class UpdateOrderMemoRequest(RMSRequestModel):
    """Cuerpo de ``updateOrderMemo``."""

    order_number: str
    sub_status_id: Optional[int] = None
    delivery_class: Optional[int] = None
    delivery_date: Optional[RMSDate] = None
    shipping_term: Optional[int] = None
    memo: Optional[str] = None
    operator: Optional[str] = None
    mail_plug_sentence: Optional[str] = None


class UpdateOrderMemoResponse(MessageEnvelope):
    """Respuesta de ``updateOrderMemo``."""


class ShippingRequestModel(RMSRequestModel):
    """Envío a registrar, actualizar o eliminar."""

    shipping_detail_id: Optional[int] = None
    delivery_company: Optional[str] = None
    shipping_number: Optional[str] = None
    shipping_date: Optional[RMSDate] = None
    shipping_delete_flag: Optional[int] = None


class BasketidModel(RMSRequestModel):
    """Envíos de una canasta."""

    basket_id: int
    shipping_model_list: List[ShippingRequestModel] = Field(default_factory=list, alias="ShippingModelList")


class UpdateOrderShippingRequest(RMSRequestModel):
    """Cuerpo de ``updateOrderShipping``."""

    order_number: str
    basketid_model_list: List[BasketidModel] = Field(default_factory=list, alias="BasketidModelList")


class UpdateOrderShippingResponse(MessageEnvelope):
    """Respuesta de ``updateOrderShipping``."""
