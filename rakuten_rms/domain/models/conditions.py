"""
Sparse condition objects filled in by the caller.

Every optional field defaults to ``None`` meaning "not set". The normalizers
read these objects to build wire requests and never modify them.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class SearchOrderCondition:
    """
    Optional filters for an order search.

    Attributes:
        sort_direction: 1 ascending (default), 2 descending
        request_records_amount: Page size, 1..1000 (default 30)
        request_page: Page number starting at 1
        order_progress_list: Order status codes (100..900 step 100)
        sub_status_id_list: Shop-defined sub-status IDs
        order_type_list: Sales type codes (1, 4, 5, 6)
        settlement_method: Payment method code
        delivery_name: Delivery method name
        shipping_date_blank_flag: Only orders without a shipping date
        shipping_number_blank_flag: Only orders without a tracking number
        search_keyword_type: Keyword target, 1..6
        search_keyword: Keyword, at most 32 characters
        mail_send_type: 1 PC, 2 mobile
        orderer_mail_address: Exact orderer e-mail address
        phone_number_type: 1 recipient (orderer is the default)
        phone_number: Exact phone number
        reserve_number: Exact reservation number
        purchase_site_type: 1 PC, 2 mobile, 3 smartphone, 4 tablet
        asuraku_flag: Next-day delivery requested
        coupon_use_flag: Coupon used
        drug_flag: Contains pharmaceuticals
        overseas_flag: Overseas cart order
    """

    sort_direction: int | None = None
    request_records_amount: int | None = None
    request_page: int | None = None
    order_progress_list: list[int] | None = None
    sub_status_id_list: list[int] | None = None
    order_type_list: list[int] | None = None
    settlement_method: int | None = None
    delivery_name: str | None = None
    shipping_date_blank_flag: bool | None = None
    shipping_number_blank_flag: bool | None = None
    search_keyword_type: int | None = None
    search_keyword: str | None = None
    mail_send_type: int | None = None
    orderer_mail_address: str | None = None
    phone_number_type: int | None = None
    phone_number: str | None = None
    reserve_number: str | None = None
    purchase_site_type: int | None = None
    asuraku_flag: bool | None = None
    coupon_use_flag: bool | None = None
    drug_flag: bool | None = None
    overseas_flag: bool | None = None


@dataclass
class UpdateOrderMemoCondition:
    """
    Memo and handling fields to update on a single order.

    Attributes:
        order_number: Target order (required)
        sub_status_id: Shop-defined sub-status ID
        delivery_class: 0 none, 1 normal, 2 chilled, 3 frozen, 4-8 other
        delivery_date: Requested delivery date
        shipping_term: Time slot (0, 1, 2, 9 or h1h2)
        memo: Short memo, at most 32 characters; "" clears it
        operator: Staff name, at most 6 characters; "" clears it
        mail_plug_sentence: Message inserted in customer e-mails, at most 1024 characters; "" clears it
    """

    order_number: str
    sub_status_id: int | None = None
    delivery_class: int | None = None
    delivery_date: date | None = None
    shipping_term: int | None = None
    memo: str | None = None
    operator: str | None = None
    mail_plug_sentence: str | None = None

    def __post_init__(self) -> None:
        """Validate the mandatory order number."""
        if not self.order_number:
            raise ValueError("Order number is required")


@dataclass
class ShippingUpdate:
    """
    One shipment line inside a basket.

    Attributes:
        shipping_detail_id: Existing shipment ID (None registers a new one)
        delivery_company: Carrier code, "1000".."1028"
        shipping_number: Tracking number
        shipping_date: Date the package was shipped
        shipping_delete_flag: Delete this shipment line
    """

    shipping_detail_id: int | None = None
    delivery_company: str | None = None
    shipping_number: str | None = None
    shipping_date: date | None = None
    shipping_delete_flag: bool | None = None

    @property
    def is_empty(self) -> bool:
        """True when no field carries data."""
        return all(
            value is None
            for value in (
                self.shipping_detail_id,
                self.delivery_company,
                self.shipping_number,
                self.shipping_date,
                self.shipping_delete_flag,
            )
        )


@dataclass
class BasketUpdate:
    """Shipments to register or update for one basket (package) of an order."""

    basket_id: int
    shipping_list: list[ShippingUpdate] = field(default_factory=list)
