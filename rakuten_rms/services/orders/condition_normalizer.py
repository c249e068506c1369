"""
Normalizes sparse search conditions into a valid ``searchOrder`` request.

Invalid optional values never raise: they are left out of the request and
recorded in the result ledger as ``DROPPED_INVALID``.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic.alias_generators import to_camel

from rakuten_rms.domain.models.codes import (
    DEFAULT_REQUEST_PAGE,
    DEFAULT_REQUEST_RECORDS_AMOUNT,
    MAIL_SEND_TYPE_CODES,
    MAX_REQUEST_RECORDS_AMOUNT,
    MAX_SEARCH_KEYWORD_LENGTH,
    ORDER_PROGRESS_CODES,
    ORDER_TYPE_CODES,
    PHONE_NUMBER_TYPE_CODES,
    PHONE_NUMBER_TYPE_ORDERER,
    PURCHASE_SITE_TYPE_CODES,
    SEARCH_KEYWORD_TYPE_CODES,
    SETTLEMENT_METHOD_CODES,
    SORT_COLUMN_ORDER_DATETIME,
    SearchOrderDateType,
    SortDirection,
)
from rakuten_rms.domain.models.conditions import SearchOrderCondition
from rakuten_rms.schemas.order_schemas import PaginationRequestModel, SearchOrderRequest, SortModel

logger = logging.getLogger(__name__)


class FieldOutcome(str, Enum):
    """What happened to one optional field during normalization."""

    APPLIED = "applied"
    DEFAULTED = "defaulted"
    OMITTED_UNSET = "omitted_unset"
    DROPPED_INVALID = "dropped_invalid"


@dataclass
class NormalizationResult:
    """
    Wire request plus a per-field ledger keyed by wire field name.

    Attributes:
        request: The request body to send
        outcomes: ``FieldOutcome`` for every optional field considered
    """

    request: Any
    outcomes: dict[str, FieldOutcome] = field(default_factory=dict)

    def outcome(self, wire_name: str) -> FieldOutcome | None:
        """Outcome recorded for ``wire_name`` (None if never considered)."""
        return self.outcomes.get(wire_name)

    def fields_with(self, outcome: FieldOutcome) -> list[str]:
        """Wire names whose outcome is ``outcome``, in evaluation order."""
        return [name for name, value in self.outcomes.items() if value is outcome]

    @property
    def applied_fields(self) -> list[str]:
        return self.fields_with(FieldOutcome.APPLIED)

    @property
    def dropped_fields(self) -> list[str]:
        return self.fields_with(FieldOutcome.DROPPED_INVALID)


class FieldCollector:
    """
    Accumulates request values and their outcomes.

    Shared by the search and update normalizers; ``values`` is keyed by the
    Python field name, ``outcomes`` by the wire name.
    """

    def __init__(self, context: str):
        self.context = context
        self.values: dict[str, Any] = {}
        self.outcomes: dict[str, FieldOutcome] = {}

    def apply(self, name: str, value: Any) -> None:
        self.values[name] = value
        self.outcomes[to_camel(name)] = FieldOutcome.APPLIED

    def default(self, name: str, value: Any) -> None:
        self.values[name] = value
        self.outcomes[to_camel(name)] = FieldOutcome.DEFAULTED

    def unset(self, name: str) -> None:
        self.values.pop(name, None)
        self.outcomes[to_camel(name)] = FieldOutcome.OMITTED_UNSET

    def drop(self, name: str, value: Any, reason: str) -> None:
        self.values.pop(name, None)
        self.outcomes[to_camel(name)] = FieldOutcome.DROPPED_INVALID
        logger.debug(f"{self.context}: dropping {to_camel(name)}={value!r} ({reason})")

    def is_applied(self, name: str) -> bool:
        return self.outcomes.get(to_camel(name)) is FieldOutcome.APPLIED

    # --- shared rules ---

    def code(self, name: str, value: int | None, allowed: frozenset, server_default: int | None = None) -> None:
        """Apply ``value`` if it belongs to ``allowed``; the server default counts as unset."""
        if value is None or value == server_default:
            self.unset(name)
        elif value in allowed:
            self.apply(name, value)
        else:
            self.drop(name, value, f"not one of {sorted(allowed)}")

    def text(self, name: str, value: str | None, max_length: int | None = None, allow_empty: bool = False) -> None:
        """Apply a string, optionally bounded in length; ``""`` counts as unset unless ``allow_empty``."""
        if value is None or (value == "" and not allow_empty):
            self.unset(name)
        elif max_length is not None and len(value) > max_length:
            self.drop(name, value, f"longer than {max_length} characters")
        else:
            self.apply(name, value)

    def flag(self, name: str, value: bool | None) -> None:
        """RMS flags are sent as ``1`` when set and omitted otherwise."""
        if value:
            self.apply(name, 1)
        else:
            self.unset(name)

    def code_list(self, name: str, values: list[int] | None, allowed: frozenset | None = None) -> None:
        """Apply a list, keeping only members of ``allowed`` when given."""
        if not values:
            self.unset(name)
            return
        if allowed is None:
            self.apply(name, list(values))
            return

        kept = [value for value in values if value in allowed]
        rejected = [value for value in values if value not in allowed]
        if rejected:
            logger.debug(f"{self.context}: removing {rejected} from {to_camel(name)}")
        if kept:
            self.apply(name, kept)
        else:
            self.drop(name, values, f"no entry in {sorted(allowed)}")


class SearchOrderConditionNormalizer:
    """
    Builds ``SearchOrderRequest`` bodies from a date window and an optional
    ``SearchOrderCondition``.
    """

    def normalize(
        self,
        date_type: SearchOrderDateType | int,
        start_datetime: datetime,
        end_datetime: datetime,
        condition: SearchOrderCondition | None = None,
    ) -> NormalizationResult:
        """
        Normalize a search.

        Args:
            date_type: Which order timestamp the window applies to
            start_datetime: Window start (local JST wall clock)
            end_datetime: Window end (local JST wall clock)
            condition: Optional filters; never modified

        Returns:
            NormalizationResult: Request body and field ledger
        """
        condition = condition or SearchOrderCondition()
        fields = FieldCollector("searchOrder")

        pagination = self._normalize_pagination(condition, fields)

        fields.code_list("order_progress_list", condition.order_progress_list, ORDER_PROGRESS_CODES)
        fields.code_list("sub_status_id_list", condition.sub_status_id_list)
        fields.code_list("order_type_list", condition.order_type_list, ORDER_TYPE_CODES)
        fields.code("settlement_method", condition.settlement_method, SETTLEMENT_METHOD_CODES)
        fields.text("delivery_name", condition.delivery_name)
        fields.flag("shipping_date_blank_flag", condition.shipping_date_blank_flag)
        fields.flag("shipping_number_blank_flag", condition.shipping_number_blank_flag)

        self._normalize_keyword(condition, fields)

        fields.code("mail_send_type", condition.mail_send_type, MAIL_SEND_TYPE_CODES, server_default=0)
        fields.text("orderer_mail_address", condition.orderer_mail_address)

        self._normalize_phone(condition, fields)

        fields.text("reserve_number", condition.reserve_number)
        fields.code("purchase_site_type", condition.purchase_site_type, PURCHASE_SITE_TYPE_CODES, server_default=0)
        fields.flag("asuraku_flag", condition.asuraku_flag)
        fields.flag("coupon_use_flag", condition.coupon_use_flag)
        fields.flag("drug_flag", condition.drug_flag)
        fields.flag("overseas_flag", condition.overseas_flag)

        request = SearchOrderRequest(
            date_type=int(date_type),
            start_datetime=start_datetime,
            end_datetime=end_datetime,
            pagination_request_model=pagination,
            **fields.values,
        )

        dropped = [name for name, outcome in fields.outcomes.items() if outcome is FieldOutcome.DROPPED_INVALID]
        if dropped:
            logger.debug(f"searchOrder: {len(dropped)} optional field(s) dropped: {dropped}")

        return NormalizationResult(request=request, outcomes=fields.outcomes)

    def _normalize_pagination(self, condition: SearchOrderCondition, fields: FieldCollector) -> PaginationRequestModel:
        amount = condition.request_records_amount
        if amount is None:
            fields.default("request_records_amount", DEFAULT_REQUEST_RECORDS_AMOUNT)
        elif 1 <= amount <= MAX_REQUEST_RECORDS_AMOUNT:
            fields.apply("request_records_amount", amount)
        else:
            fields.drop("request_records_amount", amount, f"outside 1..{MAX_REQUEST_RECORDS_AMOUNT}")

        page = condition.request_page
        if page is None:
            fields.default("request_page", DEFAULT_REQUEST_PAGE)
        elif page > 0:
            fields.apply("request_page", page)
        else:
            fields.drop("request_page", page, "must be positive")

        direction = condition.sort_direction
        if direction is None or direction == SortDirection.ASCENDING:
            fields.unset("sort_direction")
        elif direction == SortDirection.DESCENDING:
            fields.apply("sort_direction", int(direction))
        else:
            fields.drop("sort_direction", direction, "must be 1 or 2")

        # Pagination values live in a nested model, not in the top-level body
        sort_direction = fields.values.pop("sort_direction", None)
        return PaginationRequestModel(
            request_records_amount=fields.values.pop("request_records_amount", DEFAULT_REQUEST_RECORDS_AMOUNT),
            request_page=fields.values.pop("request_page", DEFAULT_REQUEST_PAGE),
            sort_model_list=(
                [SortModel(sort_column=SORT_COLUMN_ORDER_DATETIME, sort_direction=sort_direction)]
                if sort_direction is not None
                else None
            ),
        )

    def _normalize_keyword(self, condition: SearchOrderCondition, fields: FieldCollector) -> None:
        keyword_type = condition.search_keyword_type
        keyword = condition.search_keyword

        if keyword_type is None or keyword_type == 0:
            fields.unset("search_keyword_type")
            if keyword:
                fields.drop("search_keyword", keyword, "searchKeywordType not set")
            else:
                fields.unset("search_keyword")
            return

        if keyword_type not in SEARCH_KEYWORD_TYPE_CODES:
            fields.drop("search_keyword_type", keyword_type, "outside 1..6")
            if keyword:
                fields.drop("search_keyword", keyword, "searchKeywordType dropped")
            else:
                fields.unset("search_keyword")
            return

        keyword = keyword or ""
        if len(keyword) > MAX_SEARCH_KEYWORD_LENGTH:
            fields.drop("search_keyword_type", keyword_type, "searchKeyword too long")
            fields.drop("search_keyword", keyword, f"longer than {MAX_SEARCH_KEYWORD_LENGTH} characters")
            return

        fields.apply("search_keyword_type", keyword_type)
        fields.apply("search_keyword", keyword)

    def _normalize_phone(self, condition: SearchOrderCondition, fields: FieldCollector) -> None:
        fields.code("phone_number_type", condition.phone_number_type, PHONE_NUMBER_TYPE_CODES, server_default=0)
        fields.text("phone_number", condition.phone_number)

        # A phone number always travels with its type; orderer is the default
        if fields.is_applied("phone_number") and not fields.is_applied("phone_number_type"):
            fields.default("phone_number_type", PHONE_NUMBER_TYPE_ORDERER)


def normalize_search_condition(
    date_type: SearchOrderDateType | int,
    start_datetime: datetime,
    end_datetime: datetime,
    condition: SearchOrderCondition | None = None,
) -> NormalizationResult:
    """Shortcut for ``SearchOrderConditionNormalizer().normalize(...)``."""
    return SearchOrderConditionNormalizer().normalize(date_type, start_datetime, end_datetime, condition)
