"""
Code sets accepted by the RMS order API.

Each frozenset lists the values RMS documents for a field; anything outside
the set is discarded by the normalizers instead of being sent.
"""

from enum import IntEnum


class SearchOrderDateType(IntEnum):
    """Which order timestamp the search window applies to."""

    ORDER_DATE = 1
    ORDER_CONFIRM_DATE = 2
    ORDER_FIX_DATE = 3
    SHIPPING_DATE = 4
    SHIPPING_COMPLETE_REPORT_DATE = 5
    PAYMENT_FIX_DATE = 6


class SortDirection(IntEnum):
    """Sort order for search results (sorted by order datetime)."""

    ASCENDING = 1
    DESCENDING = 2


# Only sortable column: order datetime
SORT_COLUMN_ORDER_DATETIME = 1

DEFAULT_REQUEST_RECORDS_AMOUNT = 30
MAX_REQUEST_RECORDS_AMOUNT = 1000
DEFAULT_REQUEST_PAGE = 1

# 100: pending confirmation ... 900: cancellation fixed
ORDER_PROGRESS_CODES = frozenset(range(100, 1000, 100))

# 1: normal, 4: subscription, 5: distribution, 6: reservation
ORDER_TYPE_CODES = frozenset({1, 4, 5, 6})

SETTLEMENT_METHOD_CODES = frozenset({1, 2, 3, 4, 5, 6, 7, 9, 12, 13, 14, 16, 17, 21})

# 1: item name ... 6: recipient name
SEARCH_KEYWORD_TYPE_CODES = frozenset(range(1, 7))
MAX_SEARCH_KEYWORD_LENGTH = 32

# 0 (PC/mobile) is the server default and is never sent
MAIL_SEND_TYPE_CODES = frozenset({1, 2})

# 0 (orderer) is the server default; 1 is the recipient
PHONE_NUMBER_TYPE_CODES = frozenset({1})
PHONE_NUMBER_TYPE_ORDERER = 0

# 0 (all sites) is the server default
PURCHASE_SITE_TYPE_CODES = frozenset({1, 2, 3, 4})

# 0: none, 1: normal, 2: chilled, 3: frozen, 4-8: other 1-5
DELIVERY_CLASS_CODES = frozenset(range(0, 9))

# 0: none, 1: morning, 2: afternoon, 9: other; hour ranges are encoded as h1h2
SHIPPING_TERM_FIXED_CODES = frozenset({0, 1, 2, 9})
SHIPPING_TERM_MIN_HOUR = 7
SHIPPING_TERM_MAX_HOUR = 24

MAX_MEMO_LENGTH = 32
MAX_OPERATOR_LENGTH = 6
MAX_MAIL_PLUG_SENTENCE_LENGTH = 1024

MAX_ORDER_NUMBERS_PER_GET = 100
GET_ORDER_VERSIONS = frozenset({1, 2, 3, 4})

# 1000: other, 1001: Yamato ... 1028: Rakuten EXPRESS
DELIVERY_COMPANY_CODES = frozenset(str(code) for code in range(1000, 1029))

MIN_CALENDAR_PERIOD = 1
MAX_CALENDAR_PERIOD = 180


def is_valid_shipping_term(value: int) -> bool:
    """
    Check a delivery time-slot code.

    Besides the fixed codes, RMS accepts a four-digit ``h1h2`` value meaning
    "from h1 to h2 o'clock" (e.g. ``1012``), with both hours in 7..24.
    """
    if value in SHIPPING_TERM_FIXED_CODES:
        return True
    if not 700 <= value <= 2424:
        return False
    start_hour, end_hour = divmod(value, 100)
    return all(SHIPPING_TERM_MIN_HOUR <= hour <= SHIPPING_TERM_MAX_HOUR for hour in (start_hour, end_hour))
