"""
Value objects for the RMS wire formats.
"""

from .rms_datetime import (
    JST,
    RMSDate,
    RMSDateTime,
    decode_compact_date,
    decode_date,
    decode_datetime,
    decode_response_datetime,
    encode_date,
    encode_datetime,
)

__all__ = [
    "JST",
    "RMSDate",
    "RMSDateTime",
    "decode_compact_date",
    "decode_date",
    "decode_datetime",
    "decode_response_datetime",
    "encode_date",
    "encode_datetime",
]
