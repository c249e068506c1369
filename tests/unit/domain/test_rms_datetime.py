"""Tests unitarios para los codecs de fecha/hora de RMS."""

from datetime import UTC, date, datetime, timedelta

import pytest
from pydantic import ValidationError

from rakuten_rms.domain.value_objects.rms_datetime import (
    JST,
    decode_compact_date,
    decode_date,
    decode_datetime,
    decode_response_datetime,
    encode_date,
    encode_datetime,
    is_valid_date_string,
)
from rakuten_rms.schemas.order_schemas import ChangeReasonModel, SearchOrderRequest, ShippingModel
from rakuten_rms.utils.error_handler import ErrorCode, FormatException


class TestEncodeDatetime:
    """Tests para encode_datetime."""

    def test_naive_datetime(self):
        """Debe emitir la hora local seguida del sufijo literal +0900."""
        assert encode_datetime(datetime(2020, 5, 15, 10, 30)) == "2020-05-15T10:30:00+0900"

    def test_aware_datetime_is_not_converted(self):
        """No debe convertir zonas: un datetime UTC conserva sus campos."""
        value = datetime(2020, 5, 15, 1, 0, 0, tzinfo=UTC)

        assert encode_datetime(value) == "2020-05-15T01:00:00+0900"

    def test_microseconds_are_truncated(self):
        """La precisión del formato es de segundos."""
        assert encode_datetime(datetime(2020, 5, 15, 10, 30, 5, 999999)) == "2020-05-15T10:30:05+0900"


class TestDecodeDatetime:
    """Tests para decode_datetime."""

    def test_valid_string(self):
        """Debe retornar un datetime con zona fija +09:00."""
        result = decode_datetime("2020-05-15T10:30:00+0900")

        assert result == datetime(2020, 5, 15, 10, 30, tzinfo=JST)
        assert result.utcoffset() == timedelta(hours=9)

    def test_round_trip_preserves_wall_clock(self):
        """encode -> decode debe reproducir el mismo instante en +09:00."""
        original = datetime(2021, 12, 31, 23, 59, 59)

        decoded = decode_datetime(encode_datetime(original))

        assert decoded.replace(tzinfo=None) == original

    @pytest.mark.parametrize("year", [1, 999, 1000, 9999])
    def test_round_trip_with_four_digit_years(self, year):
        """El año siempre se emite con cuatro dígitos."""
        original = datetime(year, 1, 2, 3, 4, 5)

        encoded = encode_datetime(original)

        assert encoded == f"{year:04d}-01-02T03:04:05+0900"
        assert decode_datetime(encoded) == original.replace(tzinfo=JST)

    @pytest.mark.parametrize(
        "value",
        [
            "2020-05-15T10:30:00+09:00",
            "2020-05-15T10:30:00Z",
            "2020-05-15T10:30:00+0000",
            "2020-05-15 10:30:00+0900",
            "2020-05-15T10:30+0900",
            "2020-13-01T00:00:00+0900",
            "",
        ],
    )
    def test_invalid_strings_raise_format_exception(self, value):
        """Cualquier cadena fuera del formato exacto debe fallar."""
        with pytest.raises(FormatException) as exc_info:
            decode_datetime(value)

        assert exc_info.value.error_code == ErrorCode.INVALID_DATE_FORMAT
        assert exc_info.value.expected_format == "YYYY-MM-DDThh:mm:ss+0900"

    def test_response_decoder_accepts_colon_offset(self):
        """El decodificador de respuestas acepta también +09:00."""
        assert decode_response_datetime("2020-05-15T10:30:00+09:00") == datetime(2020, 5, 15, 10, 30, tzinfo=JST)
        assert decode_response_datetime("2020-05-15T10:30:00+0900") == datetime(2020, 5, 15, 10, 30, tzinfo=JST)

    @pytest.mark.parametrize(
        "value",
        ["2020-05-15T01:30:00Z", "2020-05-15T01:30:00+00:00", "2020-05-14T20:30:00-0500", "2020-05-15T11:30:00+10:00"],
    )
    def test_response_decoder_converts_other_offsets_to_jst(self, value):
        """Z y otros offsets numéricos se convierten al mismo instante en JST."""
        result = decode_response_datetime(value)

        assert result == datetime(2020, 5, 15, 10, 30, tzinfo=JST)
        assert result.utcoffset() == timedelta(hours=9)

    @pytest.mark.parametrize("value", ["2020-05-15T10:30:00+24:00", "2020-05-15T10:30:00", "2020-05-15T10:30:00+9"])
    def test_response_decoder_rejects_malformed_offsets(self, value):
        with pytest.raises(FormatException):
            decode_response_datetime(value)


class TestDates:
    """Tests para los formatos de fecha."""

    def test_encode_date(self):
        assert encode_date(date(2020, 5, 1)) == "2020-05-01"

    def test_encode_date_discards_time(self):
        assert encode_date(datetime(2020, 5, 1, 23, 59)) == "2020-05-01"

    @pytest.mark.parametrize("year", [1, 999, 9999])
    def test_date_round_trip_with_four_digit_years(self, year):
        value = date(year, 12, 31)

        assert encode_date(value) == f"{year:04d}-12-31"
        assert decode_date(encode_date(value)) == value

    def test_decode_date(self):
        assert decode_date("2020-05-15") == date(2020, 5, 15)

    @pytest.mark.parametrize("value", ["2020/05/15", "2020-5-15", "2020-02-30", "20200515"])
    def test_decode_date_invalid(self, value):
        with pytest.raises(FormatException) as exc_info:
            decode_date(value)

        assert exc_info.value.field == "date"

    def test_decode_compact_date(self):
        """El calendario usa YYYYMMDD sin separadores."""
        assert decode_compact_date("20200515") == date(2020, 5, 15)

    @pytest.mark.parametrize("value", ["2020-05-15", "20201301", "2020051", "abcdefgh"])
    def test_decode_compact_date_invalid(self, value):
        with pytest.raises(FormatException):
            decode_compact_date(value)

    def test_is_valid_date_string(self):
        assert is_valid_date_string("2020-05-15") is True
        assert is_valid_date_string("2020-05-32") is False


class TestPydanticFieldTypes:
    """Tests para RMSDateTime / RMSDate dentro de los modelos."""

    def test_response_datetime_with_colon_offset(self):
        """Los registros de pedido traen +09:00."""
        model = ChangeReasonModel.model_validate({"changeApplyDatetime": "2020-05-15T10:30:00+09:00"})

        assert model.change_apply_datetime == datetime(2020, 5, 15, 10, 30, tzinfo=JST)

    def test_response_datetime_invalid_raises_validation_error(self):
        with pytest.raises(ValidationError):
            ChangeReasonModel.model_validate({"changeApplyDatetime": "15/05/2020"})

    def test_null_datetime_stays_none(self):
        model = ChangeReasonModel.model_validate({"changeFixDatetime": None})

        assert model.change_fix_datetime is None

    def test_response_date(self):
        model = ShippingModel.model_validate({"shippingDate": "2020-05-15"})

        assert model.shipping_date == date(2020, 5, 15)

    def test_request_serializes_with_literal_suffix(self):
        """La serialización siempre usa el formato estricto +0900."""
        request = SearchOrderRequest(
            date_type=1,
            start_datetime=datetime(2020, 5, 1, 0, 0, 0),
            end_datetime=datetime(2020, 5, 15, 23, 59, 59, tzinfo=JST),
        )

        wire = request.to_wire()

        assert wire["startDatetime"] == "2020-05-01T00:00:00+0900"
        assert wire["endDatetime"] == "2020-05-15T23:59:59+0900"
