"""
Tests für die Validierung der Rohdaten.

Testet:
- Telefonnummer, Datum, Uhrzeit, Personenanzahl, Reservierungs-ID
- Zahleneingaben im Menü
- Vergleich gegen den Referenzzeitpunkt
"""
import pytest

from tischreservierung.utils.validation import (
    format_reservation_id,
    parse_numeric_input,
    validate_date,
    validate_party_size,
    validate_phone_number,
    validate_reservation_id,
    validate_time,
)


class TestPhoneNumber:

    def test_valid(self):
        assert validate_phone_number("123-456-7890")

    @pytest.mark.parametrize("phone", [
        "1234567890",
        "123 456 7890",
        "+1-123-456-7890",
        "123-456-789",
        "123-456-78901",
        "abc-def-ghij",
        "",
        "123-456-7890 ",
    ])
    def test_invalid(self, phone):
        assert not validate_phone_number(phone)

    def test_non_ascii_digits_rejected(self):
        """Arabisch-indische Ziffern sind keine gültigen Ziffern"""
        assert not validate_phone_number("١٢٣-٤٥٦-٧٨٩٠")


class TestDate:

    def test_reference_day_is_valid(self, reference):
        assert validate_date("2025-05-19", reference)

    def test_future_date_is_valid(self, reference):
        assert validate_date("2026-01-01", reference)

    def test_past_date_is_rejected(self, reference):
        assert not validate_date("2025-05-18", reference)

    @pytest.mark.parametrize("date", ["2025-13-01", "2025-00-10", "2025-06-00", "2025-06-32"])
    def test_month_and_day_bounds(self, reference, date):
        assert not validate_date(date, reference)

    @pytest.mark.parametrize("date", ["2025-6-1", "25-06-01", "2025/06/01", "2025-06-01x", ""])
    def test_bad_format(self, reference, date):
        assert not validate_date(date, reference)

    def test_no_calendar_check(self, reference):
        """Monatslängen und Schaltjahre werden bewusst nicht geprüft"""
        assert validate_date("2026-02-30", reference)
        assert validate_date("2025-06-31", reference)
        assert validate_date("2026-02-29", reference)


class TestTime:

    def test_valid_on_other_day(self, reference):
        assert validate_time("08:00", "2025-05-20", reference)

    def test_later_on_reference_day(self, reference):
        assert validate_time("22:20", "2025-05-19", reference)
        assert validate_time("23:00", "2025-05-19", reference)

    def test_reference_time_itself_is_rejected(self, reference):
        assert not validate_time("22:19", "2025-05-19", reference)

    def test_earlier_on_reference_day_is_rejected(self, reference):
        assert not validate_time("22:18", "2025-05-19", reference)
        assert not validate_time("21:59", "2025-05-19", reference)

    @pytest.mark.parametrize("time", ["24:00", "12:60", "7:30", "07:5", "0730", "07:30:00", ""])
    def test_bad_format_or_range(self, reference, time):
        assert not validate_time(time, "2025-06-01", reference)

    def test_bounds(self, reference):
        assert validate_time("00:00", "2025-06-01", reference)
        assert validate_time("23:59", "2025-06-01", reference)


class TestPartySize:

    def test_valid(self):
        assert validate_party_size(1)
        assert validate_party_size(12)

    def test_invalid(self):
        assert not validate_party_size(0)
        assert not validate_party_size(-2)

    def test_non_int_rejected(self):
        assert not validate_party_size(True)
        assert not validate_party_size("2")


class TestReservationId:

    @pytest.mark.parametrize("reservation_id", ["ID 1A", "ID 12A", "ID 007A"])
    def test_valid(self, reservation_id):
        assert validate_reservation_id(reservation_id)

    @pytest.mark.parametrize("reservation_id", ["ID1A", "ID 1", "ID A", "id 1A", "ID 1a", "ID 1A ", "0", ""])
    def test_invalid(self, reservation_id):
        assert not validate_reservation_id(reservation_id)

    def test_generated_ids_are_valid(self):
        for counter in (1, 9, 10, 12345):
            assert validate_reservation_id(format_reservation_id(counter))


class TestNumericInput:

    def test_in_range(self):
        assert parse_numeric_input("1", 1, 6) == 1
        assert parse_numeric_input("6", 1, 6) == 6

    def test_out_of_range(self):
        assert parse_numeric_input("0", 1, 6) is None
        assert parse_numeric_input("7", 1, 6) is None

    @pytest.mark.parametrize("text", ["1a", "1.1", "1 1", "", " 1", "-1", "+1", "²"])
    def test_garbage_rejected(self, text):
        assert parse_numeric_input(text, 0, 10) is None

    def test_open_upper_bound(self):
        assert parse_numeric_input("250", 1) == 250
