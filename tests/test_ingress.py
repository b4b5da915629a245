"""Tests for ingress parsing: parse_amount, Invoice, RequestContext."""

import pytest

from tollbooth_time.caveat import MalformedAmountError
from tollbooth_time.invoice import Invoice, parse_amount
from tollbooth_time.request import RequestContext


# ---------------------------------------------------------------------------
# parse_amount
# ---------------------------------------------------------------------------


class TestParseAmount:
    def test_int(self) -> None:
        assert parse_amount(1000) == 1000

    def test_numeric_string(self) -> None:
        assert parse_amount("1000") == 1000

    def test_string_with_whitespace(self) -> None:
        assert parse_amount(" 60\n") == 60

    def test_integral_float(self) -> None:
        assert parse_amount(30.0) == 30

    def test_zero(self) -> None:
        assert parse_amount("0") == 0

    @pytest.mark.parametrize(
        "value",
        ["abc", "", "12abc", "1.5", "0x10", "1_000", "+5", "١٢", "- 5", 1.5, float("nan"), float("inf")],
    )
    def test_rejects_non_integers(self, value: object) -> None:
        with pytest.raises(MalformedAmountError):
            parse_amount(value)

    @pytest.mark.parametrize("value", [None, [1], {"amount": 1}, True, False])
    def test_rejects_other_types(self, value: object) -> None:
        with pytest.raises(MalformedAmountError):
            parse_amount(value)

    def test_rejects_negative(self) -> None:
        with pytest.raises(MalformedAmountError, match="non-negative"):
            parse_amount("-5")

    def test_underscore_grouping_not_read_as_thousands(self) -> None:
        with pytest.raises(MalformedAmountError, match="not a base-10 integer"):
            parse_amount("1_000")

    def test_error_mentions_value(self) -> None:
        with pytest.raises(MalformedAmountError, match="'abc'"):
            parse_amount("abc")


# ---------------------------------------------------------------------------
# Invoice
# ---------------------------------------------------------------------------


class TestInvoice:
    def test_from_dict_string_amount(self) -> None:
        invoice = Invoice.from_dict({"amount": "250", "id": "inv-1", "paymentRequest": "lnbc..."})
        assert invoice.amount == 250
        assert invoice.invoice_id == "inv-1"
        assert invoice.payment_request == "lnbc..."

    def test_from_dict_snake_case_payment_request(self) -> None:
        invoice = Invoice.from_dict({"amount": 5, "payment_request": "lnbc1"})
        assert invoice.payment_request == "lnbc1"

    def test_from_dict_missing_amount(self) -> None:
        with pytest.raises(MalformedAmountError, match="no amount"):
            Invoice.from_dict({"id": "inv-1"})

    def test_from_dict_malformed_amount(self) -> None:
        with pytest.raises(MalformedAmountError):
            Invoice.from_dict({"amount": "abc"})


# ---------------------------------------------------------------------------
# RequestContext
# ---------------------------------------------------------------------------


class TestRequestContext:
    def test_defaults(self) -> None:
        ctx = RequestContext()
        assert ctx.method == "GET"
        assert ctx.original_url == "/"
        assert ctx.rate is None
        assert ctx.time is None

    def test_from_dict(self) -> None:
        ctx = RequestContext.from_dict(
            {"time": "60", "title": "report", "appName": "acme", "amount": 30},
            method="POST",
            original_url="/api/report",
            ip="10.0.0.1",
            rate=2,
        )
        assert ctx == RequestContext(
            method="POST",
            original_url="/api/report",
            ip="10.0.0.1",
            rate=2,
            time=60,
            title="report",
            app_name="acme",
            amount=30,
        )

    def test_from_dict_snake_case_app_name(self) -> None:
        assert RequestContext.from_dict({"app_name": "acme"}).app_name == "acme"

    def test_empty_strings_are_absent(self) -> None:
        ctx = RequestContext.from_dict({"title": "", "appName": ""})
        assert ctx.title is None
        assert ctx.app_name is None

    def test_missing_optional_fields(self) -> None:
        ctx = RequestContext.from_dict({})
        assert ctx.amount is None
        assert ctx.time is None

    def test_malformed_amount_fails_at_ingress(self) -> None:
        with pytest.raises(MalformedAmountError):
            RequestContext.from_dict({"amount": "abc"})

    def test_malformed_time_fails_at_ingress(self) -> None:
        with pytest.raises(MalformedAmountError):
            RequestContext.from_dict({"time": "soon"})
