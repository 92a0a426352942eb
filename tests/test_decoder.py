import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from mollie_api.contracts import (
    PAYMENT_RESPONSE_VARIANTS,
    CreditCardPaymentResponse,
    IdealPaymentResponse,
    IssuerResponse,
    PaymentMethod,
    PaymentMethodResponse,
    PaymentResponse,
    PaymentStatus,
    RefundResponse,
)
from mollie_api.decoder import decode, decode_list, decode_payment, payment_from_dict
from mollie_api.errors import DecodeError, ErrorKind
from mollie_api.result import Err, Ok

# wire details, attribute to check, expected value
DETAIL_SAMPLES = {
    PaymentMethod.BANCONTACT: ({"cardNumber": "6787", "cardHolder": "J. Visser"}, "card_number", "6787"),
    PaymentMethod.BANK_TRANSFER: (
        {"bankName": "Stichting Mollie Payments", "bankAccount": "NL53ABNA0627535577", "bankBic": "ABNANL2A"},
        "bank_account",
        "NL53ABNA0627535577",
    ),
    PaymentMethod.BELFIUS: ({"consumerAccount": "BE34068979838090", "consumerBic": "GKCCBEBB"}, "consumer_bic", "GKCCBEBB"),
    PaymentMethod.BITCOIN: (
        {"bitcoinAddress": "1MkaLpsJGRFrwFbiYWZUmfdaFSAvnTAUHq", "bitcoinAmount": "0.00270000"},
        "bitcoin_amount",
        Decimal("0.00270000"),
    ),
    PaymentMethod.CREDIT_CARD: ({"cardHolder": "T. Ester", "cardNumber": "6787", "cardAudience": "consumer"}, "card_number", "6787"),
    PaymentMethod.DIRECT_DEBIT: (
        {"creditorIdentifier": "NL08ZZZ502057730000", "consumerAccount": "NL55INGB0000000000"},
        "creditor_identifier",
        "NL08ZZZ502057730000",
    ),
    PaymentMethod.GIFTCARD: ({"voucherNumber": "603613", "issuer": "nationalebioscoopbon"}, "issuer", "nationalebioscoopbon"),
    PaymentMethod.IDEAL: (
        {"consumerName": "T. TEST", "consumerAccount": "NL17RABO0213698412", "consumerBic": "TESTNL99"},
        "consumer_account",
        "NL17RABO0213698412",
    ),
    PaymentMethod.KBC: ({"consumerAccount": "BE68539007547034", "consumerBic": "KREDBEBB"}, "consumer_bic", "KREDBEBB"),
    PaymentMethod.PAYPAL: ({"consumerAccount": "buyer@example.org", "paypalReference": "9AL35361CF606152E"}, "paypal_reference", "9AL35361CF606152E"),
    PaymentMethod.PAYSAFECARD: ({"customerReference": "cust_8841"}, "customer_reference", "cust_8841"),
    PaymentMethod.SOFORT: ({"consumerAccount": "DE44500105175407324931", "consumerBic": "SOFODEMMXXX"}, "consumer_bic", "SOFODEMMXXX"),
}

# keys belonging to other variants, snake_case name -> wire name
FOREIGN_FIELDS = {
    "card_number": "cardNumber",
    "bank_account": "bankAccount",
    "paypal_reference": "paypalReference",
    "voucher_number": "voucherNumber",
    "bitcoin_address": "bitcoinAddress",
    "customer_reference": "customerReference",
    "creditor_identifier": "creditorIdentifier",
}


def test_every_payment_method_is_bound_to_exactly_one_variant():
    assert set(PAYMENT_RESPONSE_VARIANTS) == set(PaymentMethod)
    assert len(set(PAYMENT_RESPONSE_VARIANTS.values())) == len(PaymentMethod)
    for method, variant in PAYMENT_RESPONSE_VARIANTS.items():
        assert variant.bound_method is method


def test_variant_table_is_read_only():
    with pytest.raises(TypeError):
        PAYMENT_RESPONSE_VARIANTS[PaymentMethod.IDEAL] = CreditCardPaymentResponse  # type: ignore[index]


@pytest.mark.parametrize("method", list(PaymentMethod))
def test_decode_payment_selects_variant_and_keeps_details_separate(method, payment_payload):
    wire_details, attribute, expected = DETAIL_SAMPLES[method]
    foreign = {wire: "leaked" for wire in FOREIGN_FIELDS.values()}
    body = json.dumps(payment_payload(method.value, details={**foreign, **wire_details}))

    result = decode_payment(body)

    assert isinstance(result, Ok)
    payment = result.value
    assert isinstance(payment, PaymentResponse)
    assert type(payment) is PAYMENT_RESPONSE_VARIANTS[method]
    assert payment.method is method
    assert getattr(payment.details, attribute) == expected
    declared = type(payment.details).model_fields
    for name in FOREIGN_FIELDS:
        if name not in declared:
            assert not hasattr(payment.details, name)


@pytest.mark.parametrize("method", list(PaymentMethod))
def test_minimal_payment_leaves_absent_fields_unset(method):
    result = decode_payment(json.dumps({"id": "tr_1", "method": method.value}))

    payment = result.unwrap()
    assert payment.method is method
    assert payment.details is None
    assert payment.amount is None
    assert payment.status is None
    assert payment.resource is None


def test_decode_payment_populates_common_fields(payment_payload):
    payment = decode_payment(json.dumps(payment_payload("creditcard"))).unwrap()

    assert payment.id == "tr_WDqYK6vllg"
    assert payment.status is PaymentStatus.PAID
    assert payment.amount == Decimal("35.07")
    assert payment.description == "Order 33"
    assert payment.metadata == {"order_id": "33"}
    assert payment.profile_id == "pfl_QkEhN94Ba"
    assert payment.created_datetime.year == 2018
    assert payment.links.payment_url.endswith("/WDqYK6vllg")


def test_null_maps_to_absent_and_zero_stays_zero(payment_payload):
    nulled = decode_payment(json.dumps(payment_payload(amountRefunded=None, description=None))).unwrap()
    zero = decode_payment(json.dumps(payment_payload(amountRefunded="0.00", description=""))).unwrap()

    assert nulled.amount_refunded is None
    assert nulled.description is None
    assert zero.amount_refunded == Decimal("0.00")
    assert zero.description == ""


def test_nulls_inside_metadata_are_kept():
    body = json.dumps({"id": "tr_1", "method": "ideal", "description": None, "metadata": {"order": None, "ref": "x"}})

    payment = decode_payment(body).unwrap()

    assert payment.description is None
    assert payment.metadata == {"order": None, "ref": "x"}


def test_nested_model_nulls_map_to_absent(payment_payload):
    payment = decode_payment(
        json.dumps(payment_payload("creditcard", details={"cardNumber": "6787", "cardHolder": None}))
    ).unwrap()

    assert payment.details.card_number == "6787"
    assert payment.details.card_holder is None


def test_null_list_data_is_an_empty_page():
    page = decode_list(json.dumps({"totalCount": 0, "data": None}), IssuerResponse).unwrap()

    assert page.total_count == 0
    assert page.data == []


def test_unknown_method_is_a_decode_error(payment_payload):
    result = decode_payment(json.dumps(payment_payload("cheque")))

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE
    assert "cheque" in result.error.message


@pytest.mark.parametrize("method_value", ["absent", None])
def test_missing_method_is_a_decode_error(method_value, payment_payload):
    payload = payment_payload()
    if method_value == "absent":
        del payload["method"]
    else:
        payload["method"] = method_value

    result = decode_payment(json.dumps(payload))

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE
    with pytest.raises(DecodeError):
        result.unwrap()


@pytest.mark.parametrize("body", ["", "{not json", "[1, 2]", '"payment"'])
def test_malformed_body_is_a_decode_error(body):
    result = decode_payment(body)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE
    assert result.error.body == body


def test_details_with_wrong_shape_is_a_decode_error(payment_payload):
    result = decode_payment(json.dumps(payment_payload("ideal", details="NL17RABO0213698412")))

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE


def test_missing_identifier_is_a_decode_error():
    result = decode_payment(json.dumps({"method": "ideal", "amount": "10.00"}))

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE


def test_variant_refuses_a_different_method(payment_payload):
    with pytest.raises(ValidationError):
        IdealPaymentResponse.model_validate(payment_payload("creditcard"))


def test_decoded_payment_is_immutable(payment_payload):
    payment = decode_payment(json.dumps(payment_payload())).unwrap()

    with pytest.raises(ValidationError):
        payment.description = "changed"


def test_decode_list_keeps_order_and_variants(payment_payload):
    body = json.dumps(
        {
            "totalCount": 3,
            "offset": 0,
            "count": 3,
            "data": [
                payment_payload("ideal", id="tr_1"),
                payment_payload("creditcard", id="tr_2"),
                payment_payload("banktransfer", id="tr_3"),
            ],
            "links": {"first": "https://api.mollie.nl/v1/payments?count=3&offset=0", "previous": None},
        }
    )

    page = decode_list(body, PaymentResponse, payment_from_dict).unwrap()

    assert page.total_count == 3
    assert [p.id for p in page.data] == ["tr_1", "tr_2", "tr_3"]
    assert [type(p).__name__ for p in page.data] == [
        "IdealPaymentResponse",
        "CreditCardPaymentResponse",
        "BankTransferPaymentResponse",
    ]
    assert page.links.previous is None


def test_decode_list_fails_on_a_single_bad_item(payment_payload):
    body = json.dumps({"totalCount": 2, "data": [payment_payload("ideal"), payment_payload("wire")]})

    result = decode_list(body, PaymentResponse, payment_from_dict)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE


def test_decode_list_rejects_non_array_data():
    result = decode_list(json.dumps({"data": {"id": "ideal"}}), IssuerResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE


def test_decode_issuer_and_payment_method():
    issuer = decode(
        json.dumps({"resource": "issuer", "id": "ideal_ABNANL2A", "name": "ABN AMRO", "method": "ideal"}),
        IssuerResponse,
    ).unwrap()
    method = decode(
        json.dumps(
            {
                "resource": "method",
                "id": "creditcard",
                "description": "Creditcard",
                "amount": {"minimum": "0.31", "maximum": "10000.00"},
                "image": {"normal": "https://www.mollie.com/images/payscreen/methods/creditcard.png", "bigger": None},
            }
        ),
        PaymentMethodResponse,
    ).unwrap()

    assert issuer.method is PaymentMethod.IDEAL
    assert issuer.name == "ABN AMRO"
    assert method.id is PaymentMethod.CREDIT_CARD
    assert method.amount.maximum == Decimal("10000.00")
    assert method.image.bigger is None


def test_refund_decodes_embedded_payment_variant(payment_payload):
    body = json.dumps(
        {
            "resource": "refund",
            "id": "re_4qqhO89gsT",
            "payment": payment_payload("creditcard", details={"cardNumber": "6787"}),
            "amount": "5.95",
            "status": "pending",
            "refundedDatetime": "2018-03-14T17:09:02.0Z",
        }
    )

    refund = decode(body, RefundResponse).unwrap()

    assert refund.amount == Decimal("5.95")
    assert isinstance(refund.payment, CreditCardPaymentResponse)
    assert refund.payment.details.card_number == "6787"


def test_refund_with_unknown_payment_method_is_a_decode_error(payment_payload):
    body = json.dumps({"id": "re_1", "payment": payment_payload("cheque")})

    result = decode(body, RefundResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE
