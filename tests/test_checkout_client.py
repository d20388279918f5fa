import asyncio
import json
from urllib.parse import parse_qs

import httpx
import pytest

from praiativa.core.config import Settings
from praiativa.gateways.checkout.client import (
    CheckoutProviderError,
    FunctionCheckoutProvider,
    StripeCheckoutProvider,
    build_checkout_provider,
)

PAYLOAD = {
    "amount": 8000,
    "currency": "brl",
    "description": "Surf - Ana",
    "instructor_id": 7,
    "students": [{"nome": "Ana"}],
    "payment_type": "pix",
    "due_date": "2025-01-10",
    "issue_date": "2025-01-01",
}


def _stripe(handler, key="sk_test_123"):
    return StripeCheckoutProvider(key, frontend_url="https://app.praiativa.com/",
                                  transport=httpx.MockTransport(handler))


def test_stripe_session_form() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["form"] = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        return httpx.Response(200, json={"id": "cs_1", "url": "https://checkout.stripe.com/c/cs_1"})

    out = asyncio.run(_stripe(handler).create_payment(PAYLOAD))

    assert out == {"url": "https://checkout.stripe.com/c/cs_1", "session_id": "cs_1"}
    assert seen["url"] == "https://api.stripe.com/v1/checkout/sessions"
    assert seen["auth"] == "Bearer sk_test_123"
    form = seen["form"]
    assert form["line_items[0][price_data][unit_amount]"] == "8000"
    assert form["line_items[0][price_data][product_data][name]"] == "Surf - Ana"
    assert form["line_items[0][price_data][product_data][description]"] == "Cadastro de 1 aluno(s)"
    assert form["payment_method_types[0]"] == "pix"
    assert "payment_method_types[1]" not in form
    assert form["metadata[instructor_id]"] == "7"
    assert form["metadata[students_count]"] == "1"
    assert form["success_url"] == "https://app.praiativa.com/pagamento?success=true"
    assert form["cancel_url"] == "https://app.praiativa.com/pagamento?canceled=true"


def test_stripe_link_offers_card_and_boleto() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(200, json={"id": "cs_2", "url": "https://x"})

    asyncio.run(_stripe(handler).create_payment({**PAYLOAD, "payment_type": "link"}))
    assert seen["form"]["payment_method_types[0]"] == ["card"]
    assert seen["form"]["payment_method_types[1]"] == ["boleto"]


@pytest.mark.parametrize("key, amount, message", [
    (None, 8000, "STRIPE_SECRET_KEY não configurada"),
    ("sk_test", 0, "Valor do pagamento inválido"),
    ("sk_test", -5, "Valor do pagamento inválido"),
])
def test_stripe_rejects_before_network(key, amount, message) -> None:
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(CheckoutProviderError) as exc:
        asyncio.run(_stripe(handler, key=key).create_payment({**PAYLOAD, "amount": amount}))
    assert exc.value.message == message
    assert calls == []


def test_stripe_error_body() -> None:
    def handler(request):
        return httpx.Response(400, json={"error": {"message": "Invalid currency: xyz"}})

    with pytest.raises(CheckoutProviderError) as exc:
        asyncio.run(_stripe(handler).create_payment(PAYLOAD))
    assert exc.value.message == "Invalid currency: xyz"


def test_function_provider_posts_json() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"url": "https://pay/x", "session_id": "s1"})

    provider = FunctionCheckoutProvider("https://fn.example/create-payment", transport=httpx.MockTransport(handler))
    out = asyncio.run(provider.create_payment(PAYLOAD))
    assert out == {"url": "https://pay/x", "session_id": "s1"}
    assert seen["body"] == PAYLOAD


def test_function_provider_error_body() -> None:
    def handler(request):
        return httpx.Response(500, json={"error": "Valor do pagamento inválido", "details": "Error: ..."})

    provider = FunctionCheckoutProvider("https://fn.example/create-payment", transport=httpx.MockTransport(handler))
    with pytest.raises(CheckoutProviderError) as exc:
        asyncio.run(provider.create_payment(PAYLOAD))
    assert exc.value.message == "Valor do pagamento inválido"
    assert exc.value.details == "Error: ..."


def test_build_checkout_provider() -> None:
    assert isinstance(build_checkout_provider(Settings(CHECKOUT_FUNCTION_URL="https://fn")), FunctionCheckoutProvider)
    assert isinstance(build_checkout_provider(Settings(CHECKOUT_FUNCTION_URL=None)), StripeCheckoutProvider)
