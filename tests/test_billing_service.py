import asyncio
import json
from datetime import date, datetime, timezone
from decimal import Decimal

import httpx
import pytest

from praiativa.core.results import FailureKind
from praiativa.gateways.checkout.client import CheckoutProviderError, FunctionCheckoutProvider
from praiativa.modules.alunos.schemas import AlunoOut
from praiativa.modules.billing.service import create_billing_session

from factories import FakeProvider, aluno, instrutor

INST = instrutor(instrutor_id=7, instrutor_numero="21999990000")


def _bill(student, provider, issue="2025-01-01", due="2025-01-10", modality="pix"):
    return asyncio.run(create_billing_session(student, INST, issue, due, modality, provider=provider))


def test_missing_issue_date_fails_before_provider(fake_provider) -> None:
    res = _bill(aluno(nome="Ana", valor="80"), fake_provider, issue="")
    assert not res.ok
    assert res.kind is FailureKind.MISSING_DATES
    assert fake_provider.calls == []


@pytest.mark.parametrize("issue, due", [("2025-01-01", None), (None, "2025-01-10"), ("  ", "2025-01-10")])
def test_missing_dates_variants(fake_provider, issue, due) -> None:
    res = _bill(aluno(nome="Ana", valor="80"), fake_provider, issue=issue, due=due)
    assert res.kind is FailureKind.MISSING_DATES
    assert fake_provider.calls == []


def test_dates_are_checked_before_amount(fake_provider) -> None:
    res = _bill(aluno(nome="Ana", valor="abc"), fake_provider, due="")
    assert res.kind is FailureKind.MISSING_DATES


def test_invalid_amount_fails_before_provider(fake_provider) -> None:
    res = _bill(aluno(nome="Ana", valor="sem valor"), fake_provider)
    assert res.kind is FailureKind.INVALID_AMOUNT
    assert fake_provider.calls == []


def test_billing_scenario_ana(fake_provider) -> None:
    ana = AlunoOut(id=1, nome="Ana", numero_instrutor="21999990000", valor="80", atividade="Surf")
    res = _bill(ana, fake_provider)

    assert res.ok
    assert res.value.url == "https://pay/x"
    assert res.value.session_id == "s1"

    (payload,) = fake_provider.calls
    assert payload["amount"] == 8000
    assert payload["currency"] == "brl"
    assert payload["description"] == "Surf - Ana"
    assert payload["instructor_id"] == 7
    assert payload["payment_type"] == "pix"
    assert payload["issue_date"] == "2025-01-01"
    assert payload["due_date"] == "2025-01-10"
    assert payload["students"][0]["nome"] == "Ana"
    assert payload["students"][0]["numero_instrutor"] == "21999990000"


def test_summary_values(fake_provider) -> None:
    issue, due = date(2025, 1, 1), date(2025, 1, 10)
    res = _bill(aluno(nome="Bia", valor_mensalidade=49.999), fake_provider, issue=issue, due=due)

    summary = res.value.summary
    assert summary.aluno == "Bia"
    assert summary.valor == Decimal("50.00")
    assert summary.data_emissao is issue
    assert summary.data_vencimento is due
    assert issue == date(2025, 1, 1)
    assert fake_provider.calls[0]["due_date"] == "2025-01-10"
    assert fake_provider.calls[0]["description"] == "Bia"


def test_provider_error_message_is_kept() -> None:
    provider = FakeProvider(exc=CheckoutProviderError("Valor do pagamento inválido", details="stack"))
    res = _bill(aluno(nome="Ana", valor="0"), provider)
    assert res.kind is FailureKind.CHECKOUT_FAILED
    assert res.message == "Valor do pagamento inválido"
    assert res.details == "stack"
    assert len(provider.calls) == 1


def test_transport_error_is_generic_failure() -> None:
    provider = FakeProvider(exc=httpx.ConnectError("boom"))
    res = _bill(aluno(nome="Ana", valor="80"), provider)
    assert res.kind is FailureKind.CHECKOUT_FAILED
    assert res.message == "Erro ao gerar cobrança"


@pytest.mark.parametrize(
    "response, message",
    [
        ({"session_id": "s1"}, "Erro ao gerar cobrança"),
        ({"url": "", "session_id": "s1"}, "Erro ao gerar cobrança"),
        ({"error": "STRIPE_SECRET_KEY não configurada", "details": "..."}, "STRIPE_SECRET_KEY não configurada"),
        (["not", "a", "dict"], "Erro ao gerar cobrança"),
        ({"url": "https://pay/x"}, "Erro ao gerar cobrança"),
        ({"url": "https://pay/x", "session_id": ""}, "Erro ao gerar cobrança"),
    ],
)
def test_unusable_provider_responses(response, message) -> None:
    res = _bill(aluno(nome="Ana", valor="80"), FakeProvider(response=response))
    assert res.kind is FailureKind.CHECKOUT_FAILED
    assert res.message == message


def test_concurrent_sessions_are_independent() -> None:
    provider = FakeProvider()

    async def _both():
        return await asyncio.gather(
            create_billing_session(aluno(nome="Ana", valor="80"), INST, "2025-01-01", "2025-01-10", "pix",
                                   provider=provider),
            create_billing_session(aluno(nome="Bea", valor="50"), INST, "2025-01-01", "2025-01-10", "boleto",
                                   provider=provider),
        )

    a, b = asyncio.run(_both())
    assert a.ok and b.ok
    assert sorted(p["amount"] for p in provider.calls) == [5000, 8000]


def test_negative_amount_reaches_provider_with_its_sign(fake_provider) -> None:
    # quem recusa valor <= 0 é o provedor (StripeCheckoutProvider)
    _bill(aluno(nome="Ana", valor="-50"), fake_provider)
    assert fake_provider.calls[0]["amount"] == -5000


def test_amount_beyond_decimal_precision_is_invalid(fake_provider) -> None:
    res = _bill(aluno(nome="Ana", valor="9" * 30), fake_provider)
    assert res.kind is FailureKind.INVALID_AMOUNT
    assert fake_provider.calls == []


def test_orm_like_record_is_sent_as_json() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"url": "https://pay/x", "session_id": "s1"})

    provider = FunctionCheckoutProvider("https://fn.example/create-payment", transport=httpx.MockTransport(handler))
    student = aluno(
        id=3,
        nome="Ana",
        valor_mensalidade=Decimal("80.00"),
        validade=date(2025, 1, 1),
        created_at=datetime(2024, 12, 1, 10, 0, tzinfo=timezone.utc),
    )
    res = _bill(student, provider)

    assert res.ok, res
    record = seen["body"]["students"][0]
    assert record["nome"] == "Ana"
    assert record["validade"] == "2025-01-01"
    assert seen["body"]["amount"] == 8000
