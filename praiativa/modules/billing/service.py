# praiativa/modules/billing/service.py
"""
Orquestração de uma cobrança: valida datas e valor, monta o payload
normalizado e faz UMA chamada ao provedor de checkout.

Nada é gravado, nem em sucesso nem em falha; repetir a chamada é seguro
do ponto de vista do roster e dos cadastros.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

import httpx

from praiativa.core.results import Failure, FailureKind, Ok, Result
from praiativa.gateways.checkout.client import CheckoutProvider, CheckoutProviderError
from praiativa.modules.alunos.schemas import AlunoOut
from .amounts import resolve_amount, to_major_units, to_minor_units

logger = logging.getLogger(__name__)

GENERIC_CHECKOUT_ERROR = "Erro ao gerar cobrança"

DateLike = Union[str, date]


@dataclass(frozen=True)
class BillingSummary:
    aluno: str
    valor: Decimal            # reais, 2 casas
    data_emissao: DateLike    # exatamente como recebido
    data_vencimento: DateLike


@dataclass(frozen=True)
class BillingSession:
    url: str
    session_id: str
    summary: BillingSummary


@dataclass(frozen=True)
class BillingRequest:
    aluno: Any
    instrutor: Any
    data_emissao: DateLike
    data_vencimento: DateLike
    amount_minor: int
    description: str
    tipo_pagamento: str

    def to_payload(self, currency: str) -> Dict[str, Any]:
        return {
            "amount": self.amount_minor,
            "currency": currency,
            "description": self.description,
            "instructor_id": getattr(self.instrutor, "instrutor_id", None),
            "students": [_student_record(self.aluno)],
            "payment_type": self.tipo_pagamento,
            "due_date": _iso(self.data_vencimento),
            "issue_date": _iso(self.data_emissao),
        }


def _iso(v: DateLike) -> str:
    return v.isoformat() if isinstance(v, date) else v


def _student_record(aluno: Any) -> Dict[str, Any]:
    # sempre JSON-safe: date/Decimal do ORM viram texto
    if not isinstance(aluno, AlunoOut):
        aluno = AlunoOut.model_validate(aluno)
    return aluno.model_dump(mode="json")


def _blank(v: DateLike | None) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def describe(aluno: Any) -> str:
    nome = (getattr(aluno, "nome", None) or "").strip()
    atividade = (getattr(aluno, "atividade", None) or "").strip()
    return f"{atividade} - {nome}" if atividade else nome


async def create_billing_session(
    aluno: Any,
    instrutor: Any,
    data_emissao: DateLike | None,
    data_vencimento: DateLike | None,
    tipo_pagamento: str,
    *,
    provider: CheckoutProvider,
    currency: str = "brl",
) -> Result[BillingSession]:
    # 1) datas
    if _blank(data_emissao) or _blank(data_vencimento):
        return Failure(FailureKind.MISSING_DATES, "Informe as datas de emissão e vencimento")

    # 2) valor
    amount = resolve_amount(aluno)
    try:
        amount_minor = to_minor_units(amount) if amount is not None else None
        amount_major = to_major_units(amount) if amount is not None else None
    except InvalidOperation:
        # finito, mas grande demais para a precisão do Decimal
        amount_minor = amount_major = None
    if amount_minor is None:
        return Failure(FailureKind.INVALID_AMOUNT, "Valor do aluno inválido")

    req = BillingRequest(
        aluno=aluno,
        instrutor=instrutor,
        data_emissao=data_emissao,
        data_vencimento=data_vencimento,
        amount_minor=amount_minor,
        description=describe(aluno),
        tipo_pagamento=tipo_pagamento,
    )

    # 3) provedor (uma chamada, sem retry local)
    try:
        resp = await provider.create_payment(req.to_payload(currency))
    except CheckoutProviderError as e:
        logger.error("[CHECKOUT] Provedor recusou a cobrança: %s | %s", e.message, e.details)
        return Failure(FailureKind.CHECKOUT_FAILED, e.message or GENERIC_CHECKOUT_ERROR, details=_text(e.details))
    except (httpx.HTTPError, ValueError) as e:
        logger.exception("[CHECKOUT] Falha na chamada ao provedor")
        return Failure(FailureKind.CHECKOUT_FAILED, GENERIC_CHECKOUT_ERROR, details=str(e))

    if not isinstance(resp, dict):
        logger.error("[CHECKOUT] Resposta malformada do provedor: %r", resp)
        return Failure(FailureKind.CHECKOUT_FAILED, GENERIC_CHECKOUT_ERROR)
    if resp.get("error"):
        logger.error("[CHECKOUT] Erro do provedor: %s | %s", resp.get("error"), resp.get("details"))
        return Failure(FailureKind.CHECKOUT_FAILED, str(resp["error"]), details=_text(resp.get("details")))

    url = resp.get("url")
    session_id = resp.get("session_id")
    if not url or not session_id:
        logger.error("[CHECKOUT] Provedor não retornou url/session_id: %r", resp)
        return Failure(FailureKind.CHECKOUT_FAILED, GENERIC_CHECKOUT_ERROR)

    return Ok(BillingSession(
        url=str(url),
        session_id=str(session_id),
        summary=BillingSummary(
            aluno=getattr(aluno, "nome", ""),
            valor=amount_major,
            data_emissao=data_emissao,
            data_vencimento=data_vencimento,
        ),
    ))


def _text(v: Any) -> str | None:
    return None if v is None else str(v)
