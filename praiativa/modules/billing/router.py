from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from praiativa.api.v1.errors import http_error
from praiativa.core.config import settings
from praiativa.core.dependencies import get_db, get_current_user, get_checkout_provider
from praiativa.gateways.checkout.client import CheckoutProvider
from praiativa.modules.users.models import User
from praiativa.modules.dashboard.service import load_snapshot
from praiativa.modules.roster.service import resolve_roster, select_instructor
from praiativa.utils.br import format_brl, format_date_br
from .schemas import BillingSessionIn, BillingSessionOut, BillingSummaryOut
from .service import create_billing_session

router = APIRouter()

@router.post("/sessions", response_model=BillingSessionOut, status_code=status.HTTP_201_CREATED)
async def criar_sessao_cobranca(
    payload: BillingSessionIn,
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
    provider: CheckoutProvider = Depends(get_checkout_provider),
):
    snap = await load_snapshot(db)
    if not snap.ok:
        raise http_error(snap)

    instrutor = select_instructor(snap.value.instrutores, payload.instrutor_id)
    if not instrutor:
        raise HTTPException(status_code=404, detail="Instrutor não encontrado")

    roster = resolve_roster(snap.value.instrutores, snap.value.alunos, instrutor)
    aluno = next((a for a in roster if a.id == payload.aluno_id), None)
    if not aluno:
        raise HTTPException(status_code=404, detail="Aluno não encontrado para este instrutor")

    result = await create_billing_session(
        aluno,
        instrutor,
        payload.data_emissao,
        payload.data_vencimento,
        payload.tipo_pagamento,
        provider=provider,
        currency=settings.CHECKOUT_CURRENCY,
    )
    if not result.ok:
        raise http_error(result)

    session = result.value
    resumo = session.summary
    return BillingSessionOut(
        url=session.url,
        session_id=session.session_id,
        resumo=BillingSummaryOut(
            aluno=resumo.aluno,
            valor=resumo.valor,
            data_emissao=resumo.data_emissao,
            data_vencimento=resumo.data_vencimento,
            valor_formatado=format_brl(resumo.valor),
            data_emissao_formatada=format_date_br(resumo.data_emissao),
            data_vencimento_formatada=format_date_br(resumo.data_vencimento),
        ),
    )
