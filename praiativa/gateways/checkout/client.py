# praiativa/gateways/checkout/client.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from praiativa.core.config import Settings, settings

logger = logging.getLogger(__name__)

# tipo_pagamento -> payment_method_types do Stripe
PAYMENT_METHODS: Dict[str, List[str]] = {
    "pix": ["pix"],
    "boleto": ["boleto"],
    "link": ["card", "boleto"],
}


class CheckoutProviderError(RuntimeError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class CheckoutProvider(Protocol):
    async def create_payment(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Recebe o payload normalizado e devolve {url, session_id}."""
        ...


class StripeCheckoutProvider:
    """Cria a Checkout Session direto na API do Stripe (form-encoded)."""

    def __init__(self, secret_key: Optional[str], *, api_base: str = "https://api.stripe.com/v1",
                 frontend_url: str = "http://localhost:3000", timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.secret_key = secret_key
        self.api_base = api_base.rstrip("/")
        self.frontend_url = frontend_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _form(self, payload: Dict[str, Any]) -> Dict[str, str]:
        students = payload.get("students") or []
        payment_type = payload.get("payment_type") or "link"
        form: Dict[str, str] = {
            "mode": "payment",
            "success_url": f"{self.frontend_url}/pagamento?success=true",
            "cancel_url": f"{self.frontend_url}/pagamento?canceled=true",
            "line_items[0][price_data][currency]": str(payload.get("currency") or "brl").lower(),
            "line_items[0][price_data][unit_amount]": str(payload["amount"]),
            "line_items[0][price_data][product_data][name]": payload.get("description") or "Pagamento PraiAtiva",
            "line_items[0][price_data][product_data][description]": f"Cadastro de {len(students)} aluno(s)",
            "line_items[0][quantity]": "1",
            "metadata[instructor_id]": str(payload.get("instructor_id") or ""),
            "metadata[students_count]": str(len(students)),
            "metadata[payment_type]": payment_type,
            "metadata[issue_date]": str(payload.get("issue_date") or ""),
            "metadata[due_date]": str(payload.get("due_date") or ""),
        }
        for i, method in enumerate(PAYMENT_METHODS.get(payment_type, PAYMENT_METHODS["link"])):
            form[f"payment_method_types[{i}]"] = method
        return form

    async def create_payment(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.secret_key:
            raise CheckoutProviderError("STRIPE_SECRET_KEY não configurada")

        amount = payload.get("amount")
        if not isinstance(amount, int) or amount <= 0:
            raise CheckoutProviderError("Valor do pagamento inválido")

        logger.info(
            "[CHECKOUT] Criando sessão Stripe: amount=%s currency=%s instructor_id=%s students=%s",
            amount, payload.get("currency"), payload.get("instructor_id"),
            len(payload.get("students") or []),
        )
        headers = {"Authorization": f"Bearer {self.secret_key}"}
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            r = await client.post(f"{self.api_base}/checkout/sessions", data=self._form(payload), headers=headers)
        if not r.is_success:
            try:
                err = (r.json() or {}).get("error") or {}
                message = err.get("message") if isinstance(err, dict) else str(err)
            except ValueError:
                message = None
            raise CheckoutProviderError(
                message or f"Stripe checkout error ({r.status_code})", details=r.text[:500]
            )
        data = r.json()
        logger.info("[CHECKOUT] Sessão criada com sucesso: %s", data.get("id"))
        return {"url": data.get("url"), "session_id": data.get("id")}


class FunctionCheckoutProvider:
    """Chama a função remota "create-payment", que fala com o provedor por nós."""

    def __init__(self, url: str, *, api_key: Optional[str] = None, timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._timeout = timeout
        self._transport = transport
        self._headers = {"accept": "application/json", "content-type": "application/json"}
        if api_key:
            self._headers["authorization"] = f"Bearer {api_key}"

    async def create_payment(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            r = await client.post(self.url, json=payload, headers=self._headers)
        if r.status_code >= 400:
            try:
                data = r.json() or {}
            except ValueError:
                data = {"error": None, "details": r.text[:500]}
            raise CheckoutProviderError(
                data.get("error") or f"create-payment falhou ({r.status_code})",
                details=data.get("details"),
            )
        return r.json()


def build_checkout_provider(cfg: Settings = settings) -> CheckoutProvider:
    if cfg.CHECKOUT_FUNCTION_URL:
        return FunctionCheckoutProvider(cfg.CHECKOUT_FUNCTION_URL, timeout=cfg.CHECKOUT_TIMEOUT)
    return StripeCheckoutProvider(
        cfg.STRIPE_SECRET_KEY,
        api_base=cfg.STRIPE_API_BASE,
        frontend_url=cfg.FRONTEND_URL,
        timeout=cfg.CHECKOUT_TIMEOUT,
    )
