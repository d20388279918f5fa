# praiativa/modules/billing/amounts.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from praiativa.utils.br import CENT, parse_decimal


def resolve_amount(aluno: Any) -> Optional[Decimal]:
    """
    Valor da cobrança em reais: valor_mensalidade quando existe, senão o
    texto `valor`. None se nenhum dos dois virar um número finito.
    """
    mensal = getattr(aluno, "valor_mensalidade", None)
    if mensal is not None:
        try:
            # str() evita carregar o erro binário do float (49.999 -> 49.999)
            amount = mensal if isinstance(mensal, Decimal) else Decimal(str(mensal))
        except InvalidOperation:
            return None
    else:
        amount = parse_decimal(getattr(aluno, "valor", None))
    if amount is None or not amount.is_finite():
        return None
    return amount


def to_minor_units(amount: Decimal) -> int:
    """Reais -> centavos, arredondando meio centavo para longe do zero."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_major_units(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
