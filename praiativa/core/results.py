# praiativa/core/results.py
"""
Resultados explícitos para as operações do núcleo (roster / cobrança).

Falhas esperadas (datas ausentes, valor inválido, erro de banco, checkout
recusado) voltam como `Failure`, nunca como exceção. Os routers convertem
para HTTPException.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    MISSING_DATES = "missing_dates"
    INVALID_AMOUNT = "invalid_amount"
    MISSING_PRICE = "missing_price"
    STORE_ERROR = "store_error"
    CHECKOUT_FAILED = "checkout_failed"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: bool = True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    details: Optional[str] = None
    ok: bool = False


Result = Union[Ok[T], Failure]
