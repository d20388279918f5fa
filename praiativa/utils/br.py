# praiativa/utils/br.py
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
import re

CENT = Decimal("0.01")

# número já normalizado: sinal opcional, inteiro, decimais opcionais
_PLAIN_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def parse_decimal(txt: str | None) -> Decimal | None:
    """
    Converte "80", "100.50", "-50", "1.234,56" ou "R$ 80,00" em Decimal.
    Só remove o "R$" e os espaços; texto que não vira um número limpo
    ("1e3", "1.2.3", "abc") retorna None.
    """
    s = re.sub(r"(?i)r\$|\s", "", txt or "")
    if not s:
        return None
    if "," in s and "." in s:
        s = s.replace(".", "").replace(",", ".")
    elif "," in s:
        s = s.replace(",", ".")
    if not _PLAIN_NUMBER.fullmatch(s):
        return None
    return Decimal(s)


def format_brl(value: Decimal) -> str:
    """Decimal(1234.5) -> 'R$ 1.234,50'"""
    q = value.quantize(CENT, rounding=ROUND_HALF_UP)
    txt = f"{q:,.2f}"  # 1,234.50
    return "R$ " + txt.replace(",", "_").replace(".", ",").replace("_", ".")


def format_date_br(value: str | date) -> str:
    """'2025-01-10' -> '10/01/2025'. Texto que não é ISO volta como veio."""
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    try:
        return date.fromisoformat(value[:10]).strftime("%d/%m/%Y")
    except ValueError:
        return value
