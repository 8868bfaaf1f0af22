"""
Extractores de campos para comprobantes "make by KBank".

Cada extractor es una función pura que recibe la línea actual y, cuando
lo necesita, la línea anterior (o el nombre acumulado). No guardan estado:
el recorrido línea por línea vive en make_by_kbank_parser.py.

Todos devuelven None cuando la línea no corresponde. Nunca lanzan
excepciones por texto raro: el OCR de capturas de pantalla es ruidoso y
un campo faltante es preferible a un comprobante descartado.

LAYOUT DE DOS LÍNEAS:
Monto, comisión e ID de transacción suelen venir con la etiqueta en una
línea y el valor en la siguiente:

    Amount
    594.00 Baht

Por eso amount/fee/transaction_id revisan `prev_line`.
"""

import re
from datetime import datetime
from decimal import Decimal

from slip_parser.domain.models.account_match import AccountMatch
from slip_parser.domain.shared.date_parser import parse_slip_datetime
from slip_parser.domain.shared.money import parse_money

AMOUNT_LABEL = "Amount"
FEE_LABEL = "Fee"

# Coincide con "Transaction ID:" y con cualquier etiqueta que termine igual.
TRANSACTION_ID_LABEL = "tion ID:"

# El primer dígito es obligatorio: "," suelto no es un monto. Solo dígitos
# 0-9; entre el número y la unidad se acepta cualquier espacio Unicode.
_CURRENCY_RE = re.compile(r"([0-9][0-9,]*(?:\.[0-9]+)?)\s*(?:Baht|THB)", re.IGNORECASE)

# Cuenta enmascarada: al menos un carácter de máscara y un dígito, y nada
# más que máscara, dígitos o guiones. La máscara incluye la "x" cirílica
# (х, Х) y el signo ×, que el OCR devuelve en lugar de la x latina.
_MASKED_ACCOUNT_RE = re.compile(r"^(?=.*[xXхХ])(?=.*[0-9])[xXхХ×\-0-9]+$")

# Cuenta sin máscara (pago de servicios: número de contrato).
_NUMERIC_ACCOUNT_RE = re.compile(r"^[0-9]+$")

_TRANSACTION_ID_RE = re.compile(r"^[A-Za-z0-9]+$")


def extract_datetime(line: str) -> datetime | None:
    """Devuelve la fecha/hora si la línea completa es una fecha del slip."""
    try:
        return parse_slip_datetime(line)
    except ValueError:
        return None


def extract_currency(line: str) -> Decimal | None:
    """Extrae el primer monto seguido de "Baht" o "THB".

    Ejemplos:
        >>> extract_currency("1,688.10 Baht")
        Decimal('1688.10')
        >>> extract_currency("594.00")
        None
    """
    match = _CURRENCY_RE.search(line)
    if not match:
        return None

    try:
        return parse_money(match.group(1))
    except ValueError:
        return None


def extract_amount(prev_line: str, line: str) -> Decimal | None:
    """Monto de la transacción, solo si la línea anterior dice "Amount"."""
    if AMOUNT_LABEL not in prev_line:
        return None
    return extract_currency(line)


def extract_fee(prev_line: str, line: str) -> Decimal | None:
    """Comisión, solo si la línea anterior dice "Fee"."""
    if FEE_LABEL not in prev_line:
        return None
    return extract_currency(line)


def extract_account(name_context: str, line: str) -> AccountMatch | None:
    """Detecta una línea con número de cuenta y arma el nombre del titular.

    La línea se divide por espacios simples:
    - Varias partes: "TEAM T xxx-X-x5304-x" → todo menos la última parte
      se agrega al nombre; la última es el candidato a número.
    - Una sola parte: "xxx-x-x5304-x" → el nombre es `name_context` tal cual.

    El candidato es válido si es una cuenta enmascarada (se normaliza a
    minúsculas) o si es solo dígitos.

    Args:
        name_context: Nombre acumulado de las líneas anteriores.
        line: Línea actual.

    Returns:
        AccountMatch con nombre (sin espacios extremos) y número, o None si
        la línea no tiene forma de número de cuenta.
    """
    name, candidate = _split_last_token(line)
    full_name = name_context
    if name:
        full_name += " " + name

    number = None
    if _MASKED_ACCOUNT_RE.match(candidate):
        number = candidate.lower()
    if _NUMERIC_ACCOUNT_RE.match(candidate):
        number = candidate

    if number is None:
        return None

    return AccountMatch(name=full_name.strip(), number=number)


def extract_transaction_id(prev_line: str, line: str) -> str | None:
    """Extrae el ID de transacción.

    Acepta la etiqueta en la misma línea ("Transaction ID: 0452985...") o
    en la línea anterior. El ID debe ser alfanumérico, sin separadores.
    "Merchant ID: KB0000..." no cuenta: la etiqueta no termina en "tion ID:".
    """
    label, candidate = _split_last_token(line)

    if TRANSACTION_ID_LABEL not in label and TRANSACTION_ID_LABEL not in prev_line:
        return None

    if not _TRANSACTION_ID_RE.match(candidate):
        return None

    return candidate


def _split_last_token(line: str) -> tuple[str, str]:
    """Divide "a b c" en ("a b", "c"). Una línea sin espacios → ("", línea).

    Se divide por espacio simple (no por \\s+) para respetar cómo el OCR
    separa las palabras; dos espacios seguidos dejan una parte vacía.
    Si la última parte queda vacía (línea que termina en espacio), el
    candidato es la línea completa.
    """
    parts = line.split(" ")
    if len(parts) == 1:
        return "", line

    label = " ".join(parts[:-1])
    candidate = parts[-1] or line
    return label, candidate
