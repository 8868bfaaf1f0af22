"""
Utilidades para manejo de montos monetarios.

Los comprobantes muestran montos como "1,688.10 Baht" o "65.00 THB".
Siempre se convierte a Decimal (nunca float) para no perder centavos
cuando las herramientas de conciliación suman cientos de comprobantes.
"""

from decimal import Decimal, InvalidOperation, localcontext


def parse_money(text: str) -> Decimal:
    """Convierte un texto con formato monetario a Decimal.

    Acepta separador de miles "," y punto decimal ".":
    - "1,688.10" → Decimal("1688.10")
    - "594.00"   → Decimal("594.00")
    - " 65 "     → Decimal("65")

    Args:
        text: Solo la parte numérica del monto (sin "Baht"/"THB").

    Returns:
        Decimal con el valor exacto.

    Raises:
        ValueError: Si el texto está vacío o no es un número. El mensaje
                    incluye el valor original para debugging.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_money espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    cleaned = text.strip().replace(" ", "").replace(",", "")

    if not cleaned:
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    try:
        result = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")

    if not result.is_finite():
        raise ValueError(f"Monto no finito: '{text}'")

    return result


def format_money(amount: Decimal, currency: str = "THB") -> str:
    """Formatea un Decimal como string monetario legible.

    Ejemplos:
        >>> format_money(Decimal("1688.1"))
        '1,688.10 THB'
        >>> format_money(Decimal("0"))
        '0.00 THB'

    La precisión del contexto se amplía al tamaño del monto: el OCR puede
    entregar corridas de dígitos más largas que los 28 dígitos por defecto
    de decimal, y quantize lanzaría InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(Decimal("0.01"))
    return f"{amount:,.2f} {currency}"
