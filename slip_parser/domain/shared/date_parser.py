"""
Conversión de la fecha/hora impresa en los comprobantes.

Formato único que imprime la app (una línea sola):

    "25 Oct 2025 17:33"
    "5 September 2025 9:05:42"

Es decir: D MesEnInglés YYYY H:MM[:SS]. Cualquier otra cosa en la línea
hace que no coincida; así se evita confundir la fecha con un monto o
con un número de referencia.

Reglas:
1. Día 1-2 dígitos, año 4 dígitos, hora 1-2 dígitos, minutos y segundos
   2 dígitos.
2. Rangos: día 1-31, hora 0-23, minuto y segundo 0-59.
3. La fecha debe existir en el calendario: "31 Sep 2025" o "29 Feb 2025"
   se rechazan (datetime de Python no "desborda" al mes siguiente).
4. Se devuelve un datetime naive (sin zona horaria) con microsegundos en 0.
"""

import re
from datetime import datetime

from slip_parser.domain.shared.month_map import month_to_int

# [0-9] y no \d: los dígitos tailandeses no cuentan. \s sí acepta espacios
# Unicode (NBSP, espacio ideográfico) que el OCR deja entre campos.
_SLIP_DATETIME_RE = re.compile(
    r"^\s*([0-9]{1,2})\s+([A-Za-z]+)\s+([0-9]{4})\s+([0-9]{1,2}):([0-9]{2})(?::([0-9]{2}))?\s*$"
)


def parse_slip_datetime(text: str) -> datetime:
    """Parsea la línea de fecha/hora de un comprobante.

    Args:
        text: Una sola línea del comprobante.

    Returns:
        datetime naive con la fecha y hora literales de la línea.

    Raises:
        ValueError: Si la línea no tiene el formato esperado, el mes no se
                    reconoce, algún componente está fuera de rango o la
                    fecha no existe en el calendario.

    Ejemplos:
        >>> parse_slip_datetime("25 Oct 2025 17:33")
        datetime(2025, 10, 25, 17, 33)
        >>> parse_slip_datetime("1 Sept 2025 08:00:59")
        datetime(2025, 9, 1, 8, 0, 59)
    """
    m = _SLIP_DATETIME_RE.match(text)
    if not m:
        raise ValueError(f"Formato de fecha no reconocido: '{text}'")

    day_text, month_text, year_text, hour_text, minute_text, second_text = m.groups()

    month = month_to_int(month_text)
    day = int(day_text)
    year = int(year_text)
    hour = int(hour_text)
    minute = int(minute_text)
    second = int(second_text) if second_text else 0

    if not 1000 <= year <= 9999:
        raise ValueError(f"Año fuera de rango en '{text}': {year}")
    if not 1 <= day <= 31:
        raise ValueError(f"Día fuera de rango en '{text}': {day}")
    if not 0 <= hour <= 23:
        raise ValueError(f"Hora fuera de rango en '{text}': {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"Minuto fuera de rango en '{text}': {minute}")
    if not 0 <= second <= 59:
        raise ValueError(f"Segundo fuera de rango en '{text}': {second}")

    return _build_datetime(year, month, day, hour, minute, second, text)


def _build_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    original_text: str,
) -> datetime:
    """Construye el datetime con validación de calendario.

    Centraliza el mensaje de error de fechas inexistentes (31 de
    septiembre, 29 de febrero en año no bisiesto) con el texto original.
    """
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day}: {e}"
        )
