"""
Mapeo de nombres de meses (inglés) a números.

Los comprobantes de la app imprimen la fecha como "25 Oct 2025 17:33".
Según la versión de la app y el idioma del teléfono, el mes puede venir
abreviado ("Oct"), completo ("October") o con la abreviatura de 4 letras
de septiembre ("Sept").

El lookup siempre es case-insensitive (se normaliza a minúsculas).
"""

# Tabla inmutable de consulta: se construye una vez al importar el módulo.
_MONTH_MAP: dict[str, int] = {
    # --- Abreviaturas ---
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
    # --- Nombres completos ---
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    # "may" ya está arriba
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}


def month_to_int(month_name: str) -> int:
    """Convierte un nombre de mes en inglés a su número 1-12.

    Args:
        month_name: Nombre o abreviatura. Ejemplos: 'Oct', 'october', 'SEPT'.

    Returns:
        Entero de 1 a 12.

    Raises:
        ValueError: Si el nombre no se reconoce.

    Ejemplos:
        >>> month_to_int("Oct")
        10
        >>> month_to_int("Sept")
        9
    """
    normalized = month_name.strip().lower()
    result = _MONTH_MAP.get(normalized)
    if result is None:
        raise ValueError(f"Mes no reconocido: '{month_name}'")
    return result
