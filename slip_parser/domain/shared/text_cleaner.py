"""
Utilidades de limpieza de texto.

Funciones reutilizables para quitar ruido del texto OCR antes de que los
parsers lo recorran línea por línea.

Estas funciones NO tienen lógica de negocio (no saben de bancos ni montos).
Solo operan sobre strings puros. En particular NO tocan los saltos de
línea ni los espacios: los parsers dependen de la estructura de líneas.
"""

from collections.abc import Iterable


def remove_phrases(text: str, phrases: Iterable[str]) -> str:
    """Elimina todas las apariciones literales de cada frase.

    Ejemplos:
        >>> remove_phrases("PAYMENT COMPLETED\\n25 Oct", ["PAYMENT COMPLETED"])
        '\\n25 Oct'
    """
    for phrase in phrases:
        text = text.replace(phrase, "")
    return text


def replace_variants(text: str, variants: Iterable[str], replacement: str) -> str:
    """Reemplaza cada variante literal por un mismo token.

    Las variantes se aplican en el orden recibido. Conviene pasar primero
    la variante más larga (por ejemplo la que cruza dos líneas) para que
    una variante corta no consuma parte de ella.

    Ejemplos:
        >>> replace_variants("make\\nby X", ["make\\nby X", "make by X"], "<X>")
        '<X>'
    """
    for variant in variants:
        text = text.replace(variant, replacement)
    return text


def split_lines(text: str) -> list[str]:
    """Divide el texto en líneas sin quitar espacios ni líneas vacías.

    Las líneas vacías se conservan: para el parser también cuentan como
    "línea anterior".
    """
    return text.split("\n")
