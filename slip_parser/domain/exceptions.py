"""
Excepciones de dominio del proyecto payment-slip-parser.

A diferencia de otros proyectos donde todo error se lanza, aquí hay dos
canales distintos:

- Dentro de un parser (extractores por línea) NO hay canal de error: un
  campo que no se reconoce simplemente queda vacío. El texto viene de OCR
  y es ruidoso; un comprobante parcial es más útil que una excepción.
- En la frontera del registro, los errores viajan dentro de un Result
  (ver models/result.py) como ParserError con un código tipado. El
  llamador debe revisar `result.ok` antes de usar `result.value`.

Jerarquía:
    SlipParserBaseError
    ├── ParserError      → El registro no pudo despachar el texto
    └── ExportError      → Error al tabular los comprobantes
"""

from enum import Enum


class ParserErrorCode(str, Enum):
    """Códigos de error del registro de parsers."""

    NO_MATCHING_PARSER = "NO_MATCHING_PARSER"
    """Ningún parser registrado aceptó el texto (can_parse == False)."""

    UNKNOWN_PROVIDER = "UNKNOWN_PROVIDER"
    """Se pidió un proveedor por nombre y no hay parser registrado con él."""


class SlipParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class ParserError(SlipParserBaseError):
    """Error de despacho en el registro de parsers.

    No se lanza desde SlipParserRegistry: se devuelve dentro de un Err.
    Solo se lanza si el llamador hace `result.unwrap()` sobre un Err.
    """

    def __init__(self, code: ParserErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code.value}] {message}")


class ExportError(SlipParserBaseError):
    """Se lanza cuando no se pueden tabular los comprobantes.

    Pasa cuando la lista trae un elemento que no es PaymentSlip.
    """

    def __init__(self, causa: str):
        self.causa = causa
        super().__init__(f"Error exportando comprobantes: {causa}")
