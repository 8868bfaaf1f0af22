"""
Adaptador de entrada: Parser armado a partir de funciones sueltas.

Permite registrar un proveedor sin escribir una clase: basta con un
nombre, un predicado can_parse y una función parse.

    parser = create_parser(
        "MiBanco",
        can_parse=lambda text: "MiBanco" in text,
        parse=mi_funcion_parse,
    )
    registry.register(parser)

No contiene lógica de extracción: solo compone las tres piezas en un
objeto que cumple PaymentSlipParser.
"""

from collections.abc import Callable

from slip_parser.domain.models.payment_slip import PaymentSlip
from slip_parser.domain.ports.payment_slip_parser import PaymentSlipParser


class FunctionSlipParser(PaymentSlipParser):
    """PaymentSlipParser que delega en funciones recibidas por constructor."""

    def __init__(
        self,
        provider: str,
        can_parse: Callable[[str], bool],
        parse: Callable[[str], PaymentSlip],
    ) -> None:
        if not provider:
            raise ValueError("El nombre del proveedor no puede estar vacío")
        self._provider = provider
        self._can_parse = can_parse
        self._parse = parse

    @property
    def provider_name(self) -> str:
        return self._provider

    def can_parse(self, text: str) -> bool:
        return self._can_parse(text)

    def parse(self, text: str) -> PaymentSlip:
        return self._parse(text)

    def __repr__(self) -> str:
        return f"FunctionSlipParser(provider={self._provider!r})"


def create_parser(
    provider: str,
    can_parse: Callable[[str], bool],
    parse: Callable[[str], PaymentSlip],
) -> PaymentSlipParser:
    """Envuelve can_parse/parse bajo el nombre de un proveedor."""
    return FunctionSlipParser(provider, can_parse, parse)
