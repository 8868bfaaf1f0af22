"""
Registro de parsers de comprobantes disponibles.

Guarda los parsers EN ORDEN. Para un texto nuevo pregunta a cada uno
can_parse() en ese orden y usa el primero que acepta. También permite
pedir un proveedor por nombre exacto.

Agregar un proveedor nuevo al sistema requiere solo 2 pasos:
1. Crear la clase XxxParser que implemente PaymentSlipParser
   (o armarlo con create_parser()).
2. Registrarlo aquí con register() o agregarlo a create_default_registry().

A diferencia de los parsers, el registro NO lanza excepciones cuando no
puede despachar: devuelve Err(ParserError(...)) con un código tipado.
"""

from collections.abc import Iterable

from slip_parser.domain.exceptions import ParserError, ParserErrorCode
from slip_parser.domain.models.payment_slip import PaymentSlip
from slip_parser.domain.models.result import Err, Ok, Result
from slip_parser.domain.ports.payment_slip_parser import PaymentSlipParser
from slip_parser.domain.ports.slip_logger import SlipLogger
from slip_parser.domain.shared.text_cleaner import split_lines


class SlipParserRegistry:
    """Registro ordenado de parsers de comprobantes."""

    def __init__(
        self,
        parsers: Iterable[PaymentSlipParser] = (),
        logger: SlipLogger | None = None,
    ) -> None:
        """
        Args:
            parsers: Parsers en orden de prioridad. Gana el primero cuyo
                     can_parse devuelva True.
            logger: Bitácora opcional. Sin logger, el registro no reporta nada.
        """
        self._parsers: list[PaymentSlipParser] = []
        self._logger = logger
        for parser in parsers:
            self.register(parser)

    def register(self, parser: PaymentSlipParser) -> None:
        """Agrega un parser al final de la lista de prioridad.

        Raises:
            ValueError: Si ya existe un parser con el mismo provider_name.
        """
        existing = self.get(parser.provider_name)
        if existing is not None:
            raise ValueError(
                f"Ya existe un parser registrado para '{parser.provider_name}': "
                f"{type(existing).__name__}. "
                f"No se puede registrar {type(parser).__name__}."
            )
        self._parsers.append(parser)

    def get(self, provider: str) -> PaymentSlipParser | None:
        """Obtiene el parser de un proveedor (nombre exacto), o None."""
        for parser in self._parsers:
            if parser.provider_name == provider:
                return parser
        return None

    @property
    def available_providers(self) -> list[str]:
        """Proveedores registrados, en orden de prioridad."""
        return [parser.provider_name for parser in self._parsers]

    def __len__(self) -> int:
        return len(self._parsers)

    def parse(self, text: str) -> Result[PaymentSlip, ParserError]:
        """Parsea con el primer parser que acepte el texto.

        Returns:
            Ok(PaymentSlip) del primer parser cuyo can_parse sea True.
            Err(ParserError(NO_MATCHING_PARSER)) si ninguno lo acepta.
        """
        self._log_received(text)

        tried: list[str] = []
        for parser in self._parsers:
            tried.append(parser.provider_name)
            if parser.can_parse(text):
                return self._run(parser, text)

        if self._logger is not None:
            self._logger.log_no_matching_parser(tried)
        return Err(ParserError(ParserErrorCode.NO_MATCHING_PARSER, "No matching parser found"))

    def parse_with_provider(self, text: str, provider: str) -> Result[PaymentSlip, ParserError]:
        """Parsea con el parser del proveedor indicado, sin consultar can_parse.

        Returns:
            Ok(PaymentSlip) si el proveedor está registrado.
            Err(ParserError(UNKNOWN_PROVIDER)) si no lo está.
        """
        self._log_received(text)

        parser = self.get(provider)
        if parser is None:
            if self._logger is not None:
                self._logger.log_unknown_provider(provider, self.available_providers)
            return Err(
                ParserError(
                    ParserErrorCode.UNKNOWN_PROVIDER,
                    f"No parser found for provider: {provider}",
                )
            )

        return self._run(parser, text)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _run(self, parser: PaymentSlipParser, text: str) -> Ok[PaymentSlip]:
        if self._logger is not None:
            self._logger.log_parser_selected(parser.provider_name)

        slip = parser.parse(text)

        if self._logger is not None:
            self._logger.log_slip_parsed(slip)
        return Ok(slip)

    def _log_received(self, text: str) -> None:
        if self._logger is not None:
            self._logger.log_slip_received(len(split_lines(text)))


def create_default_registry(logger: SlipLogger | None = None) -> SlipParserRegistry:
    """Crea un registro con todos los parsers disponibles.

    Esta función es el punto donde se registran todos los proveedores.
    Conforme se agreguen plantillas nuevas, se agregan aquí.

    Returns:
        SlipParserRegistry con todos los parsers registrados.
    """
    registry = SlipParserRegistry(logger=logger)

    from slip_parser.adapters.input.slip_parsers.make_by_kbank_parser import (
        MakeByKBankParser,
    )

    registry.register(MakeByKBankParser())

    return registry
