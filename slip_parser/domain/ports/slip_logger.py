"""
Puerto de salida: Bitácora de despacho de comprobantes (Slip Logger).

Define los EVENTOS de negocio que ocurren cuando el registro recibe un
texto y lo despacha a un parser:
- "Se recibió un comprobante"
- "Se eligió el parser X"
- "Ningún parser reconoció el texto"
- "Se parseó el comprobante (y le faltan estos campos)"

La implementación decide CÓMO se registran (consola, archivo, memoria en
tests). El registro solo conoce esta interfaz.
"""

from abc import ABC, abstractmethod

from slip_parser.domain.models.payment_slip import PaymentSlip


class SlipLogger(ABC):
    """Interfaz para la bitácora de despacho."""

    @abstractmethod
    def log_slip_received(self, num_lines: int) -> None:
        """Registra que llegó un texto para parsear.

        Args:
            num_lines: Cantidad de líneas del texto crudo.
        """
        ...

    @abstractmethod
    def log_parser_selected(self, provider: str) -> None:
        """Registra qué parser se usará para el texto."""
        ...

    @abstractmethod
    def log_no_matching_parser(self, tried: list[str]) -> None:
        """Registra que ningún parser aceptó el texto.

        Args:
            tried: Proveedores consultados, en el orden en que se probaron.
        """
        ...

    @abstractmethod
    def log_unknown_provider(self, provider: str, available: list[str]) -> None:
        """Registra que se pidió un proveedor que no está registrado."""
        ...

    @abstractmethod
    def log_slip_parsed(self, slip: PaymentSlip) -> None:
        """Registra el comprobante resultante.

        Se espera que la implementación reporte slip.missing_fields, que
        es la señal de que el layout o el OCR no fueron los esperados.
        """
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el despacho.

        Returns:
            Diccionario con métricas:
            {
                'slips_recibidos': int,
                'slips_parseados': int,
                'slips_incompletos': int,
                'errores': List[dict],  # [{codigo, detalle}]
            }
        """
        ...
