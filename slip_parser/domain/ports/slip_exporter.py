"""
Puerto de salida: Exportador de comprobantes.

Define el contrato para convertir una lista de PaymentSlip a una tabla
que las herramientas de conciliación puedan consumir. El dominio no sabe
si la tabla termina en un Excel, una base de datos o una API: eso es
responsabilidad de quien reciba la tabla.
"""

from abc import ABC, abstractmethod
from typing import Any

from slip_parser.domain.models.payment_slip import PaymentSlip


class SlipExporter(ABC):
    """Interfaz para tabular comprobantes parseados."""

    @abstractmethod
    def to_table(self, slips: list[PaymentSlip]) -> Any:
        """Convierte los comprobantes a una estructura tabular.

        Args:
            slips: Comprobantes en el orden en que se quieren las filas.

        Returns:
            Una fila por comprobante. El tipo concreto depende del adaptador.

        Raises:
            ExportError: Si algún comprobante no se puede tabular.
        """
        ...
