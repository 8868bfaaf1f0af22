"""
Puerto de entrada: Parser de comprobantes de pago.

Define el contrato que cada proveedor (plantilla de slip) debe cumplir:

    PaymentSlipParser (interfaz)
    ├── MakeByKBankParser
    ├── FunctionSlipParser   (parser armado a partir de funciones sueltas)
    └── ...etc (uno por plantilla)

¿Por qué can_parse vive en el parser y no en un identificador aparte?
Porque cada plantilla sabe mejor que nadie qué marcas la delatan (una
firma de la app, un encabezado). El registro solo pregunta en orden y se
queda con el primero que diga que sí.
"""

from abc import ABC, abstractmethod

from slip_parser.domain.models.payment_slip import PaymentSlip


class PaymentSlipParser(ABC):
    """Interfaz para parsear el texto OCR de un comprobante de pago."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Tag del proveedor que este parser maneja.

        Se usa como clave en SlipParserRegistry.parse_with_provider().
        La comparación es exacta (sensible a mayúsculas): 'MakeByKBank'.
        """
        ...

    @abstractmethod
    def can_parse(self, text: str) -> bool:
        """Determina si este parser reconoce el texto.

        Args:
            text: Texto OCR crudo del comprobante.

        Returns:
            True si el texto parece de esta plantilla.
        """
        ...

    @abstractmethod
    def parse(self, text: str) -> PaymentSlip:
        """Parsea el texto y devuelve el comprobante.

        No lanza excepciones por texto mal formado: los campos que no se
        reconocen quedan en None (o en 0 para amount/fee).

        Args:
            text: Texto OCR crudo del comprobante.

        Returns:
            PaymentSlip inmutable con los campos encontrados.
        """
        ...
