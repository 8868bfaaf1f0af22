"""
Modelo de dominio: Comprobante de pago (slip) ya parseado.

Un PaymentSlip representa UNA captura de pantalla de confirmación de pago
convertida a campos estructurados: quién pagó, a quién, cuánto, cuándo y
con qué identificador de transacción.

Decisiones de diseño:
- Los campos opcionales usan None (no "" ni 0) para que "no se encontró"
  sea distinguible de un valor legítimo. Por eso amount/fee sí tienen
  default Decimal("0"): un slip sin monto visible se reporta como 0.
- Los montos son Decimal, igual que en el resto de los modelos de dinero.
- Las cuentas son str: casi siempre vienen enmascaradas ("xxx-x-x5304-x")
  y aun las que no, pueden tener ceros iniciales.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentProvider(str, Enum):
    """Plantillas de comprobante conocidas.

    Es str para que `PaymentProvider.MAKE_BY_KBANK == "MakeByKBank"`.
    Los parsers registrados por el llamador pueden usar cualquier otro tag.
    """

    MAKE_BY_KBANK = "MakeByKBank"


SUPPORTED_CURRENCY = "THB"

# Campos que un slip completo debería traer. Se usan para la bitácora.
_EXPECTED_FIELDS: tuple[str, ...] = (
    "datetime",
    "payer",
    "payer_account",
    "payee",
    "payee_account",
    "transaction_id",
)


@dataclass(frozen=True)
class PaymentSlip:
    """Resultado del parseo de un comprobante de pago.

    frozen=True: el parser arma los campos sobre un estado de trabajo
    propio y al final entrega una instantánea inmutable.
    """

    provider: str
    """Tag del parser/plantilla que produjo el registro ('MakeByKBank')."""

    datetime: dt.datetime | None = None
    """Fecha y hora de la transacción, sin zona horaria."""

    payer: str | None = None
    payer_account: str | None = None

    payee: str | None = None
    payee_account: str | None = None

    amount: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")

    reference: str | None = None
    """Reservado. Ningún extractor lo llena todavía."""

    currency: str | None = None
    """Si se llena, solo puede ser 'THB'."""

    transaction_id: str | None = None

    @property
    def total(self) -> Decimal:
        """Monto más comisión: lo que realmente salió de la cuenta del pagador."""
        return self.amount + self.fee

    @property
    def missing_fields(self) -> tuple[str, ...]:
        """Nombres de los campos esperados que quedaron en None.

        Útil para la bitácora: un slip parseado con campos faltantes
        normalmente indica un layout nuevo o un OCR muy ruidoso.
        """
        return tuple(name for name in _EXPECTED_FIELDS if getattr(self, name) is None)

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not self.provider:
            raise ValueError("El proveedor del comprobante no puede estar vacío")
        if self.amount < Decimal("0"):
            raise ValueError(f"amount no puede ser negativo: {self.amount}")
        if self.fee < Decimal("0"):
            raise ValueError(f"fee no puede ser negativo: {self.fee}")
        if self.currency is not None and self.currency != SUPPORTED_CURRENCY:
            raise ValueError(
                f"Moneda no reconocida: '{self.currency}'. Esperado: {SUPPORTED_CURRENCY}"
            )
        if self.payee_account is not None and self.payer_account is None:
            raise ValueError("payee_account no puede existir sin payer_account")
