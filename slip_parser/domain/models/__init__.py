"""
Modelos de dominio del proyecto payment-slip-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from slip_parser.domain.models import PaymentSlip, AccountMatch, Ok, Err
"""

from slip_parser.domain.models.account_match import AccountMatch
from slip_parser.domain.models.payment_slip import (
    SUPPORTED_CURRENCY,
    PaymentProvider,
    PaymentSlip,
)
from slip_parser.domain.models.result import Err, Ok, Result

__all__ = [
    "AccountMatch",
    "Err",
    "Ok",
    "PaymentProvider",
    "PaymentSlip",
    "Result",
    "SUPPORTED_CURRENCY",
]
