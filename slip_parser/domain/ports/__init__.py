"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from slip_parser.domain.ports import PaymentSlipParser, SlipLogger
"""

from slip_parser.domain.ports.payment_slip_parser import PaymentSlipParser
from slip_parser.domain.ports.slip_exporter import SlipExporter
from slip_parser.domain.ports.slip_logger import SlipLogger

__all__ = [
    "PaymentSlipParser",
    "SlipExporter",
    "SlipLogger",
]
