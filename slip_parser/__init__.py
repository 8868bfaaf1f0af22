"""
payment-slip-parser: extrae campos estructurados del texto OCR de
comprobantes de pago.

Uso:
    from slip_parser import create_default_registry

    registry = create_default_registry()
    result = registry.parse(texto_ocr)
    if result.ok:
        slip = result.value
"""

from slip_parser.adapters.input.slip_parsers.function_parser import (
    FunctionSlipParser,
    create_parser,
)
from slip_parser.adapters.input.slip_parsers.make_by_kbank_parser import (
    MakeByKBankParser,
    looks_like_make_by_kbank,
)
from slip_parser.adapters.output.exporters.dataframe_exporter import DataFrameExporter
from slip_parser.adapters.output.loggers.console_logger import ConsoleLogger
from slip_parser.domain.exceptions import (
    ParserError,
    ParserErrorCode,
    SlipParserBaseError,
)
from slip_parser.domain.models import Err, Ok, PaymentProvider, PaymentSlip, Result
from slip_parser.domain.ports import PaymentSlipParser, SlipLogger
from slip_parser.infrastructure.registry import (
    SlipParserRegistry,
    create_default_registry,
)

__all__ = [
    "ConsoleLogger",
    "DataFrameExporter",
    "Err",
    "FunctionSlipParser",
    "MakeByKBankParser",
    "Ok",
    "ParserError",
    "ParserErrorCode",
    "PaymentProvider",
    "PaymentSlip",
    "PaymentSlipParser",
    "Result",
    "SlipLogger",
    "SlipParserBaseError",
    "SlipParserRegistry",
    "create_default_registry",
    "create_parser",
    "looks_like_make_by_kbank",
]
