"""
Adaptador de salida: Logger a consola.

Implementación simple de SlipLogger que imprime los eventos de despacho
a stdout y acumula contadores para un resumen final.

Útil para:
- Desarrollo y debugging de layouts nuevos.
- Ejecución manual desde un notebook o script.
"""

from slip_parser.domain.exceptions import ParserErrorCode
from slip_parser.domain.models.payment_slip import PaymentSlip
from slip_parser.domain.ports.slip_logger import SlipLogger
from slip_parser.domain.shared.money import format_money


class ConsoleLogger(SlipLogger):
    """Logger que imprime eventos de despacho a consola."""

    def __init__(self) -> None:
        self._slips_recibidos: int = 0
        self._slips_parseados: int = 0
        self._slips_incompletos: int = 0
        self._errores: list[dict] = []

    def log_slip_received(self, num_lines: int) -> None:
        self._slips_recibidos += 1
        print(f"  📄 Comprobante recibido ({num_lines} líneas)")

    def log_parser_selected(self, provider: str) -> None:
        print(f"  🏦 Parser seleccionado: {provider}")

    def log_no_matching_parser(self, tried: list[str]) -> None:
        detalle = f"Ningún parser reconoció el texto. Probados: {', '.join(tried) or '-'}"
        self._errores.append(
            {"codigo": ParserErrorCode.NO_MATCHING_PARSER.value, "detalle": detalle}
        )
        print(f"  ❌ {detalle}")

    def log_unknown_provider(self, provider: str, available: list[str]) -> None:
        detalle = (
            f"Proveedor '{provider}' no registrado. "
            f"Disponibles: {', '.join(available) or '-'}"
        )
        self._errores.append(
            {"codigo": ParserErrorCode.UNKNOWN_PROVIDER.value, "detalle": detalle}
        )
        print(f"  ❌ {detalle}")

    def log_slip_parsed(self, slip: PaymentSlip) -> None:
        self._slips_parseados += 1
        print(
            f"  ✅ Parseado ({slip.provider}): "
            f"{format_money(slip.amount)}, comisión {format_money(slip.fee)}"
        )

        faltantes = slip.missing_fields
        if faltantes:
            self._slips_incompletos += 1
            print(f"  ⚠️  Campos faltantes: {', '.join(faltantes)}")

    def get_summary(self) -> dict:
        return {
            "slips_recibidos": self._slips_recibidos,
            "slips_parseados": self._slips_parseados,
            "slips_incompletos": self._slips_incompletos,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del despacho."""
        print("\n" + "=" * 60)
        print("RESUMEN DE COMPROBANTES")
        print("=" * 60)
        print(f"  Recibidos:    {self._slips_recibidos}")
        print(f"  Parseados:    {self._slips_parseados}")
        print(f"  Incompletos:  {self._slips_incompletos}")
        print(f"  Con error:    {len(self._errores)}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['codigo']}: {err['detalle']}")

        print("=" * 60)
