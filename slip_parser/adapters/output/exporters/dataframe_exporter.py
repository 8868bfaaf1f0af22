"""
Adaptador de salida: Exportador a pandas DataFrame.

Convierte una lista de PaymentSlip en una tabla con columnas fijas, lista
para que una herramienta de conciliación la cruce contra el estado de
cuenta. Este adaptador NO escribe archivos: quien reciba el DataFrame
decide si lo guarda como Excel, CSV o lo manda a una base de datos.

Columnas (en este orden):
    Proveedor, Fecha, Pagador, Cuenta Pagador, Destinatario,
    Cuenta Destinatario, Monto, Comisión, Total, Moneda, ID Transacción
"""

import pandas as pd

from slip_parser.domain.exceptions import ExportError
from slip_parser.domain.models.payment_slip import SUPPORTED_CURRENCY, PaymentSlip
from slip_parser.domain.ports.slip_exporter import SlipExporter

COLUMNS: list[str] = [
    "Proveedor",
    "Fecha",
    "Pagador",
    "Cuenta Pagador",
    "Destinatario",
    "Cuenta Destinatario",
    "Monto",
    "Comisión",
    "Total",
    "Moneda",
    "ID Transacción",
]


class DataFrameExporter(SlipExporter):
    """Tabula comprobantes en un DataFrame de pandas."""

    def to_table(self, slips: list[PaymentSlip]) -> pd.DataFrame:
        """Una fila por comprobante, en el orden recibido.

        Los montos se convierten a float porque pandas no opera bien con
        Decimal; los números de cuenta se dejan como texto (pueden venir
        enmascarados o con ceros iniciales). Los campos faltantes quedan
        como None/NaT.

        Raises:
            ExportError: Si algún elemento no es un PaymentSlip.
        """
        filas = []
        for i, slip in enumerate(slips):
            if not isinstance(slip, PaymentSlip):
                raise ExportError(
                    f"Elemento {i} no es PaymentSlip: {type(slip).__name__}"
                )
            filas.append(
                {
                    "Proveedor": slip.provider,
                    "Fecha": slip.datetime,
                    "Pagador": slip.payer,
                    "Cuenta Pagador": slip.payer_account,
                    "Destinatario": slip.payee,
                    "Cuenta Destinatario": slip.payee_account,
                    "Monto": float(slip.amount),
                    "Comisión": float(slip.fee),
                    "Total": float(slip.total),
                    "Moneda": slip.currency or SUPPORTED_CURRENCY,
                    "ID Transacción": slip.transaction_id,
                }
            )

        df = pd.DataFrame(filas, columns=COLUMNS)
        df["Fecha"] = pd.to_datetime(df["Fecha"])
        return df
