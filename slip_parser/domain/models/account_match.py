"""
Modelo de dominio: Coincidencia de cuenta (nombre + número).

Es lo que devuelve el extractor de cuentas cuando una línea tiene forma
de número de cuenta. El nombre se arma con las líneas anteriores que el
parser fue acumulando, porque en el slip el nombre del titular aparece
arriba del número y puede ocupar varias líneas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountMatch:
    """Titular y número de cuenta detectados en una línea."""

    name: str
    """Nombre del titular, ya sin espacios al inicio/final. Puede ser ""."""

    number: str
    """Número de cuenta. Enmascarado en minúsculas ('xxx-x-x5304-x') o
    totalmente numérico ('011829186', típico de pago de servicios)."""
