"""
Modelo de dominio: Resultado etiquetado (Ok / Err).

El registro de parsers NO lanza excepciones hacia el llamador. En su lugar
devuelve uno de dos variantes:

    Ok(value=PaymentSlip(...))            → result.ok is True
    Err(error=ParserError(...))           → result.ok is False

Así el llamador está obligado a ramificar explícitamente:

    result = registry.parse(texto)
    if not result.ok:
        print(result.error.code)
    else:
        slip = result.value
"""

from dataclasses import dataclass, field
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Variante exitosa."""

    value: T
    ok: bool = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Variante de error. Lleva la excepción, pero no la lanza."""

    error: E
    ok: bool = field(default=False, init=False)

    def unwrap(self) -> NoReturn:
        """Lanza el error transportado.

        Solo para llamadores que prefieren el flujo con excepciones
        (scripts, notebooks). El registro nunca lo llama.
        """
        raise self.error


Result = Union[Ok[T], Err[E]]
