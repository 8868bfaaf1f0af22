"""
Adaptador de entrada: Parser de comprobantes "make by KBank".

Los comprobantes llegan como texto OCR de una captura de pantalla. No hay
coordenadas ni columnas: solo líneas en orden. El parser las recorre UNA
vez con un poco de estado (línea anterior, nombre acumulado, si ya se vio
la firma de la app) y asigna cada campo la primera vez que lo reconoce.

LAYOUTS CONOCIDOS (todos salen de la misma app):
1. Pago a comercio: fecha, firma, pagador + cuenta en una línea, nombre
   del comercio en tailandés partido en 2 líneas, cuenta del comercio,
   Amount/Fee, dos "Transaction ID:" con un "Merchant ID:" en medio.
2. Transferencia PromptPay: el nombre del destinatario viene precedido
   por "Prompt" / "Pay-" en líneas separadas.
3. Pago de servicios: la "cuenta" del destinatario es un número de
   contrato sin máscara ("011829186").
4. Firma al final: la firma "make by KBank" aparece después de los datos.
   Por eso la sección de cuentas se habilita con la firma O con la fecha.

ORDEN DE REGLAS POR LÍNEA (la primera que aplica gana y se pasa a la
siguiente línea sin actualizar prev_line):
1. Fecha/hora
2. Firma de la app (token centinela)
3. Cuenta (pagador primero, luego destinatario)
4. Acumular nombre (si todavía falta alguna cuenta)
5. Amount  6. Fee  7. Transaction ID (la última gana)
8. Nada aplicó → la línea pasa a ser prev_line
"""

import datetime as dt
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal

from slip_parser.adapters.input.slip_parsers.make_by_kbank_extractors import (
    extract_account,
    extract_amount,
    extract_datetime,
    extract_fee,
    extract_transaction_id,
)
from slip_parser.domain.models.payment_slip import PaymentProvider, PaymentSlip
from slip_parser.domain.ports.payment_slip_parser import PaymentSlipParser
from slip_parser.domain.shared.text_cleaner import (
    remove_phrases,
    replace_variants,
    split_lines,
)

# Firma de la app tal como la deja el OCR: partida en líneas o sin espacios.
_BRAND_RE = re.compile(r"make\s*by\s*KBank", re.IGNORECASE)


@dataclass
class _WalkState:
    """Estado de trabajo de un solo parse(). Nunca se comparte entre llamadas."""

    datetime: dt.datetime | None = None
    payer: str | None = None
    payer_account: str | None = None
    payee: str | None = None
    payee_account: str | None = None
    amount: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")
    transaction_id: str | None = None

    seen_brand: bool = False
    prev_line: str = ""
    pending_name_lines: list[str] = field(default_factory=list)

    @property
    def in_account_section(self) -> bool:
        return self.seen_brand or self.datetime is not None

    @property
    def has_open_account_slot(self) -> bool:
        return self.payer_account is None or self.payee_account is None

    def to_slip(self, provider: str) -> PaymentSlip:
        return PaymentSlip(
            provider=provider,
            datetime=self.datetime,
            payer=self.payer,
            payer_account=self.payer_account,
            payee=self.payee,
            payee_account=self.payee_account,
            amount=self.amount,
            fee=self.fee,
            transaction_id=self.transaction_id,
        )


def looks_like_make_by_kbank(text: str) -> bool:
    """Predicado por defecto: el texto trae la firma "make by KBank".

    Tolera que el OCR parta la firma en dos líneas o junte las palabras.
    También acepta texto ya normalizado (con el token centinela).
    """
    return bool(_BRAND_RE.search(text)) or (
        MakeByKBankParser.BRAND_SENTINEL in text
    )


class MakeByKBankParser(PaymentSlipParser):
    """Parser de comprobantes de la app "make by KBank".

    Args:
        can_parse: Predicado opcional para decidir si el texto es de esta
                   plantilla. Si no se pasa, se usa looks_like_make_by_kbank.
    """

    PROVIDER: PaymentProvider = PaymentProvider.MAKE_BY_KBANK

    BRAND_SENTINEL: str = "<Brand>"
    """Token que sustituye a la firma de la app. Marca el inicio (o el fin)
    de la sección de pagador/destinatario."""

    # --- Textos que se eliminan antes de recorrer las líneas ---
    NOISE_PHRASES: tuple[str, ...] = (
        "PAYMENT COMPLETED",
        "Scan to verify",
        # El OCR lee el ícono de la app como "CULO".
        "CULO",
    )

    # --- Variantes de la firma. La de dos líneas va primero. ---
    BRAND_VARIANTS: tuple[str, ...] = (
        "make\nby KBank",
        "make by KBank",
    )

    def __init__(self, can_parse: Callable[[str], bool] | None = None) -> None:
        self._can_parse = can_parse or looks_like_make_by_kbank

    @property
    def provider_name(self) -> str:
        return self.PROVIDER.value

    def can_parse(self, text: str) -> bool:
        return self._can_parse(text)

    def normalize(self, text: str) -> str:
        """Quita el ruido conocido y reemplaza la firma por el token centinela.

        No toca espacios ni saltos de línea.
        """
        text = remove_phrases(text, self.NOISE_PHRASES)
        return replace_variants(text, self.BRAND_VARIANTS, self.BRAND_SENTINEL)

    def parse(self, text: str) -> PaymentSlip:
        """Recorre las líneas normalizadas y devuelve el comprobante.

        Returns:
            PaymentSlip con provider='MakeByKBank'. Los campos que no se
            encuentran quedan en None; amount y fee en Decimal("0").
        """
        state = _WalkState()

        for line in split_lines(self.normalize(text)):
            self._walk_line(state, line)

        return state.to_slip(self.provider_name)

    # =================================================================
    # MÉTODOS PRIVADOS: Recorrido línea por línea
    # =================================================================

    def _walk_line(self, state: _WalkState, line: str) -> None:
        """Aplica las reglas en orden a una línea. La primera que aplica gana."""
        parsed_datetime = extract_datetime(line)
        if parsed_datetime is not None:
            state.datetime = parsed_datetime
            return

        if line == self.BRAND_SENTINEL:
            state.seen_brand = True
            return

        if state.in_account_section:
            if self._consume_account(state, line):
                return
            if state.has_open_account_slot:
                state.pending_name_lines.append(line)

        amount = extract_amount(state.prev_line, line)
        if amount is not None:
            state.amount = amount
            return

        fee = extract_fee(state.prev_line, line)
        if fee is not None:
            state.fee = fee
            return

        transaction_id = extract_transaction_id(state.prev_line, line)
        if transaction_id:
            # Se sobrescribe siempre: con IDs duplicados gana el último.
            state.transaction_id = transaction_id
            return

        state.prev_line = line

    def _consume_account(self, state: _WalkState, line: str) -> bool:
        """Asigna pagador o destinatario si la línea es un número de cuenta.

        El nombre es lo acumulado en pending_name_lines; si no hay nada
        acumulado, se usa prev_line.

        Returns:
            True si la línea se consumió como cuenta. Una tercera cuenta
            (ambos lugares ya ocupados) no se consume.
        """
        name_context = " ".join(state.pending_name_lines) or state.prev_line
        account = extract_account(name_context, line)
        if account is None:
            return False

        if state.payer_account is None:
            state.payer = account.name
            state.payer_account = account.number
        elif state.payee_account is None:
            state.payee = account.name
            state.payee_account = account.number
        else:
            return False

        state.pending_name_lines = []
        return True
