"""
Tests para el parser de "make by KBank".

Los textos son salidas reales de OCR sobre capturas de la app (con los
datos personales cambiados). Cada uno cubre un layout distinto:
- Pago a comercio con IDs de transacción duplicados.
- Transferencia PromptPay con el nombre partido en varias líneas.
- Pago de servicios con número de contrato sin máscara.
- Firma de la app al final del comprobante.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from slip_parser.adapters.input.slip_parsers.make_by_kbank_parser import (
    MakeByKBankParser,
    looks_like_make_by_kbank,
)
from slip_parser.domain.models.payment_slip import PaymentSlip

MERCHANT_SLIP = """
PAYMENT COMPLETED
25 Oct 2025 17:33
make
by KBank
TEAM T xxx-X-x5304-x
CULO
ร้านโอมากาเสะดัง บาย
เท็ปเป็น
xxX-X-XXXXXX3150-x
Amount
594.00 Baht
Fee
0.00 Baht
Transaction ID: 045298506ck8rmkoLpp2
Merchant ID: KB000001923815
Transaction ID: APIC1761388405668WOR
Scan to verify
"""

PROMPTPAY_SLIP = """
TRANSFER
COMPLETED
26 Oct 2025 01:08
make
by KBank
TEAM T
xxX-X-X5304-x
Prompt
Pay-
SOMCHAI
JAIDEE
xXX-XXX-9595
Amount
65.00 Baht
Fee
0.00 Baht
Transaction ID: 045299506clfr4bvqjSI
Scan to verify
"""

BILL_PAYMENT_SLIP = """
PAYMENT
COMPLETED
25 Oct 2025 23:00
make by KBank
TEAM T
xxx-x-×5304-х
การไฟฟ้านครหลวง
011829186
Amount
1,688.10 Baht
Fee
0.00 Baht
Transaction ID: 045298506ckri6n6FnKQ
Scan to verify
"""

SIGNATURE_LAST_SLIP = """
PAYMENT COMPLETED
22 Oct 2025 19:40

TORLARB T
xxx-x-x5304-x

ไรม์ ไดเนอร์-สยามสแควร์
xxx-x-xxxxxx3150-x

Amount
415.00 Baht

Fee
0.00 Baht

Transaction ID: 045295506cbhvoj47b9h
Merchant ID: 451005731478001
Transaction ID: EDC17611367756039575

make
by KBank

QR Code: Scan to verify
"""


class TestMakeByKBankParser:
    """Tests de punta a punta sobre los layouts conocidos."""

    @pytest.fixture
    def parser(self):
        return MakeByKBankParser()

    def test_pago_a_comercio_con_ids_duplicados(self, parser):
        slip = parser.parse(MERCHANT_SLIP)

        assert slip.provider == "MakeByKBank"
        assert slip.datetime == datetime(2025, 10, 25, 17, 33)
        assert slip.amount == Decimal("594.00")
        assert slip.fee == Decimal("0")
        assert slip.payer == "TEAM T"
        assert slip.payer_account == "xxx-x-x5304-x"
        assert slip.payee == "ร้านโอมากาเสะดัง บาย เท็ปเป็น"
        assert slip.payee_account == "xxx-x-xxxxxx3150-x"
        assert slip.transaction_id == "APIC1761388405668WOR"

    def test_transferencia_promptpay(self, parser):
        slip = parser.parse(PROMPTPAY_SLIP)

        assert slip.datetime == datetime(2025, 10, 26, 1, 8)
        assert slip.amount == Decimal("65.00")
        assert slip.fee == Decimal("0")
        assert slip.payer == "TEAM T"
        assert slip.payer_account == "xxx-x-x5304-x"
        assert slip.payee == "Prompt Pay- SOMCHAI JAIDEE"
        assert slip.payee_account == "xxx-xxx-9595"
        assert slip.transaction_id == "045299506clfr4bvqjSI"

    def test_pago_de_servicios(self, parser):
        slip = parser.parse(BILL_PAYMENT_SLIP)

        assert slip.datetime == datetime(2025, 10, 25, 23, 0)
        assert slip.amount == Decimal("1688.10")
        assert slip.fee == Decimal("0")
        assert slip.payer == "TEAM T"
        assert slip.payer_account == "xxx-x-×5304-х"
        assert slip.payee == "การไฟฟ้านครหลวง"
        assert slip.payee_account == "011829186"
        assert slip.transaction_id == "045298506ckri6n6FnKQ"

    def test_firma_al_final(self, parser):
        slip = parser.parse(SIGNATURE_LAST_SLIP)

        assert slip.datetime == datetime(2025, 10, 22, 19, 40)
        assert slip.amount == Decimal("415.00")
        assert slip.fee == Decimal("0")
        assert slip.payer == "TORLARB T"
        assert slip.payer_account == "xxx-x-x5304-x"
        assert slip.payee == "ไรม์ ไดเนอร์-สยามสแควร์"
        assert slip.payee_account == "xxx-x-xxxxxx3150-x"
        assert slip.transaction_id == "EDC17611367756039575"

    def test_slips_completos_no_tienen_campos_faltantes(self, parser):
        for texto in (MERCHANT_SLIP, PROMPTPAY_SLIP, BILL_PAYMENT_SLIP, SIGNATURE_LAST_SLIP):
            assert parser.parse(texto).missing_fields == ()

    def test_devuelve_payment_slip_sin_moneda_ni_referencia(self, parser):
        slip = parser.parse(MERCHANT_SLIP)
        assert isinstance(slip, PaymentSlip)
        assert slip.currency is None
        assert slip.reference is None


class TestMakeByKBankWalkRules:
    """Reglas del recorrido línea por línea, con textos mínimos."""

    @pytest.fixture
    def parser(self):
        return MakeByKBankParser()

    def test_texto_vacio_devuelve_slip_vacio(self, parser):
        slip = parser.parse("")
        assert slip.provider == "MakeByKBank"
        assert slip.amount == Decimal("0")
        assert slip.fee == Decimal("0")
        assert slip.datetime is None
        assert slip.payer_account is None
        assert slip.transaction_id is None

    def test_tercera_cuenta_se_ignora(self, parser):
        texto = "\n".join(
            [
                "25 Oct 2025 17:33",
                "make by KBank",
                "TEAM T",
                "xxx-x-x5304-x",
                "SHOP A",
                "xxx-x-x1111-x",
                "SHOP B",
                "xxx-x-x2222-x",
                "Amount",
                "10.00 Baht",
            ]
        )
        slip = parser.parse(texto)

        assert slip.payer == "TEAM T"
        assert slip.payer_account == "xxx-x-x5304-x"
        assert slip.payee == "SHOP A"
        assert slip.payee_account == "xxx-x-x1111-x"
        assert slip.amount == Decimal("10.00")

    def test_cuentas_antes_de_la_seccion_no_se_consumen(self, parser):
        texto = "\n".join(
            [
                "0123456789",
                "25 Oct 2025 17:33",
                "TEAM T",
                "xxx-x-x5304-x",
            ]
        )
        slip = parser.parse(texto)

        assert slip.payer == "TEAM T"
        assert slip.payer_account == "xxx-x-x5304-x"
        assert slip.payee_account is None

    def test_sin_fecha_ni_firma_no_hay_cuentas(self, parser):
        texto = "TEAM T\nxxx-x-x5304-x\nAmount\n10.00 Baht"
        slip = parser.parse(texto)

        assert slip.payer_account is None
        assert slip.amount == Decimal("10.00")

    def test_nombre_toma_linea_previa_si_no_hay_acumulado(self, parser):
        # La línea "TEAM T" aparece antes de la firma: no se acumula,
        # pero queda como prev_line y sirve de nombre.
        texto = "TEAM T\nmake by KBank\nxxx-x-x5304-x"
        slip = parser.parse(texto)

        assert slip.payer == "TEAM T"
        assert slip.payer_account == "xxx-x-x5304-x"

    def test_transaction_id_el_ultimo_gana(self, parser):
        texto = "\n".join(
            [
                "Transaction ID: FIRST1",
                "Transaction ID: SECOND2",
                "Merchant ID: KB0001",
            ]
        )
        assert parser.parse(texto).transaction_id == "SECOND2"

    def test_transaction_id_con_etiqueta_en_linea_previa(self, parser):
        texto = "Transaction ID:\nABC123"
        assert parser.parse(texto).transaction_id == "ABC123"

    def test_fecha_repetida_se_sobrescribe(self, parser):
        texto = "25 Oct 2025 17:33\n26 Oct 2025 08:00"
        assert parser.parse(texto).datetime == datetime(2025, 10, 26, 8, 0)

    def test_monto_sin_etiqueta_se_ignora(self, parser):
        texto = "Total\n594.00 Baht\nFee\n5.00 Baht"
        slip = parser.parse(texto)

        assert slip.amount == Decimal("0")
        assert slip.fee == Decimal("5.00")

    def test_monto_consumido_no_cambia_prev_line(self, parser):
        # "594.00 Baht" se consume como monto; la línea previa sigue
        # siendo "Amount", así que el siguiente monto también se toma.
        texto = "Amount\n594.00 Baht\n600.00 Baht"
        assert parser.parse(texto).amount == Decimal("600.00")

    def test_monto_y_fecha_con_espacio_no_separable(self, parser):
        texto = "25 Oct 2025\u00a017:33\nAmount\n594.00\u00a0Baht"
        slip = parser.parse(texto)

        assert slip.datetime == datetime(2025, 10, 25, 17, 33)
        assert slip.amount == Decimal("594.00")

    def test_llamadas_independientes(self, parser):
        primero = parser.parse(MERCHANT_SLIP)
        segundo = parser.parse(PROMPTPAY_SLIP)
        tercero = parser.parse(MERCHANT_SLIP)

        assert primero == tercero
        assert segundo.payee == "Prompt Pay- SOMCHAI JAIDEE"


class TestMakeByKBankNormalize:
    @pytest.fixture
    def parser(self):
        return MakeByKBankParser()

    def test_quita_ruido(self, parser):
        texto = "PAYMENT COMPLETED\nCULO\nQR Code: Scan to verify"
        assert parser.normalize(texto) == "\n\nQR Code: "

    def test_firma_en_dos_lineas(self, parser):
        assert parser.normalize("a\nmake\nby KBank\nb") == "a\n<Brand>\nb"

    def test_firma_en_una_linea(self, parser):
        assert parser.normalize("a\nmake by KBank\nb") == "a\n<Brand>\nb"

    def test_no_toca_espacios(self, parser):
        assert parser.normalize("  TEAM  T  ") == "  TEAM  T  "


class TestMakeByKBankCanParse:
    def test_provider_name(self):
        assert MakeByKBankParser().provider_name == "MakeByKBank"

    @pytest.mark.parametrize(
        "texto",
        [MERCHANT_SLIP, BILL_PAYMENT_SLIP, "make  by\nKBank", "MAKE BY KBANK", "<Brand>"],
    )
    def test_reconoce_firma(self, texto):
        assert MakeByKBankParser().can_parse(texto)
        assert looks_like_make_by_kbank(texto)

    def test_no_reconoce_otro_banco(self):
        assert not MakeByKBankParser().can_parse("SCB EASY\nTransfer successful")

    def test_predicado_inyectado(self):
        parser = MakeByKBankParser(can_parse=lambda text: "TRANSFER" in text)

        assert parser.can_parse("TRANSFER\nCOMPLETED")
        assert not parser.can_parse(MERCHANT_SLIP)
