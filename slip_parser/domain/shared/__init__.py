"""
Utilidades compartidas del dominio.

Estas funciones son usadas por los parsers de comprobantes y no dependen
de ninguna librería externa. Solo operan sobre tipos nativos de Python.

Uso:
    from slip_parser.domain.shared.money import parse_money, format_money
    from slip_parser.domain.shared.month_map import month_to_int
    from slip_parser.domain.shared.date_parser import parse_slip_datetime
    from slip_parser.domain.shared.text_cleaner import remove_phrases, replace_variants
"""
