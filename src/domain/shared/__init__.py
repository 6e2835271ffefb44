"""
Utilidades compartidas del dominio.

Funciones puras sobre tipos nativos de Python, sin librerías externas.

Uso:
    from src.domain.shared.money import money_from, parse_money
    from src.domain.shared.name_parser import name_from
    from src.domain.shared.date_parser import date_from
    from src.domain.shared.grouping import group_by
    from src.domain.shared.text_cleaner import split_statement_lines
"""
