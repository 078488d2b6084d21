"""Utility functions for maquitrack."""

from maquitrack.utils.date_parser import parse_date, normalize_date, excel_date_to_iso
from maquitrack.utils.number_parser import parse_amount, coerce_decimal, coerce_int

__all__ = [
    "parse_date",
    "normalize_date",
    "excel_date_to_iso",
    "parse_amount",
    "coerce_decimal",
    "coerce_int",
]
