"""
Utilidades para manejo de fechas del portal.

Las fechas llegan como texto en formato YYYY-MM-DD o DD-MM-YYYY, con
guion o barra como separador. Se trabaja siempre con fechas de
calendario (sin hora ni zona horaria).
"""

import re
import calendar
from datetime import date, datetime
from typing import Optional, Union

from ...infrastructure.config.constants import (
    DATE_FORMATS,
    DATE_SEPARATORS,
    MAX_DATE_YEAR,
    MIN_DATE_YEAR
)

_SEPARATOR_PATTERN = re.compile("[" + "".join(re.escape(sep) for sep in DATE_SEPARATORS) + "]")
_NUMERIC_PATTERN = re.compile(r"[0-9]+")


def parse_date(date_str) -> Optional[date]:
    """
    Convierte un texto de fecha en un objeto date.

    Si la primera parte tiene 4 dígitos el orden es (año, mes, día);
    en otro caso (día, mes, año). Las fechas imposibles (31 de abril,
    mes 13, ...) se rechazan, igual que los años de dos dígitos
    y los que quedan fuera del rango de trabajo.

    Returns:
        date o None si el texto no es una fecha válida
    """
    if not date_str or not isinstance(date_str, str):
        return None

    parts = _SEPARATOR_PATTERN.split(date_str.strip())
    if len(parts) != 3 or not all(_NUMERIC_PATTERN.fullmatch(part) for part in parts):
        return None

    if len(parts[0]) == 4:
        year, month, day = (int(part) for part in parts)
    else:
        day, month, year = (int(part) for part in parts)

    if not MIN_DATE_YEAR <= year <= MAX_DATE_YEAR:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(value: date, style: str = "iso") -> str:
    """Formatea una fecha ("iso" para YYYY-MM-DD, "display" para DD/MM/YYYY)."""
    return value.strftime(DATE_FORMATS[style])


def coerce_date(value: Union[date, datetime, str]) -> date:
    """
    Normaliza la fecha de consulta ("hoy") que entrega quien llama.

    Raises:
        ValueError: Si el valor no representa una fecha o está fuera de rango
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        if not MIN_DATE_YEAR <= value.year <= MAX_DATE_YEAR:
            raise ValueError(f"Fecha de consulta fuera de rango: {value!r}")
        return value
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"Fecha de consulta inválida: {value!r}")
    return parsed


def with_year(value: date, year: int) -> date:
    """Traslada una fecha a otro año; el 29 de febrero pasa al 28 en años no bisiestos."""
    _, last_day = calendar.monthrange(year, value.month)
    return date(year, value.month, min(value.day, last_day))
