from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation


FRACTIONS = {
    "½": "0.5",
    "¼": "0.25",
    "¾": "0.75",
}

CURRENCY_SUFFIX = re.compile(r"\s*(₽|руб\.?|р\.?)$", re.IGNORECASE)


def parse_quantity(text: str) -> Decimal:
    """
    Парсинг количества, введённого пользователем.

    Поддерживаемые форматы:
    - 2
    - 1.5 или 1,5
    - ½ или 1½
    """
    value = text.strip().replace(",", ".")
    if not value:
        raise ValueError("Не удалось распознать количество")

    for symbol, fraction in FRACTIONS.items():
        if value.endswith(symbol):
            whole = value[: -len(symbol)].strip() or "0"
            try:
                return Decimal(whole) + Decimal(fraction)
            except InvalidOperation as exc:
                raise ValueError("Не удалось распознать количество") from exc

    try:
        number = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError("Не удалось распознать количество") from exc
    if not number.is_finite():
        raise ValueError("Не удалось распознать количество")
    return number


def parse_cost(text: str) -> Decimal:
    """Сумма из чека: пробелы-разделители тысяч и суффикс валюты отбрасываются."""
    value = CURRENCY_SUFFIX.sub("", text.strip())
    value = re.sub(r"\s+", "", value).replace(",", ".")
    try:
        number = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError("Некорректная сумма") from exc
    if not number.is_finite():
        raise ValueError("Некорректная сумма")
    return number
