"""Validation and formatting for the currency conversion command.

The request flow mirrors what a chatbot user sees: each missing or invalid
parameter produces its own message, and only a fully valid request reaches
the exchange-rate API.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from chatcmd.currency.currencies import CURRENCIES


class ConversionError(Exception):
    """Raised with a user-facing message when a conversion cannot proceed."""


@dataclass(frozen=True)
class ConversionRequest:
    value: float
    source: str
    target: str
    round_digits: int = 2


def format_number(value: float) -> str:
    """Render *value* without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_request(
    value: str | None,
    source: str | None,
    target: str | None,
    round_digits: int,
    list_url: str,
    currencies: Sequence[str] = CURRENCIES,
) -> ConversionRequest:
    """Validate raw query parameters into a ConversionRequest.

    Raises:
        ConversionError: A parameter is missing, unparseable or unsupported.
    """
    if not value:
        raise ConversionError('The "value" parameter has to be specified')
    if not source:
        raise ConversionError('The "from" parameter has to be specified')
    if not target:
        raise ConversionError('The "to" parameter has to be specified')

    try:
        amount = float(value.replace(",", ""))
    except ValueError:
        raise ConversionError(f'Invalid "value" specified ({value})')

    if amount == 0:
        amount = 1.0

    source = source.strip().upper()
    target = target.strip().upper()

    if source not in currencies:
        raise ConversionError(
            f'Invalid "from" currency specified ({source}) - '
            f"Available currencies can be found here: {list_url}"
        )
    if target not in currencies:
        raise ConversionError(
            f'Invalid "to" currency specified ({target}) - '
            f"Available currencies can be found here: {list_url}"
        )

    return ConversionRequest(amount, source, target, round_digits)


def convert(request: ConversionRequest, rates: dict[str, float], list_url: str) -> str:
    """Apply *rates* (keyed by lower-case code) and format the answer line.

    Raises:
        ConversionError: The target currency is missing from *rates*.
    """
    rate = rates.get(request.target.lower())
    if rate is None:
        raise ConversionError(
            f'Invalid "to" currency specified ({request.target}) - '
            f"Available currencies can be found here: {list_url}"
        )
    result = round(request.value * rate, request.round_digits)
    return (
        f"{format_number(request.value)} {request.source} = "
        f"{format_number(result)} {request.target}"
    )


def list_currencies(currencies: Sequence[str] = CURRENCIES) -> str:
    return "Available currencies: " + ", ".join(currencies)
