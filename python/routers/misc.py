"""Router for /misc — currency conversion and time utilities."""

import logging

from fastapi import APIRouter, Query, Request

from chatcmd import clock, responses
from chatcmd.config import Settings
from chatcmd.currency.client import ExchangeRateClient
from chatcmd.currency.convert import ConversionError, convert, list_currencies, parse_request
from chatcmd.upstream import UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/misc", tags=["misc"])

# Initialised at startup, torn down at shutdown.
_rates: ExchangeRateClient | None = None


async def startup(settings: Settings) -> None:
    global _rates
    _rates = ExchangeRateClient(settings)


async def shutdown() -> None:
    global _rates
    if _rates is not None:
        await _rates.aclose()
        _rates = None


@router.get("/currency", name="misc_currency")
async def currency(
    request: Request,
    value: str | None = None,
    round_digits: str | None = Query(None, alias="round"),
):
    """Convert ``value`` from one currency to another (``from`` / ``to`` query params)."""
    if "list" in request.query_params:
        return responses.text(list_currencies())

    params = request.query_params
    list_url = f"{request.url_for('misc_currency')}?list"
    try:
        conversion = parse_request(
            value,
            params.get("from"),
            params.get("to"),
            responses.int_param(round_digits, 2),
            list_url,
        )
    except ConversionError as exc:
        return responses.text(str(exc))

    try:
        rates = await _rates.rates(conversion.source)
    except UpstreamError as exc:
        logger.error("/misc/currency request error: %s", exc)
        return responses.text("An error has occurred retrieving exchange rates.")

    try:
        return responses.text(convert(conversion, rates, list_url))
    except ConversionError as exc:
        return responses.text(str(exc))


@router.get("/time", name="misc_time")
def time(request: Request, timezone: str | None = None, format: str = clock.DEFAULT_TIME_FORMAT):
    """Current time in ``timezone``, formatted with a strftime ``format``."""
    timezones_url = request.url_for("misc_timezones")
    if not timezone:
        return responses.text(
            "-- Parameter `timezone` needs to be specified - "
            f"Available timezones can be found here: {timezones_url}"
        )
    if not clock.is_timezone(timezone):
        return responses.text(
            f'-- Invalid timezone specified ("{timezone}") - '
            f"Available timezones can be found here: {timezones_url}"
        )
    return responses.text(clock.current_time(timezone, format))


@router.get("/time-difference", name="misc_time_difference")
def time_difference(first: str | None = None, second: str | None = None, precision: str | None = None):
    """Human-readable difference between ``first`` and ``second`` (default: now)."""
    if not first:
        return responses.text("The `first` parameter has to be specified.")

    try:
        start = clock.parse_date(first)
        end = clock.parse_date(second) if second else clock.utcnow()
    except clock.InvalidDateError as exc:
        return responses.text(f"Invalid date specified: {exc}")

    digits = responses.int_param(precision, clock.DEFAULT_PRECISION)
    return responses.text(clock.date_difference(start, end, digits))


@router.get("/timezones", name="misc_timezones")
def timezones(request: Request):
    """Supported IANA timezones."""
    zones = clock.list_timezones()
    if responses.wants_json(request):
        return responses.json(zones)
    return responses.text("\n".join(zones))
