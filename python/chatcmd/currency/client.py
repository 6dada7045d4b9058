"""Exchange-rate lookups against the fawazahmed0 currency API."""
from __future__ import annotations

from chatcmd.config import Settings
from chatcmd.upstream import UpstreamClient, UpstreamError


class ExchangeRateClient(UpstreamClient):
    """Fetches the latest rates for one base currency."""

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings, base_url=settings.currency_api_base_url.rstrip("/"))

    async def rates(self, base: str) -> dict[str, float]:
        """Return ``{currency_code_lower: rate}`` for one unit of *base*.

        Raises:
            UpstreamError: Request failed or the body has no rates for *base*.
        """
        base_lower = base.lower()
        body = await self._get_json(f"/{base_lower}.json")
        rates = body.get(base_lower) if isinstance(body, dict) else None
        if not rates or not isinstance(rates, dict):
            raise UpstreamError(f"No exchange rates returned for {base}")
        return {code: float(rate) for code, rate in rates.items() if isinstance(rate, (int, float))}
