from __future__ import annotations

from typing import Any, Optional

import requests
from pydantic import ValidationError

from stock_quotes.schemas.quote import Quote, QuoteFetchResult


class FinnhubRestClient:
    """Finnhub quote client that reports every failure as an absent result."""

    DEFAULT_BASE_URL = "https://finnhub.io/api/v1"

    def __init__(
        self,
        api_key: str,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout_sec: float = 5.0,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")

        self.api_key = api_key
        self.session = session or requests
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout_sec = timeout_sec

    @staticmethod
    def _is_no_data(quote: Quote) -> bool:
        # Finnhub answers unknown symbols with c=0 and d=0
        return quote.current_price == 0 and quote.change == 0

    def fetch_quote(self, symbol: str) -> QuoteFetchResult:
        if not isinstance(symbol, str) or not symbol.strip():
            print(f"[QUOTE][fetch_invalid_symbol] symbol={symbol!r}", flush=True)
            return QuoteFetchResult.absent(str(symbol), "INVALID_SYMBOL")

        try:
            response = self.session.get(
                f"{self.base_url}/quote",
                params={"symbol": symbol, "token": self.api_key},
                timeout=self.timeout_sec,
            )
        except requests.RequestException as exc:
            print(f"[QUOTE][fetch_transport_error] symbol={symbol} error={exc}", flush=True)
            return QuoteFetchResult.absent(symbol, "TRANSPORT_ERROR")

        status = response.status_code
        if not 200 <= status < 300:
            print(f"[QUOTE][fetch_http_error] symbol={symbol} status={status}", flush=True)
            return QuoteFetchResult.absent(symbol, f"HTTP_STATUS_{status}")

        try:
            payload = response.json()
            if not isinstance(payload, dict):
                raise TypeError(f"expected object, got {type(payload).__name__}")
            quote = Quote.from_finnhub(symbol, payload)
        except (ValueError, KeyError, TypeError, ValidationError) as exc:
            # requests' JSONDecodeError and pydantic's ValidationError are ValueErrors
            print(f"[QUOTE][fetch_invalid_payload] symbol={symbol} error={exc}", flush=True)
            return QuoteFetchResult.absent(symbol, "INVALID_PAYLOAD")

        if self._is_no_data(quote):
            print(f"[QUOTE][fetch_no_data] symbol={symbol}", flush=True)
            return QuoteFetchResult.absent(symbol, "NO_DATA")

        return QuoteFetchResult.present(quote)
