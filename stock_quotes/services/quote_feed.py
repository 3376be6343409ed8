from __future__ import annotations

import time
from typing import Any, Optional

import requests
from pydantic import ValidationError

from stock_quotes.errors import QuoteFeedError
from stock_quotes.schemas.quote import DisplayQuote, Quote, QuotesEnvelope
from stock_quotes.services.watchlist import GLOBAL_WATCHLIST, display_name, logo_url, short_symbol


def to_display(quote: Quote) -> DisplayQuote:
    return DisplayQuote(
        symbol=quote.symbol,
        display_symbol=short_symbol(quote.symbol),
        name=display_name(quote.symbol),
        current_price=quote.current_price,
        change=quote.change or 0.0,
        percent_change=quote.percent_change or 0.0,
        is_up=(quote.percent_change or 0.0) >= 0,
        logo=logo_url(quote.symbol),
    )


def placeholder_rows(symbols: list[str]) -> list[DisplayQuote]:
    return [
        DisplayQuote(
            symbol=s,
            display_symbol=short_symbol(s),
            name=display_name(s),
            current_price=0.0,
            change=0.0,
            percent_change=0.0,
            is_up=True,
            logo=logo_url(s),
        )
        for s in symbols
    ]


class QuoteFeed:
    """Client of the quotes endpoint that keeps the last good watchlist rows."""

    def __init__(
        self,
        endpoint_url: str,
        anon_key: str = "",
        symbols: Optional[list[str]] = None,
        session: Optional[Any] = None,
        timeout_sec: float = 30.0,
        refresh_interval_sec: float = 120.0,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.anon_key = anon_key
        self.symbols = list(symbols) if symbols is not None else list(GLOBAL_WATCHLIST)
        self.session = session or requests
        self.timeout_sec = timeout_sec
        self.refresh_interval_sec = refresh_interval_sec

        self.rows: list[DisplayQuote] = placeholder_rows(self.symbols)
        self.error: str | None = None
        self.last_updated: float | None = None
        self.last_attempt: float | None = None

    def fetch_envelope(self) -> QuotesEnvelope:
        try:
            response = self.session.post(
                self.endpoint_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.anon_key}",
                    "apikey": self.anon_key,
                },
                json={"symbols": self.symbols},
                timeout=self.timeout_sec,
            )
        except requests.RequestException as exc:
            raise QuoteFeedError(f"quotes endpoint unreachable: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise QuoteFeedError(f"Failed to fetch quotes: {response.status_code}")

        try:
            return QuotesEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise QuoteFeedError(f"unexpected quotes payload: {exc}") from exc

    def is_due(self, now: float | None = None) -> bool:
        if self.last_attempt is None:
            return True
        if self.refresh_interval_sec <= 0:
            return False
        current = time.time() if now is None else now
        return current - self.last_attempt >= self.refresh_interval_sec

    def refresh_if_due(self, now: float | None = None) -> list[DisplayQuote]:
        if self.is_due(now):
            return self.refresh()
        return self.rows

    def refresh(self) -> list[DisplayQuote]:
        self.error = None
        self.last_attempt = time.time()
        try:
            envelope = self.fetch_envelope()
        except QuoteFeedError as exc:
            print(f"[QUOTE][feed_error] error={exc}", flush=True)
            self.error = "Failed to fetch stock quotes"
            return self.rows

        if envelope.success and envelope.quotes:
            self.rows = [to_display(q) for q in envelope.quotes]
            self.last_updated = time.time()
        return self.rows
