from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol: str
    current_price: float = Field(alias="currentPrice")
    change: float
    percent_change: float = Field(alias="percentChange")
    high: float
    low: float
    open: float
    previous_close: float = Field(alias="previousClose")
    timestamp: int

    @classmethod
    def from_finnhub(cls, symbol: str, payload: dict) -> "Quote":
        return cls(
            symbol=symbol,
            current_price=payload["c"],
            change=payload["d"],
            percent_change=payload["dp"],
            high=payload["h"],
            low=payload["l"],
            open=payload["o"],
            previous_close=payload["pc"],
            timestamp=payload["t"],
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class QuoteFetchResult(BaseModel):
    """Outcome of one upstream quote call: a quote, or the reason there is none."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    ok: bool
    quote: Quote | None = None
    reason: str | None = None

    @classmethod
    def present(cls, quote: Quote) -> "QuoteFetchResult":
        return cls(symbol=quote.symbol, ok=True, quote=quote)

    @classmethod
    def absent(cls, symbol: str, reason: str) -> "QuoteFetchResult":
        return cls(symbol=symbol, ok=False, reason=reason)


class QuotesEnvelope(BaseModel):
    success: bool
    quotes: list[Quote]
    fetched_at: str = Field(alias="fetchedAt")
    count: int

    model_config = ConfigDict(populate_by_name=True)


class DisplayQuote(BaseModel):
    symbol: str
    display_symbol: str
    name: str
    current_price: float
    change: float
    percent_change: float
    is_up: bool
    logo: str = ""
