from __future__ import annotations

from fastapi import FastAPI

from stock_quotes.api.routes import router
from stock_quotes.config.settings import Settings, get_settings
from stock_quotes.integrations.finnhub_rest import FinnhubRestClient
from stock_quotes.services.quote_batcher import QuoteBatchAggregator


def build_aggregator(*, settings: Settings, api_key: str) -> QuoteBatchAggregator:
    fetcher = FinnhubRestClient(
        api_key=api_key,
        base_url=settings.FINNHUB_BASE_URL,
        timeout_sec=settings.FINNHUB_TIMEOUT_SEC,
    )
    return QuoteBatchAggregator(
        fetcher=fetcher,
        batch_size=settings.QUOTE_BATCH_SIZE,
        batch_delay_sec=settings.batch_delay_sec,
    )


app = FastAPI(title="Stock Quotes", version="0.1.0")
app.include_router(router)

# NOTE: settings are resolved per request so a missing key is a request error, not a startup crash.
app.state.get_settings = get_settings
app.state.build_aggregator = build_aggregator
