from __future__ import annotations

import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterator, Sequence

from stock_quotes.schemas.quote import Quote, QuoteFetchResult

DEFAULT_BATCH_SIZE = 10
DEFAULT_BATCH_DELAY_SEC = 0.2


def partition_batches(symbols: Sequence[str], batch_size: int) -> Iterator[list[str]]:
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    for start in range(0, len(symbols), batch_size):
        yield list(symbols[start:start + batch_size])


class QuoteBatchAggregator:
    """Fetches quotes batch by batch, pausing between batches to stay under the upstream rate limit.

    Every fetch in a batch runs concurrently and the whole batch settles before the
    next one starts, so no more than ``batch_size`` calls are ever in flight.
    Symbols that resolve to nothing are dropped; nothing is retried.
    """

    def __init__(
        self,
        *,
        fetcher,
        batch_size: int = DEFAULT_BATCH_SIZE,
        batch_delay_sec: float = DEFAULT_BATCH_DELAY_SEC,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        self.fetcher = fetcher
        self.batch_size = batch_size
        self.batch_delay_sec = batch_delay_sec
        self.sleep = sleep or time.sleep

    def _fetch_one(self, symbol: str) -> QuoteFetchResult:
        return self.fetcher.fetch_quote(symbol)

    def _run_batch(self, batch: list[str]) -> list[QuoteFetchResult]:
        results: list[QuoteFetchResult] = []
        with ThreadPoolExecutor(max_workers=len(batch), thread_name_prefix="quote-fetch") as pool:
            futures = {pool.submit(self._fetch_one, symbol): symbol for symbol in batch}
            for future in as_completed(futures):
                symbol = futures[future]
                try:
                    results.append(future.result())
                except Exception as exc:
                    print(f"[QUOTE][fetch_unexpected_error] symbol={symbol} error={exc!r}", flush=True)
                    results.append(QuoteFetchResult.absent(str(symbol), "UNEXPECTED_ERROR"))
        return results

    def aggregate(self, symbols: Sequence[str]) -> list[Quote]:
        batches = list(partition_batches(symbols, self.batch_size))
        quotes: list[Quote] = []
        absent_reasons: Counter[str] = Counter()

        for index, batch in enumerate(batches):
            print(
                f"[QUOTE][batch_start] batch={index + 1}/{len(batches)} size={len(batch)}",
                flush=True,
            )
            for result in self._run_batch(batch):
                if result.ok:
                    quotes.append(result.quote)
                else:
                    absent_reasons[result.reason] += 1
            print(
                f"[QUOTE][batch_done] batch={index + 1}/{len(batches)} total_quotes={len(quotes)}",
                flush=True,
            )

            if index < len(batches) - 1:
                self.sleep(self.batch_delay_sec)

        print(
            "[QUOTE][aggregate_done] "
            f"target_count={len(symbols)} batch_count={len(batches)} "
            f"final_count={len(quotes)} absent_count={sum(absent_reasons.values())} "
            f"absent_reasons={dict(absent_reasons)}",
            flush=True,
        )
        return quotes

