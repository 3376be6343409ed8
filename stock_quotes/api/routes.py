import json
import traceback
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from stock_quotes.errors import ConfigurationError
from stock_quotes.schemas.quote import QuotesEnvelope
from stock_quotes.services.watchlist import default_symbols

router = APIRouter()

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
    'Access-Control-Allow-Methods': 'POST, GET, OPTIONS',
}

_METHODS = ['GET', 'POST', 'OPTIONS']


def _json(body: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


async def _resolve_symbols(request: Request) -> list:
    if request.method != 'POST':
        return default_symbols()

    raw = await request.body()
    if not raw.strip():
        return default_symbols()

    try:
        body = json.loads(raw)
    except ValueError as exc:
        print(f'[QUOTE][request_body_unparsed] error={exc}', flush=True)
        return default_symbols()

    symbols = body.get('symbols') if isinstance(body, dict) else None
    if isinstance(symbols, list) and symbols:
        return symbols
    return default_symbols()


async def stock_quotes(request: Request):
    if request.method == 'OPTIONS':
        return Response(status_code=200, headers={**CORS_HEADERS, 'Content-Type': 'application/json'})

    try:
        settings = request.app.state.get_settings()
        try:
            api_key = settings.require_api_key()
        except ConfigurationError as exc:
            print(f'[QUOTE][config_missing] error={exc}', flush=True)
            return _json({'error': 'Stock API not configured', 'quotes': []}, status_code=500)

        symbols = await _resolve_symbols(request)
        print(f'[QUOTE][request_start] method={request.method} symbol_count={len(symbols)}', flush=True)

        aggregator = request.app.state.build_aggregator(settings=settings, api_key=api_key)
        quotes = await run_in_threadpool(aggregator.aggregate, symbols)

        envelope = QuotesEnvelope(
            success=True,
            quotes=quotes,
            fetched_at=_now_iso(),
            count=len(quotes),
        )
        return _json(envelope.model_dump(by_alias=True))
    except Exception as exc:
        print(f'[QUOTE][handler_error] error={exc!r}', flush=True)
        traceback.print_exc()
        return _json(
            {
                'error': 'Failed to fetch stock quotes',
                'message': str(exc) or exc.__class__.__name__,
                'quotes': [],
            },
            status_code=500,
        )


# one route per documented method keeps OpenAPI operation ids unique
for _method in ('GET', 'POST'):
    router.add_api_route('/', stock_quotes, methods=[_method])
router.add_api_route('/', stock_quotes, methods=['OPTIONS'], include_in_schema=False)
router.add_api_route('/{path:path}', stock_quotes, methods=_METHODS, include_in_schema=False)
