import os

import uvicorn

from stock_quotes.main import app


def main() -> None:
    host = os.getenv("STOCK_QUOTES_HOST", "0.0.0.0")
    port = int(os.getenv("STOCK_QUOTES_PORT", "8000"))

    print(f"[QUOTE][server_start] host={host} port={port}", flush=True)
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
