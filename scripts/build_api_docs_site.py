from __future__ import annotations

import json
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from stock_quotes.api.routes import CORS_HEADERS
from stock_quotes.main import app
from stock_quotes.services.watchlist import DEFAULT_WATCHLIST

DEFAULT_OUT_DIR = REPO_ROOT / "docs" / "api"


def render_endpoint_summary(openapi: dict) -> str:
    lines = [f"# {openapi['info']['title']} {openapi['info']['version']}", "", "## Endpoints", ""]
    for path, operations in sorted(openapi.get("paths", {}).items()):
        for method in sorted(operations):
            lines.append(f"- `{method.upper()} {path}`")
    lines.append("- `OPTIONS *` (preflight, empty body)")
    lines += ["", "## Response headers", ""]
    lines += [f"- `{name}: {value}`" for name, value in CORS_HEADERS.items()]
    lines += ["", f"## Default watchlist ({len(DEFAULT_WATCHLIST)})", "", ", ".join(DEFAULT_WATCHLIST), ""]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    out_dir = Path(args[0]) if args else DEFAULT_OUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)

    openapi = app.openapi()
    (out_dir / "openapi.json").write_text(
        json.dumps(openapi, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    (out_dir / "endpoints.md").write_text(render_endpoint_summary(openapi), encoding="utf-8")
    print(f"[DOCS][api_docs_built] out_dir={out_dir}", flush=True)


if __name__ == "__main__":
    main()
