import json
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from stock_quotes.services import watchlist


class SmokeTest(unittest.TestCase):
    def test_default_watchlist_has_27_unique_symbols(self):
        self.assertEqual(len(watchlist.DEFAULT_WATCHLIST), 27)
        self.assertEqual(len(set(watchlist.DEFAULT_WATCHLIST)), 27)
        self.assertEqual(watchlist.default_symbols()[:3], ['AAPL', 'GOOGL', 'MSFT'])

    def test_default_symbols_returns_a_fresh_list(self):
        symbols = watchlist.default_symbols()
        symbols.append('EXTRA')

        self.assertEqual(len(watchlist.default_symbols()), 27)

    def test_display_metadata_falls_back_to_symbol(self):
        self.assertEqual(watchlist.display_name('0857.HK'), 'PetroChina')
        self.assertEqual(watchlist.short_symbol('0857.HK'), 'PTRCN')
        self.assertEqual(watchlist.display_name('ZZZZ'), 'ZZZZ')
        self.assertEqual(watchlist.short_symbol('ZZZZ'), 'ZZZZ')
        self.assertEqual(len(watchlist.GLOBAL_WATCHLIST), 27)
        self.assertTrue(all(watchlist.logo_url(s) for s in watchlist.GLOBAL_WATCHLIST))
        self.assertEqual(watchlist.logo_url('ZZZZ'), '')

    def test_api_docs_build_artifacts_generated(self):
        repo_root = Path(__file__).resolve().parents[1]
        with tempfile.TemporaryDirectory() as tmp:
            subprocess.run(
                [sys.executable, 'scripts/build_api_docs_site.py', tmp], cwd=repo_root, check=True
            )

            spec = json.loads((Path(tmp) / 'openapi.json').read_text(encoding='utf-8'))
            summary = (Path(tmp) / 'endpoints.md').read_text(encoding='utf-8')

        self.assertEqual(spec['info']['title'], 'Stock Quotes')
        self.assertEqual(sorted(spec['paths']['/']), ['get', 'post'])
        self.assertIn('- `GET /`', summary)
        self.assertIn('- `POST /`', summary)
        self.assertIn('Access-Control-Allow-Methods: POST, GET, OPTIONS', summary)
        self.assertIn('## Default watchlist (27)', summary)


if __name__ == '__main__':
    unittest.main()
