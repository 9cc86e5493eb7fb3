"""Catalog cache shared by the CLI and the API."""

from __future__ import annotations

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import stores  # noqa: E402
from test_store import build_guide  # noqa: E402


def test_get_catalog_is_cached_per_source(tmp_path):
    path = tmp_path / "guide.sql"
    path.write_text(build_guide(), encoding="utf-8")

    first = stores.get_catalog(path)
    second = stores.get_catalog(str(path))

    assert first[0] is second[0]
    assert first[1] is second[1]

    stores.clear_catalogs()


def test_reload_rebuilds_store_and_index(tmp_path):
    path = tmp_path / "guide.sql"
    path.write_text(build_guide(), encoding="utf-8")
    store, index = stores.get_catalog(path)
    assert index.lookup("ctes") == ()

    path.write_text(
        build_guide() + "\n-- Totals\n-- @category: ctes\nWITH t AS (SELECT 1 AS x)\nSELECT * FROM t;\n",
        encoding="utf-8",
    )
    new_store, new_index = stores.reload_catalog(path)

    assert new_store is not store
    assert len(new_store) == len(store) + 1
    (entry,) = new_index.lookup("ctes")
    assert entry is new_store.get(9, "Totals")

    stores.clear_catalogs()
