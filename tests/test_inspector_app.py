from __future__ import annotations

import asyncio
import json

from textual.widgets import DataTable

from frontend.app import InspectorApp


def _run_inspector(config_file: str) -> tuple[InspectorApp, dict[str, int]]:
    async def _run() -> tuple[InspectorApp, dict[str, int]]:
        app = InspectorApp(config_file=config_file)
        async with app.run_test() as pilot:
            await pilot.pause()
            counts = {
                table_id: app.query_one(f"#{table_id}", DataTable).row_count
                for table_id in ("block-table", "draft-table", "providers-table")
            }
        return app, counts

    return asyncio.run(_run())


def test_inspector_lists_resolved_rows(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"discord": {"accounts": {"work": {}}}, "telegram": {"accounts": {"ops": {}}}}),
        encoding="utf-8",
    )

    app, counts = _run_inspector(str(path))

    # 7 providers with a default account each, plus discord/work and telegram/ops.
    assert counts == {"block-table": 9, "draft-table": 2, "providers-table": 6}
    assert app.config_state.error is None
    assert app.config_state.data is not None


def test_inspector_reports_unreadable_config(tmp_path) -> None:
    app, counts = _run_inspector(str(tmp_path))

    assert app.config_state.data is None
    assert app.config_state.error is not None
    assert app.config_state.error.startswith("config.json unreadable")
    assert counts["block-table"] == 7


def test_inspector_reports_invalid_json(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    app, counts = _run_inspector(str(path))

    assert app.config_state.error is not None
    assert app.config_state.error.startswith("config.json error")
    assert counts["block-table"] == 7
