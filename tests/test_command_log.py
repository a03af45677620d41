from __future__ import annotations

import json

from commands import EditCommand, run_command
from config.settings import get_settings
from models.edit_descriptor import EditCompanyDescriptor
from models.index import Index
from services.model_manager import ModelManager


def test_command_trace_writes_jsonl(tmp_path, monkeypatch, make_company):
    log_path = tmp_path / "logs" / "commands.jsonl"
    monkeypatch.setenv("COMMAND_TRACE", "true")
    monkeypatch.setenv("COMMAND_LOG_PATH", str(log_path))
    get_settings.cache_clear()
    try:
        model = ModelManager([make_company(name="Acme")])
        run_command(EditCommand(Index.from_one_based(1), EditCompanyDescriptor(role="Lead")), model)
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        rec = json.loads(lines[0])
        assert rec["command"] == "edit"
        assert rec["status"] == "ok"
        assert rec["index"] == 1
        assert "role=Lead" in rec["descriptor"]
    finally:
        get_settings.cache_clear()


def test_no_trace_by_default(tmp_path, monkeypatch, make_company):
    monkeypatch.delenv("COMMAND_TRACE", raising=False)
    monkeypatch.setenv("COMMAND_LOG_PATH", str(tmp_path / "c.jsonl"))
    get_settings.cache_clear()
    try:
        run_command(EditCommand(Index.from_one_based(1), EditCompanyDescriptor(role="Lead")),
                    ModelManager([make_company()]))
        assert not (tmp_path / "c.jsonl").exists()
    finally:
        get_settings.cache_clear()
