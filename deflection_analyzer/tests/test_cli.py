from __future__ import annotations

import pytest

import deflection_analyzer.server as server
from deflection_analyzer.__main__ import main
from deflection_analyzer.errors import OutputWriteError, ParseError


def test_default_n_is_passed_to_run(monkeypatch) -> None:
    seen = []
    monkeypatch.setattr(server, "run", lambda cfg: seen.append(cfg))
    assert main([]) == 0
    assert seen[0].n == 10


def test_n_flag(monkeypatch) -> None:
    seen = []
    monkeypatch.setattr(server, "run", lambda cfg: seen.append(cfg))
    assert main(["-n", "25"]) == 0
    assert seen[0].n == 25


def test_invalid_n_is_a_usage_error(monkeypatch) -> None:
    monkeypatch.setattr(server, "run", lambda cfg: pytest.fail("must not run"))
    with pytest.raises(SystemExit) as ei:
        main(["-n", "0"])
    assert ei.value.code == 2


def test_analyzer_error_exits_non_zero(monkeypatch, caplog) -> None:
    def boom(cfg):
        raise ParseError("cup_deflected_1.txt", 2, "0\tx", "non-numeric value 'x'")

    monkeypatch.setattr(server, "run", boom)
    assert main([]) == 1
    assert any(r.levelname == "CRITICAL" for r in caplog.records)


def test_output_failure_names_the_output_not_the_server(monkeypatch, caplog) -> None:
    def boom(cfg):
        raise OutputWriteError(cfg.output_dir, "Permission denied")

    monkeypatch.setattr(server, "run", boom)
    assert main([]) == 1
    critical = [r.getMessage() for r in caplog.records if r.levelname == "CRITICAL"]
    assert critical == ["Cannot write output 'data/html': Permission denied"]


def test_bind_failure_is_reported_as_server_start(monkeypatch, caplog) -> None:
    def boom(cfg):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(server, "run", boom)
    assert main([]) == 1
    critical = [r.getMessage() for r in caplog.records if r.levelname == "CRITICAL"]
    assert len(critical) == 1
    assert critical[0].startswith("cannot start server at http://localhost:8089")
