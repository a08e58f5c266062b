"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from filter_bench import filters, harness
from filter_bench.__main__ import main
from filter_bench.config import set_config


@pytest.fixture
def launched(monkeypatch):
    """Replace the pytest launch with a recorder returning the queued exit code."""
    calls = []
    exit_codes = [0]

    def fake_run(config):
        calls.append(config)
        return exit_codes[0]

    monkeypatch.setattr(harness, "run", fake_run)
    return calls, exit_codes


class TestMain:
    """Tests for the console script."""

    def test_exit_zero(self, launched, small_config, capsys):
        calls, _ = launched
        set_config(small_config)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert calls == [small_config]
        err = capsys.readouterr().err
        assert "filter_benchmark_starting" in err
        assert "filter_benchmark_finished" in err

    def test_exit_code_passed_through(self, launched, small_config):
        _, exit_codes = launched
        exit_codes[0] = 1
        set_config(small_config)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_invalid_config_rejected_before_work(self, launched, tmp_path, monkeypatch, capsys):
        """A bad report option stops the program before any data is generated."""
        calls, _ = launched
        generated = []
        monkeypatch.setattr(filters, "generate_dataset", lambda settings: generated.append(1))
        config_path = tmp_path / "filter-bench.yaml"
        config_path.write_text("report:\n  sort: speed\n")
        monkeypatch.setenv("FILTER_BENCH_CONFIG", str(config_path))
        monkeypatch.setattr("filter_bench.config._config", None)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert calls == []
        assert generated == []
        err = capsys.readouterr().err
        assert "invalid_configuration" in err
        assert "FILTERBENCH_1002" in err

    def test_missing_config_file(self, launched, tmp_path, monkeypatch):
        monkeypatch.setenv("FILTER_BENCH_CONFIG", str(tmp_path / "absent.yaml"))
        monkeypatch.setattr("filter_bench.config._config", None)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert launched[0] == []

    def test_memory_error_not_caught(self, monkeypatch, small_config):
        def exhausted(config):
            raise MemoryError

        monkeypatch.setattr(harness, "run", exhausted)
        set_config(small_config)

        with pytest.raises(MemoryError):
            main()
