# tests/test_app.py
"""
CLI Tests - Integration Tests for the Command Line Entry Point

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stockperf.app (main)
- unittest.mock (patch to keep logging configuration out of pytest)
- pytest (testing framework, tmp_path and capsys fixtures)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patch logging setup

from stockperf.app import main


@pytest.fixture
def price_dir(tmp_path):
    (tmp_path / "MSFT.csv").write_text(
        "date,close\n"
        "2023-05-01,80\n"
        "2023-07-03,100\n"
        "2023-10-02,110\n"
        "2024-01-02,90\n"
        "2024-06-03,120\n",
        encoding="utf-8",
    )
    return tmp_path


@patch("stockperf.app.setup_logging")
class TestMain:
    def test_prints_reports(self, _setup_logging, price_dir, capsys):
        code = main(["msft", "--data-dir", str(price_dir), "-r", "1Y", "-r", "1M", "--today", "2024-06-30"])

        out = capsys.readouterr().out
        assert code == 0
        assert "MSFT 1Y" in out
        assert "— Period: 2023-07-03 → 2024-06-03 (4 prices)" in out
        assert "— CAGR: 20.00%" in out
        assert "MSFT 1M\n— Period: 2024-06-03 → 2024-06-03 (1 prices)" in out

    def test_no_data(self, _setup_logging, tmp_path, capsys):
        code = main(["AAPL", "--data-dir", str(tmp_path), "-r", "1Y", "--today", "2024-06-30"])

        assert code == 1
        assert "— No price data in range" in capsys.readouterr().out

    def test_decimals(self, _setup_logging, price_dir, capsys):
        main(["MSFT", "--data-dir", str(price_dir), "-r", "1Y", "--today", "2024-06-30", "--decimals", "0"])
        assert "— Start: 100\n" in capsys.readouterr().out

    def test_invalid_symbol(self, _setup_logging, price_dir):
        with pytest.raises(SystemExit) as exc:
            main(["../etc", "--data-dir", str(price_dir)])
        assert exc.value.code == 2

    def test_invalid_range(self, _setup_logging, price_dir):
        with pytest.raises(SystemExit):
            main(["MSFT", "--data-dir", str(price_dir), "-r", "1W"])

    def test_invalid_today(self, _setup_logging, price_dir):
        with pytest.raises(SystemExit):
            main(["MSFT", "--data-dir", str(price_dir), "--today", "yesterday"])

    @pytest.mark.parametrize("decimals", ["-1", "9"])
    def test_decimals_out_of_range(self, _setup_logging, price_dir, capsys, decimals):
        with pytest.raises(SystemExit) as exc:
            main(["MSFT", "--data-dir", str(price_dir), "-r", "1Y", "--decimals", decimals])
        assert exc.value.code == 2
        assert "--decimals must be between 0 and 8" in capsys.readouterr().err
