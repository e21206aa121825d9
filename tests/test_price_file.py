# tests/test_price_file.py
"""
Price File Tests - Unit Tests for CSV Price History Storage

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stockperf.adapters.persistence.price_file (CsvPriceHistory, load_prices, save_prices)
- stockperf.domain.models (ClosingPrice for test data)
- pytest (testing framework, tmp_path fixture)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Date utilities for test data
from decimal import Decimal  # Exact expected values

from stockperf.adapters.persistence.price_file import CsvPriceHistory, load_prices, save_prices
from stockperf.domain.models import ClosingPrice


class TestLoadPrices:
    def test_missing_file(self, tmp_path):
        assert load_prices(tmp_path / "NOPE.csv") == []

    def test_reads_rows_in_file_order(self, tmp_path):
        path = tmp_path / "MSFT.csv"
        path.write_text("date,close\n2024-01-03,101.5\n2024-01-02,100.25\n", encoding="utf-8")

        prices = load_prices(path)

        assert prices == [
            ClosingPrice(date(2024, 1, 3), Decimal("101.5")),
            ClosingPrice(date(2024, 1, 2), Decimal("100.25")),
        ]

    def test_skips_malformed_rows(self, tmp_path, caplog):
        path = tmp_path / "MSFT.csv"
        path.write_text(
            "date,close\n"
            "2024-01-02,100\n"
            "not-a-date,101\n"
            "2024-01-04,abc\n"
            "2024-01-05,-3\n"
            "2024-01-06,\n"
            "2024-01-08,102\n",
            encoding="utf-8",
        )

        prices = load_prices(path)

        assert [p.date for p in prices] == [date(2024, 1, 2), date(2024, 1, 8)]
        assert "Skipping malformed row 3" in caplog.text

    def test_skips_non_finite_rows(self, tmp_path, caplog):
        path = tmp_path / "MSFT.csv"
        path.write_text(
            "date,close\n"
            "2024-01-02,NaN\n"
            "2024-01-03,100\n"
            "2024-01-04,Infinity\n"
            "2024-01-05,sNaN\n",
            encoding="utf-8",
        )

        prices = load_prices(path)

        assert prices == [ClosingPrice(date(2024, 1, 3), Decimal("100"))]
        assert "Skipping malformed row 2" in caplog.text
        assert "Skipping malformed row 4" in caplog.text


class TestSavePrices:
    def test_writes_sorted_csv(self, tmp_path):
        path = tmp_path / "sub" / "MSFT.csv"
        save_prices(path, [
            ClosingPrice(date(2024, 1, 3), Decimal("101.5")),
            ClosingPrice(date(2024, 1, 2), Decimal("100.25")),
        ])

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == ["date,close", "2024-01-02,100.25", "2024-01-03,101.5"]
        assert not list(path.parent.glob("*.tmp"))


class TestCsvPriceHistory:
    def test_path_for_upper_cases_symbol(self, tmp_path):
        history = CsvPriceHistory(tmp_path)
        assert history.path_for(" msft ") == tmp_path / "MSFT.csv"

    def test_store_and_read_back(self, tmp_path):
        history = CsvPriceHistory(tmp_path)
        prices = [ClosingPrice(date(2024, 1, 2), Decimal("10")), ClosingPrice(date(2024, 1, 3), Decimal("11"))]

        history.store("msft", prices)

        assert history.closing_prices("MSFT") == prices

    def test_unknown_symbol(self, tmp_path):
        assert CsvPriceHistory(tmp_path).closing_prices("AAPL") == []
