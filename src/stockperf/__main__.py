# src/stockperf/__main__.py
"""Module entry point: python -m stockperf."""

from stockperf.app import main

raise SystemExit(main())
