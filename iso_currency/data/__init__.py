# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from pathlib import Path


# Bundled ISO 4217 table, one header line followed by one tab-separated row per currency
TABLE_PATH: Path = Path(__file__).resolve().parent / "isodata.tsv"
