from __future__ import annotations

from uk_finance.core.tables import PERIODS_PER_YEAR


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def validate_frequency(frequency: str) -> None:
    # Payment types are not checked: anything but "interestOnly" amortizes as repayment.
    _require(frequency in PERIODS_PER_YEAR, f"Unsupported frequency: {frequency}")
