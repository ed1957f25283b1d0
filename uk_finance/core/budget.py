from __future__ import annotations

import numpy as np


def inflation_factors(inflation_pct: float, months: int) -> np.ndarray:
    """Growth factor for each month, compounding annually with a fractional-year exponent."""
    years_elapsed = np.arange(max(months, 0)) / 12.0
    return (1 + inflation_pct / 100.0) ** years_elapsed


def inflated_cost_path(base: float, inflation_pct: float, months: int) -> np.ndarray:
    return base * inflation_factors(inflation_pct, months)


def cumulative_cost(path: np.ndarray) -> np.ndarray:
    """Running total, accumulated month by month in order."""
    return np.cumsum(path)


def total_cost(path: np.ndarray) -> float:
    if path.size == 0:
        return 0.0
    return float(cumulative_cost(path)[-1])
