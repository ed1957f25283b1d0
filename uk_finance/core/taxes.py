from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from .inputs import BandedTax, BandLine

NOT_ELIGIBLE = "Not eligible for the selected relief at this price (simplified rule)."


def calc_banded_tax(
    amount: float, bands: Iterable[Tuple[float, Optional[float]]], extra_rate: float = 0.0
) -> BandedTax:
    """Progressive tax over (cap, rate) bands, with `extra_rate` added to every band."""
    prev_cap = 0.0
    tax = 0.0
    lines = []

    for cap, rate in bands:
        if rate is None:
            return BandedTax(ok=False, tax=math.nan, reason=NOT_ELIGIBLE)

        band_slice = max(0.0, min(amount, cap) - prev_cap)
        if band_slice > 0:
            effective_rate = rate + extra_rate
            slice_tax = band_slice * effective_rate
            tax += slice_tax
            lines.append(
                BandLine(
                    lower=prev_cap,
                    upper=None if math.isinf(cap) else cap,
                    slice=band_slice,
                    rate=effective_rate,
                    tax=slice_tax,
                )
            )

        prev_cap = cap
        if amount <= cap:
            break

    return BandedTax(ok=True, tax=tax, lines=tuple(lines))


def calc_width_banded_tax(amount: float, widths: Iterable[Tuple[float, float]]) -> BandedTax:
    """Progressive tax where each band is given by its width rather than its upper cap."""
    remaining = max(0.0, amount)
    lower = 0.0
    tax = 0.0
    lines = []

    for width, rate in widths:
        band_slice = max(0.0, min(remaining, width))
        if band_slice > 0:
            slice_tax = band_slice * rate
            tax += slice_tax
            lines.append(BandLine(lower=lower, upper=lower + band_slice, slice=band_slice, rate=rate, tax=slice_tax))
            remaining -= band_slice
            lower += band_slice
        if remaining <= 0:
            break

    return BandedTax(ok=True, tax=tax, lines=tuple(lines))
