from __future__ import annotations

import logging
import math
from typing import Optional

from .inputs import SdltOptions, SdltResult
from .tables import (
    SDLT_ADDITIONAL_PROPERTY_SURCHARGE,
    SDLT_BANDS_FTB,
    SDLT_BANDS_MAIN,
    SDLT_NON_UK_RESIDENT_SURCHARGE,
)
from .taxes import calc_banded_tax

logger = logging.getLogger(__name__)


def sdlt_surcharge(options: SdltOptions) -> float:
    surcharge = 0.0
    if options.additional_property:
        surcharge += SDLT_ADDITIONAL_PROPERTY_SURCHARGE
    if options.non_uk_resident:
        surcharge += SDLT_NON_UK_RESIDENT_SURCHARGE
    return surcharge


def calc_sdlt(price: float, options: Optional[SdltOptions] = None) -> SdltResult:
    """Residential SDLT for England / Northern Ireland.

    First-time buyer relief is used when `buyer_type` is "ftb"; any other value
    gets the standard bands. Above the relief cap the result is `ok=False`.
    `total` includes surcharges, `base` is the same purchase without them.
    """
    options = options or SdltOptions()
    extra_rate = sdlt_surcharge(options)
    bands = SDLT_BANDS_FTB if options.buyer_type == "ftb" else SDLT_BANDS_MAIN

    result = calc_banded_tax(price, bands, extra_rate)
    if not result.ok:
        logger.warning("SDLT relief not applicable at price %.0f: %s", price, result.reason)
        return SdltResult(ok=False, total=math.nan, base=math.nan, extra_rate=extra_rate, reason=result.reason)

    base = calc_banded_tax(price, bands).tax
    return SdltResult(ok=True, total=result.tax, base=base, extra_rate=extra_rate, lines=result.lines)
