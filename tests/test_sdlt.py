import logging
import math

import pytest

from uk_finance.core.inputs import SdltOptions
from uk_finance.core.sdlt import calc_sdlt, sdlt_surcharge
from uk_finance.core.tables import SDLT_BANDS_MAIN
from uk_finance.core.taxes import calc_banded_tax


@pytest.mark.parametrize(
    "price, expected",
    [
        (0, 0),
        (125_000, 0),
        (250_000, 2_500),
        (300_000, 5_000),
        (1_000_000, 43_750),
        (2_000_000, 153_750),
    ],
)
def test_standard_rates(price, expected):
    result = calc_sdlt(price)
    assert result.ok
    assert result.total == pytest.approx(expected)
    assert result.base == pytest.approx(expected)


def test_band_lines():
    result = calc_sdlt(300_000)
    assert [line.lower for line in result.lines] == [0, 125_000, 250_000]
    assert [line.upper for line in result.lines] == [125_000, 250_000, 925_000]
    assert result.lines[-1].slice == 50_000
    assert sum(line.tax for line in result.lines) == pytest.approx(result.total)


def test_top_band_is_open():
    result = calc_sdlt(2_000_000)
    assert result.lines[-1].upper is None
    assert result.lines[-1].rate == pytest.approx(0.12)


@pytest.mark.parametrize("price, expected", [(300_000, 0), (400_000, 5_000), (500_000, 10_000)])
def test_first_time_buyer_relief(price, expected):
    result = calc_sdlt(price, SdltOptions(buyer_type="ftb"))
    assert result.ok
    assert result.total == pytest.approx(expected)


def test_first_time_buyer_relief_not_available_above_cap(caplog):
    with caplog.at_level(logging.WARNING, logger="uk_finance.core.sdlt"):
        result = calc_sdlt(600_000, SdltOptions(buyer_type="ftb"))
    assert not result.ok
    assert math.isnan(result.total)
    assert result.reason
    assert "not applicable" in caplog.text


def test_unknown_buyer_type_uses_standard_rates():
    assert calc_sdlt(300_000, SdltOptions(buyer_type="investor")).total == pytest.approx(5_000)


def test_additional_property_surcharge():
    result = calc_sdlt(300_000, SdltOptions(additional_property=True))
    assert result.extra_rate == pytest.approx(0.05)
    assert result.total == pytest.approx(20_000)
    assert result.base == pytest.approx(5_000)


def test_surcharges_stack():
    options = SdltOptions(additional_property=True, non_uk_resident=True)
    assert sdlt_surcharge(options) == pytest.approx(0.07)
    assert calc_sdlt(100_000, options).total == pytest.approx(7_000)


def test_banded_tax_stops_at_price():
    result = calc_banded_tax(200_000, SDLT_BANDS_MAIN)
    assert result.ok
    assert len(result.lines) == 2
    assert result.tax == pytest.approx(1_500)
