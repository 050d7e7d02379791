"""Settings overrides read from secrets."""

from types import SimpleNamespace

import pytest

from core import constants
from core.constants import (
    CURRENCY_DEFAULT,
    FURNITURE_LOW_STOCK_THRESHOLD_DEFAULT,
    WOOD_LOW_STOCK_THRESHOLD_DEFAULT,
    currency,
    furniture_low_stock_threshold,
    wood_low_stock_threshold,
)


@pytest.fixture
def secrets(monkeypatch):
    def _set(values):
        monkeypatch.setattr(constants, "st", SimpleNamespace(secrets=values))
    return _set


class TestSettings:

    def test_wood_threshold_override(self, secrets):
        secrets({"settings": {"wood_low_stock_threshold": "12"}})
        assert wood_low_stock_threshold() == 12

    def test_furniture_threshold_override(self, secrets):
        secrets({"settings": {"furniture_low_stock_threshold": 3}})
        assert furniture_low_stock_threshold() == 3
        assert wood_low_stock_threshold() == WOOD_LOW_STOCK_THRESHOLD_DEFAULT

    def test_non_numeric_value_falls_back(self, secrets):
        secrets({"settings": {"wood_low_stock_threshold": "abc"}})
        assert wood_low_stock_threshold() == WOOD_LOW_STOCK_THRESHOLD_DEFAULT

    def test_no_settings_table(self, secrets):
        secrets({})
        assert furniture_low_stock_threshold() == FURNITURE_LOW_STOCK_THRESHOLD_DEFAULT
        assert currency() == CURRENCY_DEFAULT

    def test_currency_override(self, secrets):
        secrets({"settings": {"currency": "KES"}})
        assert currency() == "KES"
