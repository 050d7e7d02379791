"""Sales page metric row."""

from core.store import init_store
from page_modules.sales import day_metrics


class TestDayMetrics:

    def test_day_without_sales_shows_no_average(self):
        metrics = dict(day_metrics(init_store().sales, "2030-01-01"))
        assert metrics["Today's Sales"] == 0
        assert metrics["Today's Revenue"] == "UGX 0"
        assert metrics["Average Sale"] == "N/A"

    def test_day_with_a_sale(self):
        metrics = dict(day_metrics(init_store().sales, "2024-01-15"))
        assert metrics["Today's Sales"] == 1
        assert metrics["Average Sale"] == "UGX 89,250"
        assert metrics["Pending Orders"] == 0
