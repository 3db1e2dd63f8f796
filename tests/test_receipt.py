"""Receipt layout, pagination and PDF generation tests."""
import time
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from petstore.services.receipt import (
    ReceiptLayout,
    ReceiptGenerator,
    ReceiptError,
    TextOp,
    LineOp,
    format_money,
    PAGE_TOP_Y,
)
from tests.conftest import make_item

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def texts(layout, page=None):
    pages = layout.pages if page is None else [layout.pages[page]]
    return [op.text for ops in pages for op in ops if isinstance(op, TextOp)]


def find(layout, text):
    return next(op for ops in layout.pages for op in ops if isinstance(op, TextOp) and op.text == text)


@pytest.mark.parametrize("amount,expected", [
    (Decimal("80"), "$80.00"),
    (Decimal("55.2415"), "$55.24"),
    (Decimal("0.005"), "$0.01"),
    (Decimal("1234.5"), "$1234.50"),
])
def test_format_money(amount, expected):
    assert format_money(amount) == expected


def test_header_block():
    layout = ReceiptLayout()
    layout.add_header("NEON PET STORE", "06/15/25")

    assert texts(layout) == ["NEON PET STORE", "Purchase Summary", "Date: 06/15/25", "Products:"]
    assert find(layout, "NEON PET STORE").align == "center"
    assert find(layout, "Products:").y == 50
    assert layout.cursor == 60


def test_plain_line_advances_one_row():
    layout = ReceiptLayout()
    layout.add_header("S", "d")
    layout.add_line("Rope Tug Toy", 2, Decimal("25"))

    assert find(layout, "Rope Tug Toy x2").y == 60
    price = find(layout, "$25.00")
    assert (price.x, price.y, price.align) == (190, 60, "right")
    assert layout.cursor == 67


def test_discounted_line_adds_annotation():
    layout = ReceiptLayout()
    layout.add_header("S", "d")
    layout.add_line("Kibble", 1, Decimal("55.2415"), discount=15)

    note = find(layout, "  Discount: 15%")
    assert note.y == 65
    assert layout.cursor == 72


def test_no_page_break_at_threshold():
    layout = ReceiptLayout()
    layout.add_header("S", "d")
    for i in range(30):
        layout.add_line(f"Item {i}", 1, Decimal("1"))

    assert layout.page_count == 1
    assert layout.cursor == 270


def test_page_break_past_threshold():
    layout = ReceiptLayout()
    layout.add_header("S", "d")
    for i in range(31):
        layout.add_line(f"Item {i}", 1, Decimal("1"))

    assert layout.page_count == 2
    assert layout.cursor == PAGE_TOP_Y
    assert "Item 30 x1" in texts(layout, page=0)
    assert texts(layout, page=1) == []

    layout.add_line("Next", 1, Decimal("1"))
    assert find(layout, "Next x1").y == PAGE_TOP_Y
    assert "Next x1" in texts(layout, page=1)


def test_totals_block_with_discount():
    layout = ReceiptLayout()
    layout.cursor = 100
    layout.add_totals_block(Decimal("250"), Decimal("40"), Decimal("210"))

    separator = next(op for op in layout.pages[0] if isinstance(op, LineOp))
    assert (separator.x1, separator.y1, separator.x2) == (20, 105, 190)
    assert find(layout, "Subtotal:").y == 115
    assert find(layout, "$250.00").y == 115
    assert find(layout, "-$40.00").y == 122
    assert find(layout, "TOTAL:").y == 129
    assert find(layout, "$210.00").size == 14


def test_totals_block_without_discount():
    layout = ReceiptLayout()
    layout.cursor = 100
    layout.add_totals_block(Decimal("50"), Decimal("0"), Decimal("50"))

    assert "Total Discount:" not in texts(layout)
    assert find(layout, "TOTAL:").y == 122


def test_generate_pdf(store):
    store.add_item(make_item("A", name="Kibble"))
    store.add_item(make_item("B", price="50", original_price="50", discount=0, name="Leash"))

    receipt = ReceiptGenerator("NEON PET STORE").generate(store, now=NOW)

    assert receipt.content.startswith(b"%PDF")
    assert receipt.media_type == "application/pdf"
    assert receipt.filename == f"neon-pet-purchase-{int(NOW.timestamp() * 1000)}.pdf"


def test_generate_long_cart_spans_pages(store):
    for i in range(40):
        store.add_item(make_item(f"P{i}", discount=0, price="1", original_price="1"))

    generator = ReceiptGenerator("NEON PET STORE")
    layout = generator.build_layout(store, NOW)
    assert layout.page_count == 2

    receipt = generator.generate(store, now=NOW)
    assert receipt.content.startswith(b"%PDF")


def test_build_layout_uses_cart_values(store):
    store.add_item(make_item("A", name="Kibble"))
    store.add_item(make_item("A", name="Kibble"))

    layout = ReceiptGenerator("NEON PET STORE").build_layout(store, NOW)

    assert "Kibble x2" in texts(layout)
    assert "$160.00" in texts(layout)
    assert "  Discount: 20%" in texts(layout)
    assert "-$40.00" in texts(layout)
    assert f"Date: {NOW.astimezone().strftime('%x')}" in texts(layout)


def test_renderer_failure_raises_receipt_error(store):
    store.add_item(make_item("A"))

    def broken(layout):
        raise RuntimeError("backend unavailable")

    with pytest.raises(ReceiptError):
        ReceiptGenerator("NEON PET STORE", renderer=broken).generate(store, now=NOW)

    assert store.get_item("A").quantity == 1


def test_discount_rows_page_break():
    layout = ReceiptLayout()
    layout.add_header("S", "d")
    for i in range(17):
        layout.add_line(f"Item {i}", 1, Decimal("1"), discount=10)

    assert layout.page_count == 1
    assert layout.cursor == 264

    layout.add_line("Item 17", 1, Decimal("1"), discount=10)

    assert layout.page_count == 2
    assert layout.cursor == PAGE_TOP_Y
    assert find(layout, "Item 17 x1").y == 264
    assert find(layout, "Item 17 x1") in layout.pages[0]
    assert [op.y for op in layout.pages[0] if isinstance(op, TextOp) and op.text == "  Discount: 10%"][-1] == 269


@pytest.fixture
def new_york_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_receipt_date_uses_local_day(store, new_york_time):
    store.add_item(make_item("A"))
    late_utc = datetime(2025, 6, 16, 2, 30, tzinfo=timezone.utc)

    layout = ReceiptGenerator("NEON PET STORE").build_layout(store, late_utc)

    assert f"Date: {datetime(2025, 6, 15).strftime('%x')}" in texts(layout)
