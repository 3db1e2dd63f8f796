"""
Purchase receipt

Lays out a cart as a paginated purchase summary and renders it to PDF.
Layout coordinates are millimetres on an A4 page measured from the top-left
corner; the renderer converts them to PDF points.
"""

import io
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional, Union

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from ..database.carts import CartStore

logger = logging.getLogger(__name__)

PAGE_WIDTH = 210
LEFT_MARGIN = 20
RIGHT_MARGIN = 190
CENTER = PAGE_WIDTH / 2

ITEMS_START_Y = 50
PAGE_TOP_Y = 20
PAGE_BREAK_Y = 270
ITEM_ROW_HEIGHT = 7
DISCOUNT_ROW_OFFSET = 5

BLACK = (0, 0, 0)
CYAN = (0, 255, 255)
MAGENTA = (255, 0, 255)
GREEN = (0, 255, 0)


class ReceiptError(Exception):
    pass


def format_money(amount: Decimal) -> str:
    """Format an amount as $1234.56"""
    value = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"${value}"


@dataclass
class TextOp:
    """Text drawn at a point; align is left, center or right"""
    x: float
    y: float
    text: str
    size: int
    color: tuple = BLACK
    align: str = "left"


@dataclass
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float


DrawOp = Union[TextOp, LineOp]


@dataclass
class ReceiptLayout:
    """
    Stateful builder for receipt pages.

    Keeps a vertical cursor and breaks to a new page when item rows run past
    the bottom threshold. Produces draw operations only, so the page math can
    be checked without a PDF backend.
    """
    pages: list[list[DrawOp]] = field(default_factory=lambda: [[]])
    cursor: float = ITEMS_START_Y

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _emit(self, op: DrawOp) -> None:
        self.pages[-1].append(op)

    def _new_page(self) -> None:
        self.pages.append([])
        self.cursor = PAGE_TOP_Y

    def add_header(self, store_name: str, date_text: str) -> None:
        """Title block plus the heading of the item list"""
        self._emit(TextOp(CENTER, 20, store_name, 20, CYAN, "center"))
        self._emit(TextOp(CENTER, 30, "Purchase Summary", 12, BLACK, "center"))
        self._emit(TextOp(CENTER, 37, f"Date: {date_text}", 12, BLACK, "center"))

        self._emit(TextOp(LEFT_MARGIN, self.cursor, "Products:", 14))
        self.cursor += 10

    def add_line(self, name: str, quantity: int, line_total: Decimal, discount: int = 0) -> None:
        """One item row, with a discount note underneath when discounted"""
        self._emit(TextOp(LEFT_MARGIN, self.cursor, f"{name} x{quantity}", 10))
        self._emit(TextOp(RIGHT_MARGIN, self.cursor, format_money(line_total), 10, align="right"))

        if discount > 0:
            self._emit(
                TextOp(
                    LEFT_MARGIN,
                    self.cursor + DISCOUNT_ROW_OFFSET,
                    f"  Discount: {discount}%",
                    10,
                    MAGENTA,
                )
            )
            self.cursor += DISCOUNT_ROW_OFFSET

        self.cursor += ITEM_ROW_HEIGHT

        if self.cursor > PAGE_BREAK_Y:
            self._new_page()

    def add_totals_block(self, subtotal: Decimal, total_discount: Decimal, total: Decimal) -> None:
        """Separator followed by subtotal, discount (if any) and grand total"""
        self.cursor += 5
        self._emit(LineOp(LEFT_MARGIN, self.cursor, RIGHT_MARGIN, self.cursor))
        self.cursor += 10

        self._emit(TextOp(LEFT_MARGIN, self.cursor, "Subtotal:", 11))
        self._emit(TextOp(RIGHT_MARGIN, self.cursor, format_money(subtotal), 11, align="right"))
        self.cursor += ITEM_ROW_HEIGHT

        if total_discount > 0:
            self._emit(TextOp(LEFT_MARGIN, self.cursor, "Total Discount:", 11, GREEN))
            self._emit(
                TextOp(
                    RIGHT_MARGIN,
                    self.cursor,
                    f"-{format_money(total_discount)}",
                    11,
                    GREEN,
                    "right",
                )
            )
            self.cursor += ITEM_ROW_HEIGHT

        self._emit(TextOp(LEFT_MARGIN, self.cursor, "TOTAL:", 14, CYAN))
        self._emit(TextOp(RIGHT_MARGIN, self.cursor, format_money(total), 14, CYAN, "right"))


def render_pdf(layout: ReceiptLayout) -> bytes:
    """Render layout pages to PDF bytes"""
    buffer = io.BytesIO()
    page_height = A4[1]
    pdf = canvas.Canvas(buffer, pagesize=A4)

    for page in layout.pages:
        for op in page:
            if isinstance(op, LineOp):
                pdf.setStrokeColorRGB(0, 0, 0)
                pdf.line(op.x1 * mm, page_height - op.y1 * mm, op.x2 * mm, page_height - op.y2 * mm)
                continue

            r, g, b = op.color
            pdf.setFillColorRGB(r / 255, g / 255, b / 255)
            pdf.setFont("Helvetica", op.size)

            x = op.x * mm
            y = page_height - op.y * mm
            if op.align == "center":
                pdf.drawCentredString(x, y, op.text)
            elif op.align == "right":
                pdf.drawRightString(x, y, op.text)
            else:
                pdf.drawString(x, y, op.text)

        pdf.showPage()

    pdf.save()
    return buffer.getvalue()


@dataclass
class Receipt:
    """Generated receipt document"""
    filename: str
    content: bytes
    media_type: str = "application/pdf"


class ReceiptGenerator:
    """Builds purchase summary PDFs from a cart"""

    def __init__(
        self,
        store_name: str,
        renderer: Callable[[ReceiptLayout], bytes] = render_pdf,
    ):
        self.store_name = store_name
        self._renderer = renderer

    def build_layout(self, cart: CartStore, now: datetime) -> ReceiptLayout:
        layout = ReceiptLayout()
        layout.add_header(self.store_name, now.astimezone().strftime("%x"))

        for item in cart.items:
            layout.add_line(item.name, item.quantity, item.line_total, item.discount)

        layout.add_totals_block(
            cart.get_subtotal(),
            cart.get_total_discount(),
            cart.get_total(),
        )
        return layout

    def generate(self, cart: CartStore, now: Optional[datetime] = None) -> Receipt:
        """
        Generate the purchase summary for a cart.

        Raises:
            ReceiptError: If the document could not be rendered
        """
        now = now or datetime.now(timezone.utc)
        layout = self.build_layout(cart, now)

        try:
            content = self._renderer(layout)
        except Exception as e:
            logger.error(f"Receipt rendering failed: {e}")
            raise ReceiptError(f"Could not render receipt: {e}") from e

        filename = f"neon-pet-purchase-{int(now.timestamp() * 1000)}.pdf"
        logger.info(f"Receipt {filename} generated: {layout.page_count} page(s)")
        return Receipt(filename=filename, content=content)
