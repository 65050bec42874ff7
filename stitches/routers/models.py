"""
Cart API Pydantic Models

Request bodies and page snapshots returned by every cart endpoint.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


# ==================== REQUEST MODELS ====================

class AddToCartRequest(BaseModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    img: str = ""


class UpdateCartItemRequest(BaseModel):
    quantity: int  # < 1 removes the line


# ==================== PAGE SNAPSHOT MODELS ====================

class BadgeView(BaseModel):
    text: str
    visible: bool


class CartRowView(BaseModel):
    id: str
    name: str
    img: str
    unit_price: str
    quantity: int
    min_quantity: int
    line_total: str
    remove_label: str


class CartTableView(BaseModel):
    rows: List[CartRowView]
    subtotal: str
    total: str
    empty_message_visible: bool
    totals_visible: bool
    checkout_enabled: bool


class SummaryEntryView(BaseModel):
    label: str
    amount: str


class OrderSummaryView(BaseModel):
    entries: List[SummaryEntryView]
    message: Optional[str] = None
    subtotal: str
    total: str
    order_text: str
    place_order_enabled: bool


class RemovalDialogView(BaseModel):
    visible: bool
    pending_product_id: Optional[str] = None


class ToastView(BaseModel):
    id: int
    message: str
    shown: bool


class PageView(BaseModel):
    badges: List[BadgeView]
    cart_table: Optional[CartTableView] = None
    order_summary: Optional[OrderSummaryView] = None
    removal_dialog: Optional[RemovalDialogView] = None
    toasts: List[ToastView] = []


class OrderDetailsItem(BaseModel):
    id: str
    name: str
    quantity: int
    line_total: float


class OrderDetailsResponse(BaseModel):
    order_text: str
    total: float
    items: List[OrderDetailsItem]
