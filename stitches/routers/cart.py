"""
Cart Router

Cart and checkout page endpoints. Every response is a snapshot of the
page after the request's mutation has been saved and re-projected.
"""
from fastapi import APIRouter, Depends, HTTPException

from stitches.cart import Product
from stitches.cart.models import parse_price
from stitches.errors import ERROR_INVALID_PRODUCT, CartError
from stitches.logging import get_logger
from stitches.views import Page

from .models import (
    AddToCartRequest,
    BadgeView,
    CartRowView,
    CartTableView,
    OrderDetailsResponse,
    OrderSummaryView,
    PageView,
    RemovalDialogView,
    SummaryEntryView,
    ToastView,
    UpdateCartItemRequest,
)
from .session import CartSession, get_cart_session

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])

REMOVAL_ACTIONS = ("confirm", "cancel", "close")


def _format_page_response(session: CartSession, page: Page) -> PageView:
    """Serialize the page regions plus any live toasts."""
    cart_table = None
    if page.table is not None:
        table = page.table
        cart_table = CartTableView(
            rows=[
                CartRowView(
                    id=row.id,
                    name=row.name,
                    img=row.img,
                    unit_price=row.unit_price,
                    quantity=row.quantity,
                    min_quantity=row.min_quantity,
                    line_total=row.line_total,
                    remove_label=row.remove_label,
                )
                for row in table.rows
            ],
            subtotal=table.subtotal_text,
            total=table.total_text,
            empty_message_visible=table.empty_message_visible,
            totals_visible=table.totals_visible,
            checkout_enabled=table.checkout_enabled,
        )

    order_summary = None
    if page.summary is not None:
        summary = page.summary
        order_summary = OrderSummaryView(
            entries=[SummaryEntryView(label=e.label, amount=e.amount) for e in summary.entries],
            message=summary.message,
            subtotal=summary.subtotal_text,
            total=summary.total_text,
            order_text=summary.order_text,
            place_order_enabled=summary.place_order_enabled,
        )

    removal_dialog = None
    if page.gate is not None:
        removal_dialog = RemovalDialogView(
            visible=page.gate.dialog.visible,
            pending_product_id=page.gate.pending_product_id,
        )

    shown_ids = {t.id for t in session.toasts.shown()}
    return PageView(
        badges=[BadgeView(text=b.text, visible=b.visible) for b in page.badges],
        cart_table=cart_table,
        order_summary=order_summary,
        removal_dialog=removal_dialog,
        toasts=[
            ToastView(id=t.id, message=t.message, shown=t.id in shown_ids)
            for t in session.toasts.active()
        ],
    )


def _cart_error(e: CartError) -> HTTPException:
    logger.warning(f"Cart request rejected: {e}")
    return HTTPException(status_code=e.status_code, detail=str(e))


# ==================== PAGES ====================

@router.get("/cart", response_model=PageView)
async def get_cart_page(session: CartSession = Depends(get_cart_session)):
    """Cart review page: badge, line-item table and removal dialog."""
    try:
        page = session.open_cart_page()
    except CartError as e:
        raise _cart_error(e)
    return _format_page_response(session, page)


@router.get("/checkout", response_model=PageView)
async def get_checkout_page(session: CartSession = Depends(get_cart_session)):
    """Checkout page: badge and read-only order summary."""
    try:
        page = session.open_checkout_page()
    except CartError as e:
        raise _cart_error(e)
    return _format_page_response(session, page)


# ==================== CART MUTATIONS ====================

@router.post("/cart/items", response_model=PageView)
async def add_to_cart(request: AddToCartRequest, session: CartSession = Depends(get_cart_session)):
    """Add one unit of a product."""
    try:
        product = Product(
            id=request.id,
            name=request.name,
            price=parse_price(request.price),
            img=request.img,
        )
    except ValueError:
        raise HTTPException(status_code=400, detail=ERROR_INVALID_PRODUCT)

    try:
        page = session.open_cart_page()
        session.engine.add_to_cart(product)
    except CartError as e:
        raise _cart_error(e)
    return _format_page_response(session, page)


@router.patch("/cart/items/{product_id}", response_model=PageView)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    session: CartSession = Depends(get_cart_session),
):
    """Set a line's quantity (< 1 removes it)."""
    try:
        page = session.open_cart_page()
        session.engine.update_quantity(product_id, request.quantity)
    except CartError as e:
        raise _cart_error(e)
    return _format_page_response(session, page)


@router.post("/cart/items/{product_id}/remove", response_model=PageView)
async def request_item_removal(product_id: str, session: CartSession = Depends(get_cart_session)):
    """Click a row's remove control: opens the confirmation dialog."""
    try:
        page = session.open_cart_page()
    except CartError as e:
        raise _cart_error(e)

    row = next((r for r in page.table.rows if r.id == product_id), None)
    if row is None:
        raise HTTPException(status_code=404, detail="Item not in cart")
    row.click_remove()
    return _format_page_response(session, page)


@router.post("/cart/removal/{action}", response_model=PageView)
async def resolve_item_removal(action: str, session: CartSession = Depends(get_cart_session)):
    """Confirm, cancel or close the pending removal."""
    if action not in REMOVAL_ACTIONS:
        raise HTTPException(status_code=404, detail="Unknown removal action")

    try:
        page = session.open_cart_page()
        getattr(page.gate, action)()
    except CartError as e:
        raise _cart_error(e)
    return _format_page_response(session, page)


@router.delete("/cart", response_model=PageView)
async def clear_cart(session: CartSession = Depends(get_cart_session)):
    """Delete the cart and any stored order details."""
    try:
        page = session.open_cart_page()
        session.engine.clear_cart()
    except CartError as e:
        raise _cart_error(e)
    return _format_page_response(session, page)


# ==================== ORDER DETAILS ====================

@router.post("/checkout/order-details", response_model=OrderDetailsResponse)
async def save_order_details(session: CartSession = Depends(get_cart_session)):
    """Store the checkout snapshot for the current cart."""
    try:
        return session.engine.save_order_details()
    except CartError as e:
        raise _cart_error(e)


@router.get("/checkout/order-details", response_model=OrderDetailsResponse)
async def get_order_details(session: CartSession = Depends(get_cart_session)):
    try:
        details = session.engine.load_order_details()
    except CartError as e:
        raise _cart_error(e)
    if details is None:
        raise HTTPException(status_code=404, detail="No order details")
    return details
