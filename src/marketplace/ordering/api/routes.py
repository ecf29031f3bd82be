"""FastAPI routes for the Ordering domain: the user's cart and orders.

Every route requires a bearer token, and a principal may only reach its own
cart and orders. Routes are plain functions so FastAPI runs them in its
threadpool; cart mutations and order placement hold the per-user
``cart_guard`` there, so they never interleave for the same user.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.catalogue.product.cards import product_summaries
from marketplace.identity.auth.gate import ensure_owner, require_principal
from marketplace.identity.auth.port import Principal
from marketplace.ordering.api.schemas import (
    AddToCartRequest,
    CartItemResponse,
    OrderResponse,
    StatusResponse,
    TotalQuantityResponse,
    UpdateCartQuantityRequest,
)
from marketplace.ordering.cart.cart import ShoppingCart
from marketplace.ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from marketplace.ordering.cart.queries import cart_line, total_quantity, view_cart
from marketplace.ordering.checkout.guard import cart_guard
from marketplace.ordering.order.placement import PlaceOrder
from marketplace.ordering.order.queries import order_details, order_history, order_view


def _cart_item_response(user_id, item_id):
    cart = current_domain.repository_for(ShoppingCart).for_user(user_id)
    item = cart.find_item(item_id)
    summaries = product_summaries([item.product_id])
    return CartItemResponse(**cart_line(cart, item, summaries.get(str(item.product_id))))


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("/add", response_model=CartItemResponse)
def add_to_cart(body: AddToCartRequest, principal: Principal = Depends(require_principal)) -> CartItemResponse:
    user_id = body.user_id or principal.id
    ensure_owner(principal, user_id)

    command = AddToCart(user_id=user_id, product_id=body.product_id, quantity=body.quantity)
    with cart_guard.hold(user_id):
        item_id = current_domain.process(command, asynchronous=False)
    return _cart_item_response(user_id, item_id)


@cart_router.get("/view/{user_id}", response_model=list[CartItemResponse])
def view(user_id: str, principal: Principal = Depends(require_principal)) -> list[CartItemResponse]:
    ensure_owner(principal, user_id)
    return [CartItemResponse(**line) for line in view_cart(user_id)]


@cart_router.get("/totalQuantity/{user_id}", response_model=TotalQuantityResponse)
def cart_total_quantity(
    user_id: str, principal: Principal = Depends(require_principal)
) -> TotalQuantityResponse:
    ensure_owner(principal, user_id)
    return TotalQuantityResponse(totalQuantity=total_quantity(user_id))


@cart_router.put("/update/{cart_item_id}", response_model=CartItemResponse)
def update_cart_item(
    cart_item_id: str,
    body: UpdateCartQuantityRequest,
    principal: Principal = Depends(require_principal),
) -> CartItemResponse:
    command = UpdateCartQuantity(user_id=principal.id, item_id=cart_item_id, quantity=body.quantity)
    with cart_guard.hold(principal.id):
        current_domain.process(command, asynchronous=False)
    return _cart_item_response(principal.id, cart_item_id)


@cart_router.delete("/remove/{cart_item_id}", response_model=StatusResponse)
def remove_cart_item(cart_item_id: str, principal: Principal = Depends(require_principal)) -> StatusResponse:
    command = RemoveFromCart(user_id=principal.id, item_id=cart_item_id)
    with cart_guard.hold(principal.id):
        current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("/placeOrder/{user_id}", response_model=OrderResponse)
def place_order(user_id: str, principal: Principal = Depends(require_principal)) -> OrderResponse:
    ensure_owner(principal, user_id)

    with cart_guard.hold(user_id):
        order_id = current_domain.process(PlaceOrder(user_id=user_id), asynchronous=False)
    return OrderResponse(**order_view(order_details(order_id)))


@order_router.get("/history/{user_id}", response_model=list[OrderResponse])
def history(user_id: str, principal: Principal = Depends(require_principal)) -> list[OrderResponse]:
    ensure_owner(principal, user_id)
    return [OrderResponse(**order) for order in order_history(user_id)]


@order_router.get("/details/{order_id}", response_model=OrderResponse)
def details(order_id: str, principal: Principal = Depends(require_principal)) -> OrderResponse:
    order = order_details(order_id)
    ensure_owner(principal, order.user_id)
    return OrderResponse(**order_view(order))
