"""FastAPI routes for the Ordering domain: carts and checkout."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from identity.user.directory import Principal, contact_details
from ordering.api.schemas import (
    AddToCartRequest,
    CartResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    OrderResponse,
    UpdateOrderStatusRequest,
)
from ordering.cart.cart import Cart
from ordering.cart.items import AddToCart, RemoveFromCart
from ordering.cart.management import ClearCart, CreateCart
from ordering.order.cancellation import CancelOrder
from ordering.order.checkout import create_order
from ordering.order.order import Order
from ordering.order.status import UpdateOrderStatus
from shared.auth import require_admin, require_user

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


def _cart_document(cart_id: str) -> dict:
    return current_domain.repository_for(Cart).get(cart_id).to_document()


@cart_router.get("")
async def get_cart(principal: Principal = Depends(require_user)) -> dict:
    cart_id = current_domain.process(CreateCart(user_id=principal.id), asynchronous=False)
    return _cart_document(cart_id)


@cart_router.post("/add", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, principal: Principal = Depends(require_user)) -> CartResponse:
    command = AddToCart(
        user_id=principal.id,
        craft_id=body.craft_id,
        title=body.craft_title,
        price=body.craft_price,
        image=body.craft_image,
        quantity=body.quantity,
    )
    cart_id = current_domain.process(command, asynchronous=False)
    return CartResponse(message="Item added to cart", cart=_cart_document(cart_id))


@cart_router.delete("/remove/{craft_id}", response_model=CartResponse)
async def remove_from_cart(craft_id: str, principal: Principal = Depends(require_user)) -> CartResponse:
    cart_id = current_domain.process(RemoveFromCart(user_id=principal.id, craft_id=craft_id), asynchronous=False)
    return CartResponse(message="Item removed from cart", cart=_cart_document(cart_id))


@cart_router.delete("/clear", response_model=CartResponse)
async def clear_cart(principal: Principal = Depends(require_user)) -> CartResponse:
    cart_id = current_domain.process(ClearCart(user_id=principal.id), asynchronous=False)
    return CartResponse(message="Cart cleared", cart=_cart_document(cart_id))


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post("/create-order", status_code=201, response_model=CreateOrderResponse)
async def checkout(body: CreateOrderRequest, principal: Principal = Depends(require_user)) -> CreateOrderResponse:
    """Convert the caller's cart to an order.

    1. Price the cart and persist the order
    2. Empty the cart (a separate write)
    """
    order = create_order(
        user_id=principal.id,
        shipping_address=body.shipping_address.model_dump() if body.shipping_address else None,
        payment_method=body.payment_method,
        notes=body.notes,
    )
    return CreateOrderResponse(
        message="Order created successfully",
        order=order.to_document(),
        orderNumber=order.order_number,
    )


@checkout_router.get("/orders")
async def list_my_orders(principal: Principal = Depends(require_user)) -> list[dict]:
    orders = current_domain.repository_for(Order).for_user(principal.id)
    return [order.to_document() for order in orders]


@checkout_router.get("/orders/{order_id}")
async def get_my_order(order_id: str, principal: Principal = Depends(require_user)) -> dict:
    return current_domain.repository_for(Order).owned_by(principal.id, order_id).to_document()


@checkout_router.put(
    "/orders/{order_id}/status",
    response_model=OrderResponse,
    dependencies=[Depends(require_admin)],
)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    command = UpdateOrderStatus(
        order_id=order_id,
        payment_status=body.payment_status,
        order_status=body.order_status,
    )
    current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(message="Order status updated successfully", order=order.to_document())


@checkout_router.put("/orders/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str, principal: Principal = Depends(require_user)) -> OrderResponse:
    current_domain.process(CancelOrder(user_id=principal.id, order_id=order_id), asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(message="Order cancelled successfully", order=order.to_document())


@checkout_router.get("/admin/orders", dependencies=[Depends(require_admin)])
async def list_all_orders() -> list[dict]:
    orders = current_domain.repository_for(Order).everything()
    owners = contact_details(str(order.user_id) for order in orders)

    documents = []
    for order in orders:
        document = order.to_document()
        document["userId"] = owners.get(str(order.user_id), document["userId"])
        documents.append(document)
    return documents
