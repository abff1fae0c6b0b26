# storefront/routes/cart.py
from fastapi import APIRouter, Depends, HTTPException, status

from storefront.schemas.cart import CartAddLine, CartOut, CartUpdateItem, SelectionUpdate, SelectorOut
from storefront.session import Storefront
from storefront.state import get_storefront
from storefront.utils.responses import raise_for_issues

router = APIRouter(prefix="/cart", tags=["Cart"])

@router.get("", response_model=CartOut)
def get_cart(store: Storefront = Depends(get_storefront)):
    return store.cart_out()

# Change the size/color/quantity picked for one product
@router.post("/select/{template_id}", response_model=SelectorOut)
def update_selection(
    template_id: str,
    payload: SelectionUpdate,
    store: Storefront = Depends(get_storefront),
):
    raise_for_issues(store.update_selection(template_id, payload.size, payload.color, payload.quantity))
    return store.selector_out(template_id)

# Commit the product's current selection to the cart
@router.post("/add/{template_id}", response_model=CartOut, status_code=status.HTTP_200_OK)
def add_selection_to_cart(template_id: str, store: Storefront = Depends(get_storefront)):
    raise_for_issues(store.add_to_cart(template_id))
    return store.cart_out()

@router.post("/lines", response_model=CartOut, status_code=status.HTTP_200_OK)
def add_line(payload: CartAddLine, store: Storefront = Depends(get_storefront)):
    raise_for_issues(store.add_line(payload.template_id, payload.size, payload.color, payload.quantity))
    return store.cart_out()

@router.put("/items/{key}", response_model=CartOut)
def update_cart_item(key: str, payload: CartUpdateItem, store: Storefront = Depends(get_storefront)):
    if not store.update_cart_quantity(key, payload.quantity):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return store.cart_out()

# Removing an absent line is not an error
@router.delete("/items/{key}", response_model=CartOut)
def delete_cart_item(key: str, store: Storefront = Depends(get_storefront)):
    store.remove_from_cart(key)
    return store.cart_out()

# Clear cart, customer form, shipping and payment back to defaults
@router.delete("", response_model=CartOut)
def clear_all(store: Storefront = Depends(get_storefront)):
    store.clear_all()
    return store.cart_out()
