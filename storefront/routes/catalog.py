# storefront/routes/catalog.py
from fastapi import APIRouter, Depends

from storefront.schemas.product import CatalogOut
from storefront.session import Storefront
from storefront.state import get_storefront

router = APIRouter(
    prefix="/catalog",
    tags=["Catalog"]
)

# Products on sale plus the size, color, shipping and payment choices
@router.get("", response_model=CatalogOut)
def get_catalog(store: Storefront = Depends(get_storefront)):
    return store.catalog_out()
