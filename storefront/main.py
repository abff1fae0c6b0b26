# storefront/main.py
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from storefront.config import settings
from storefront.state import init_state

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Router imports
from storefront.routes.catalog import router as catalog_router
from storefront.routes.cart import router as cart_router
from storefront.routes.checkout import router as checkout_router
from storefront.routes.orders import router as orders_router
from storefront.routes.logs import router as logs_router

# Initialization
init_state()

app = FastAPI(title="Storefront API", version="1.0.0")

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173"
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Router registration
app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(orders_router)
app.include_router(logs_router)

@app.get("/")
def read_root():
    return {"message": "Storefront API is running"}


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
