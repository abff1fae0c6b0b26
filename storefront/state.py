# storefront/state.py
import threading

from dotenv import load_dotenv

from storefront.session import Storefront

load_dotenv()

# One shopper, one in-memory session for the lifetime of the process
_lock = threading.Lock()
_storefront = None


def get_storefront() -> Storefront:
    # Actions serialize on the session's own lock; this one only guards creation
    return init_state()


def _get_or_create() -> Storefront:
    global _storefront
    if _storefront is None:
        _storefront = Storefront()
    return _storefront


def init_state() -> Storefront:
    with _lock:
        return _get_or_create()


def reset_storefront() -> Storefront:
    global _storefront
    with _lock:
        _storefront = Storefront()
        return _storefront
