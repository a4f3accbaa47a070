"""Process-wide in-memory state.

The store is created once per application instance and handed to request
handlers through dependency injection. Nothing is persisted; a restart
resets the catalog and forgets every user.
"""

import threading
from dataclasses import dataclass, field

from veg24.auth.schema import User
from veg24.catalog.schema import Product
from veg24.catalog.service import seed_products


@dataclass
class Store:
    """In-memory products and users.

    Sync endpoints run in a threadpool; ``users_lock`` guards user id
    assignment and the append that follows it.
    """

    products: list[Product] = field(default_factory=seed_products)
    users: list[User] = field(default_factory=list)
    users_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


__all__ = ["Store"]
