"""
Customer Portal - In-Memory Record Store
==========================================

What:  The fixed collection of customer records served by the API.
How:   Records are built once from a literal list when this module is
       imported and kept in a tuple, so the collection can be neither grown
       nor reordered. Lookups are a linear scan; three records need no index.
Who:   Read by CustomerService and the home page route.

Concurrency:
    Nothing ever writes to the store after import, so concurrent requests
    read it without any locking.
"""

import logging
from typing import Iterable, Optional, Tuple

from customer_portal.schemas.customer import Customer

logger = logging.getLogger(__name__)

SEED_CUSTOMERS = (
    {"id": 1, "name": "Acme Corp", "email": "contact@acme.com"},
    {"id": 2, "name": "TechStart Inc", "email": "info@techstart.com"},
    {"id": 3, "name": "Global Services", "email": "hello@globalservices.com"},
)


class CustomerStore:
    """
    Read-only, insertion-ordered collection of customers.

    Operations:
        list_all():    every record, in insertion order
        find_by_id():  exact match on id, or None
    """

    def __init__(self, records: Iterable[dict]):
        self._customers: Tuple[Customer, ...] = tuple(
            Customer(**record) for record in records
        )
        ids = [customer.id for customer in self._customers]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Customer ids must be unique, got {ids}")
        logger.debug("Loaded %d customers into the record store", len(self._customers))

    def __len__(self) -> int:
        return len(self._customers)

    def list_all(self) -> Tuple[Customer, ...]:
        return self._customers

    def find_by_id(self, customer_id: Optional[int]) -> Optional[Customer]:
        """
        Return the customer whose id equals `customer_id`.

        Anything that is not a matching integer (None, zero, negatives, ids
        that were never assigned) yields None. `bool` is rejected explicitly
        since True == 1 in Python.
        """
        if not isinstance(customer_id, int) or isinstance(customer_id, bool):
            return None
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None


# Singleton instance, populated once per process
customer_store = CustomerStore(SEED_CUSTOMERS)
