"""
Customer Portal - Customer Service
====================================

What:  Business logic behind the /api/customers routes.
How:   Parses the raw path identifier, queries the record store and shapes
       the response models. Unknown or unparsable identifiers raise
       CustomerNotFoundError, which the global handler turns into a 404.
Who:   Called by routes/customers.py.

Identifier parsing:
    The id segment is parsed permissively, reading the longest leading
    integer and ignoring whatever follows it:

        "2"      → 2
        " 3"     → 3
        "2abc"   → 2
        "1.9"    → 1
        "-1"     → -1      (no such customer → 404)
        "0x2"    → 2       (hexadecimal prefix)
        "abc"    → None    (→ 404, not 400)
"""

import logging
import re
from typing import Optional

from customer_portal.exceptions import CustomerNotFoundError
from customer_portal.schemas.customer import CustomerListResponse, CustomerResponse
from customer_portal.store import CustomerStore, customer_store

logger = logging.getLogger(__name__)

_SIGN = re.compile(r"\s*([+-]?)")
_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_customer_id(raw: Optional[str]) -> Optional[int]:
    """
    Extract the leading integer from `raw`, or return None if there is none.

    A "0x"/"0X" prefix after the optional sign switches to hexadecimal;
    "0x" with no hex digits after it does not parse.
    """
    if raw is None:
        return None
    sign_match = _SIGN.match(raw)
    negative = sign_match.group(1) == "-"
    pos = sign_match.end()

    if raw[pos:pos + 2] in ("0x", "0X"):
        digits = _HEX_DIGITS.match(raw, pos + 2)
        base = 16
    else:
        digits = _DECIMAL_DIGITS.match(raw, pos)
        base = 10

    if digits is None:
        return None
    value = int(digits.group(0), base)
    return -value if negative else value


class CustomerService:
    """
    Read-only operations over a CustomerStore.

    Stateless apart from the store reference, which is itself immutable.
    """

    def __init__(self, store: CustomerStore = customer_store):
        self.store = store

    def list_customers(self) -> CustomerListResponse:
        customers = list(self.store.list_all())
        return CustomerListResponse(success=True, count=len(customers), data=customers)

    def get_customer(self, raw_id: str) -> CustomerResponse:
        """
        Look up a single customer by its raw path identifier.

        Raises:
            CustomerNotFoundError: `raw_id` has no leading integer, or no
                customer carries the parsed id.
        """
        customer = self.store.find_by_id(parse_customer_id(raw_id))
        if customer is None:
            raise CustomerNotFoundError(raw_id=raw_id)
        return CustomerResponse(success=True, data=customer)


# Singleton instance
customer_service = CustomerService()
