"""
Placeholder payment processing.

No gateway is contacted and nothing is validated: every request succeeds
with a transaction id built from the current time in milliseconds.
"""

import logging
import time
from typing import Any

logger = logging.getLogger(__name__)

TRANSACTION_PREFIX = "TXN-"


def new_transaction_id() -> str:
    return f"{TRANSACTION_PREFIX}{int(time.time() * 1000)}"


def process_payment(booking_id: Any = None, amount: Any = None, method: Any = None) -> dict:
    payment_info = {
        "bookingId": booking_id,
        "amount": amount,
        "paymentMethod": method,
        "transactionId": new_transaction_id(),
    }
    logger.info("Payment %s recorded for booking %s", payment_info["transactionId"], booking_id)
    return payment_info
