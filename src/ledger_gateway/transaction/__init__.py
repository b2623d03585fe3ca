"""Transaction invocation: Transaction and TransactionID."""

from .transaction import InvocationState, Transaction, verify_arguments
from .transaction_id import TransactionID

__all__ = [
    "InvocationState",
    "Transaction",
    "TransactionID",
    "verify_arguments",
]
