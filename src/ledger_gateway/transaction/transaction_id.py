import hashlib
import os
from typing import Optional

from ledger_gateway.network.abc import SigningIdentity

NONCE_LENGTH = 24

class TransactionID:
    """
    Identifies one transaction across endorsement, ordering and commit events.
    The id is the hex SHA-256 of a random nonce followed by the creator's serialized identity.
    """
    def __init__(self, identity: Optional[SigningIdentity] = None, nonce: Optional[bytes] = None):
        self._identity = identity
        self._nonce = nonce if nonce is not None else os.urandom(NONCE_LENGTH)
        creator = identity.serialize() if identity is not None else b""
        self._transaction_id = hashlib.sha256(self._nonce + creator).hexdigest()

    @property
    def transaction_id(self) -> str:
        return self._transaction_id

    @property
    def nonce(self) -> bytes:
        return self._nonce

    @property
    def identity(self) -> Optional[SigningIdentity]:
        return self._identity

    def __str__(self) -> str:
        return self._transaction_id

    def __repr__(self) -> str:
        return f"TransactionID({self._transaction_id!r})"
