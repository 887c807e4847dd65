"""Error hierarchy for the EscrowNet Python SDK."""

from __future__ import annotations

from typing import Optional


class EscrowNetError(Exception):
    """Base class for every error raised by the SDK."""


class ValidationError(EscrowNetError):
    """
    Raised when a caller-supplied argument violates a documented constraint.

    Always raised before any network interaction.
    """


class TransactionError(EscrowNetError):
    """
    Raised when submitting or confirming a transaction fails.

    The transaction may or may not have landed on-chain; the SDK does not
    try to find out.

    Attributes:
        tx_hash: Hash of the transaction involved, when known.
    """

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class InsufficientFundsError(TransactionError):
    """The account balance cannot cover the transaction."""

    def __init__(self, tx_hash: Optional[str] = None):
        super().__init__("Insufficient funds to complete the transaction", tx_hash)


class InvalidNonceError(TransactionError):
    """The nonce was stale or out of order. Resubmit with a fresh nonce."""

    def __init__(self, tx_hash: Optional[str] = None):
        super().__init__("Invalid nonce. Please try again", tx_hash)


class InsufficientGasError(TransactionError):
    """The resource bounds were too low for the transaction."""

    def __init__(self, tx_hash: Optional[str] = None):
        super().__init__("Insufficient gas to complete the transaction", tx_hash)


class EstimationError(EscrowNetError):
    """Raised when the fee-estimation round trip fails."""
