"""Type definitions for the EscrowNet Python SDK."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Protocol


class FinalityStatus(str, Enum):
    RECEIVED = "RECEIVED"
    ACCEPTED_ON_L2 = "ACCEPTED_ON_L2"
    ACCEPTED_ON_L1 = "ACCEPTED_ON_L1"


class ExecutionStatus(str, Enum):
    SUCCEEDED = "SUCCEEDED"
    REVERTED = "REVERTED"


# Terminal states a receipt must reach before its events are trusted
ACCEPTED_STATUSES = frozenset(
    {FinalityStatus.ACCEPTED_ON_L2.value, FinalityStatus.ACCEPTED_ON_L1.value}
)


@dataclass
class EscrowParams:
    recipient: str
    amount: int
    description: str


@dataclass
class ResourceBound:
    """Fee cap for one resource type, as 0x-prefixed hex strings."""

    max_amount: str
    max_price_per_unit: str = "0x0"


@dataclass
class GasEstimate:
    l1_gas: ResourceBound
    l1_data_gas: ResourceBound
    l2_gas: ResourceBound

    def to_dict(self) -> dict:
        """Render as the ``resource_bounds`` object of a Starknet transaction."""
        return asdict(self)


# ──────────────────────────────────────────────────────
# Collaborator protocols
# ──────────────────────────────────────────────────────


class SubmittedTransaction(Protocol):
    transaction_hash: Any


class Provider(Protocol):
    """Network access the SDK needs. ``StarknetProvider`` is one implementation."""

    async def estimate_fee(
        self, transactions: list[dict], block_id: str = "pending"
    ) -> list[dict]:
        ...

    async def wait_for_transaction(self, tx_hash: Any) -> None:
        ...

    async def get_transaction_receipt(self, tx_hash: Any) -> dict:
        ...


class EscrowContract(Protocol):
    """Bound escrow contract. ``StarknetContractBinding`` is one implementation."""

    async def register_user(self, username_hash: int) -> SubmittedTransaction:
        ...

    async def create_escrow(
        self, recipient: str, amount: int, description_hash: int
    ) -> SubmittedTransaction:
        ...

    async def release_funds(self, escrow_id: str) -> SubmittedTransaction:
        ...

    async def cancel_escrow(self, escrow_id: str) -> SubmittedTransaction:
        ...


@dataclass
class TransactionResult:
    """Result of a transaction submission."""

    transaction_hash: str
