"""EscrowNet Python SDK Client — high-level interface for the EscrowNet contract.

Usage:
    # Bring your own provider and starknet-py Account
    sdk = EscrowNetSDK(provider, account)

    # Or build the provider from a node URL
    sdk = EscrowNetSDK.from_rpc(SEPOLIA_RPC_URL, account)
    await sdk.register_user("alice")
    escrow_id = await sdk.create_escrow(
        EscrowParams(recipient="0x123...", amount=10**18, description="Logo design")
    )
    await sdk.release_funds(escrow_id)
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from escrownet.contract import CONTRACT_ADDRESS, StarknetContractBinding
from escrownet.errors import (
    EscrowNetError,
    InsufficientFundsError,
    InsufficientGasError,
    InvalidNonceError,
    TransactionError,
    ValidationError,
)
from escrownet.hashing import hash_text
from escrownet.provider import DEFAULT_POLL_INTERVAL, StarknetProvider
from escrownet.types import (
    ACCEPTED_STATUSES,
    EscrowContract,
    EscrowParams,
    ExecutionStatus,
    Provider,
)
from escrownet.validation import (
    validate_escrow_id,
    validate_escrow_params,
    validate_username,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EscrowNetSDK:
    """
    Client for the EscrowNet escrow contract on Starknet.

    Every operation validates its arguments, submits one transaction and
    waits for it to be accepted. Failures surface as ``EscrowNetError``
    subclasses; nothing is retried.
    """

    def __init__(
        self,
        provider: Provider,
        account=None,
        *,
        contract: Optional[EscrowContract] = None,
        contract_address: str = CONTRACT_ADDRESS,
    ):
        """
        Initialize the EscrowNet client.

        Args:
            provider: Network provider (see ``Provider``)
            account: starknet-py Account used to sign transactions. Not needed
                when ``contract`` is given
            contract: Pre-bound contract. Defaults to a ``StarknetContractBinding``
                over ``account`` at ``contract_address``
            contract_address: Address of the deployed EscrowNet contract
        """
        if provider is None:
            raise ValidationError("Provider is required")
        if contract is None and account is None:
            raise ValidationError("Account is required")

        self.provider = provider
        self.account = account
        self.contract = contract or StarknetContractBinding(account, contract_address)

    @classmethod
    def from_rpc(
        cls,
        rpc_url: str,
        account,
        *,
        contract_address: str = CONTRACT_ADDRESS,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> "EscrowNetSDK":
        """Create a client over a ``StarknetProvider`` for ``rpc_url``."""
        provider = StarknetProvider.from_url(rpc_url, poll_interval=poll_interval)
        return cls(provider, account, contract_address=contract_address)

    # ──────────────────────────────────────────────────────
    # CONTRACT OPERATIONS
    # ──────────────────────────────────────────────────────

    async def register_user(self, username: str) -> None:
        """Register the signing account under ``username``."""
        validate_username(username)

        async def _register() -> None:
            tx = await self.contract.register_user(hash_text(username))
            await self.provider.wait_for_transaction(tx.transaction_hash)

        await self._execute_transaction(_register, "Failed to register user")

    async def create_escrow(self, params: EscrowParams) -> str:
        """
        Create a new escrow and deposit ``params.amount``.

        Returns:
            The escrow ID emitted by the contract
        """
        validate_escrow_params(params)

        async def _create() -> str:
            tx = await self.contract.create_escrow(
                params.recipient,
                params.amount,
                hash_text(params.description),
            )
            await self.provider.wait_for_transaction(tx.transaction_hash)
            receipt = await self.provider.get_transaction_receipt(tx.transaction_hash)
            return self._escrow_id_from_receipt(receipt, tx.transaction_hash)

        return await self._execute_transaction(_create, "Failed to create escrow")

    async def release_funds(self, escrow_id: str) -> None:
        """Release the escrowed funds to the recipient."""
        validate_escrow_id(escrow_id)

        async def _release() -> None:
            tx = await self.contract.release_funds(escrow_id)
            await self.provider.wait_for_transaction(tx.transaction_hash)

        await self._execute_transaction(_release, "Failed to release funds")

    async def cancel_escrow(self, escrow_id: str) -> None:
        """Cancel the escrow and refund the creator."""
        validate_escrow_id(escrow_id)

        async def _cancel() -> None:
            tx = await self.contract.cancel_escrow(escrow_id)
            await self.provider.wait_for_transaction(tx.transaction_hash)

        await self._execute_transaction(_cancel, "Failed to cancel escrow")

    # ──────────────────────────────────────────────────────
    # INTERNAL
    # ──────────────────────────────────────────────────────

    async def _execute_transaction(
        self, operation: Callable[[], Awaitable[T]], error_message: str
    ) -> T:
        """Run ``operation`` once and translate its failure into an SDK error."""
        try:
            return await operation()
        except EscrowNetError:
            raise
        except Exception as e:
            message = str(e)
            logger.debug("%s: %s", error_message, message)
            if "insufficient funds" in message:
                raise InsufficientFundsError() from e
            if "nonce" in message:
                raise InvalidNonceError() from e
            if "gas" in message:
                raise InsufficientGasError() from e
            raise TransactionError(
                f"{error_message}: {message or 'Unknown error'}"
            ) from e

    @staticmethod
    def _escrow_id_from_receipt(receipt: dict, tx_hash) -> str:
        status = receipt.get("status") or receipt.get("finality_status")
        if status not in ACCEPTED_STATUSES:
            raise TransactionError(
                f"Transaction was not accepted. Status: {status or 'unknown'}",
                tx_hash=tx_hash,
            )
        if receipt.get("execution_status") == ExecutionStatus.REVERTED.value:
            raise TransactionError(
                f"Transaction reverted: {receipt.get('revert_reason') or 'unknown reason'}",
                tx_hash=tx_hash,
            )

        events = receipt.get("events") or []
        data = events[0].get("data") if events else None
        if not data or not data[0]:
            raise TransactionError(
                "Failed to get escrow ID from transaction receipt", tx_hash=tx_hash
            )
        return data[0]
