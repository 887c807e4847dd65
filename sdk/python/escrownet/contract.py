"""EscrowNet contract ABI and the starknet-py backed contract binding."""

from __future__ import annotations

import logging

from starknet_py.contract import Contract
from starknet_py.net.account.base_account import BaseAccount

from escrownet.hashing import to_felt
from escrownet.types import TransactionResult

logger = logging.getLogger(__name__)

# Deployed EscrowNet contract
CONTRACT_ADDRESS = "0x188167902e1e0bdc56e32fa394ba3446a4a6cd3768536425f8dd50f5d20a8ca"

# EscrowNet contract ABI (Cairo 0 format, the external functions we call)
ESCROW_NET_ABI = [
    {
        "name": "Uint256",
        "type": "struct",
        "size": 2,
        "members": [
            {"name": "low", "type": "felt", "offset": 0},
            {"name": "high", "type": "felt", "offset": 1},
        ],
    },
    {
        "name": "register_user",
        "type": "function",
        "inputs": [{"name": "username", "type": "felt"}],
        "outputs": [],
    },
    {
        "name": "create_escrow",
        "type": "function",
        "inputs": [
            {"name": "recipient", "type": "felt"},
            {"name": "amount", "type": "Uint256"},
            {"name": "description", "type": "felt"},
        ],
        "outputs": [{"name": "escrow_id", "type": "felt"}],
    },
    {
        "name": "release_funds",
        "type": "function",
        "inputs": [{"name": "escrow_id", "type": "felt"}],
        "outputs": [],
    },
    {
        "name": "cancel_escrow",
        "type": "function",
        "inputs": [{"name": "escrow_id", "type": "felt"}],
        "outputs": [],
    },
]


class StarknetContractBinding:
    """
    EscrowNet contract bound to a starknet-py account.

    Calldata is serialized from ``ESCROW_NET_ABI`` by starknet-py, including
    the Uint256 amount. Every method sends a single invoke transaction and
    returns once the node has accepted it for processing; waiting for
    finality is the caller's job.

    Usage:
        binding = StarknetContractBinding(account)
        tx = await binding.release_funds("0x2a")
    """

    def __init__(self, account: BaseAccount, address: str = CONTRACT_ADDRESS):
        self.account = account
        self.address = to_felt(address)
        self.contract = Contract(
            address=self.address,
            abi=ESCROW_NET_ABI,
            provider=account,
            cairo_version=0,
        )

    async def register_user(self, username_hash: int) -> TransactionResult:
        return await self._invoke("register_user", username_hash)

    async def create_escrow(
        self, recipient: str, amount: int, description_hash: int
    ) -> TransactionResult:
        return await self._invoke(
            "create_escrow", to_felt(recipient), amount, description_hash
        )

    async def release_funds(self, escrow_id: str) -> TransactionResult:
        return await self._invoke("release_funds", to_felt(escrow_id))

    async def cancel_escrow(self, escrow_id: str) -> TransactionResult:
        return await self._invoke("cancel_escrow", to_felt(escrow_id))

    # ── Internal helpers ──

    async def _invoke(self, name: str, *args) -> TransactionResult:
        result = await self.contract.functions[name].invoke_v3(
            *args, auto_estimate=True
        )
        tx_hash = hex(result.hash)
        logger.debug("Submitted %s: %s", name, tx_hash)
        return TransactionResult(transaction_hash=tx_hash)
