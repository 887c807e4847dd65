"""Provider adapter over starknet-py's FullNodeClient."""

from __future__ import annotations

import logging
from typing import Any, Union

from starknet_py.net.full_node_client import FullNodeClient

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────
# Constants
# ──────────────────────────────────────────────────────

MAINNET_RPC_URL = "https://starknet-mainnet.public.blastapi.io/rpc/v0_8"
SEPOLIA_RPC_URL = "https://starknet-sepolia.public.blastapi.io/rpc/v0_8"

DEFAULT_POLL_INTERVAL = 5.0


def _to_hash(tx_hash: Union[int, str]) -> int:
    return int(tx_hash, 16) if isinstance(tx_hash, str) else tx_hash


def _value(status: Any) -> Any:
    return getattr(status, "value", status)


def _receipt_to_dict(receipt) -> dict:
    """Flatten a starknet-py TransactionReceipt; felts become 0x-hex strings."""
    finality_status = _value(receipt.finality_status)
    return {
        "transaction_hash": hex(receipt.transaction_hash),
        "status": finality_status,
        "finality_status": finality_status,
        "execution_status": _value(receipt.execution_status),
        "revert_reason": receipt.revert_reason,
        "events": [
            {
                "from_address": hex(event.from_address),
                "keys": [hex(key) for key in event.keys],
                "data": [hex(item) for item in event.data],
            }
            for event in receipt.events or []
        ],
    }


def _normalize_fee_estimate(entry: dict) -> dict:
    """Map one FEE_ESTIMATE object onto per-resource gas amounts.

    RPC 0.8 reports ``l1_gas_consumed``; 0.7 nodes call it ``gas_consumed``
    and ``data_gas_consumed``.
    """
    return {
        "overall_fee": {
            "l1_gas": entry.get("l1_gas_consumed", entry.get("gas_consumed", "0x0")),
            "l1_data_gas": entry.get(
                "l1_data_gas_consumed", entry.get("data_gas_consumed", "0x0")
            ),
            "l2_gas": entry.get("l2_gas_consumed", "0x0"),
        },
        "estimate": entry,
    }


class StarknetProvider:
    """
    Exposes a starknet-py ``FullNodeClient`` as the SDK's ``Provider``.

    Usage:
        provider = StarknetProvider(FullNodeClient(node_url=SEPOLIA_RPC_URL))
        receipt = await provider.get_transaction_receipt("0x123...")
    """

    def __init__(
        self, client: FullNodeClient, poll_interval: float = DEFAULT_POLL_INTERVAL
    ):
        self.client = client
        self.poll_interval = poll_interval

    @classmethod
    def from_url(
        cls, rpc_url: str = SEPOLIA_RPC_URL, poll_interval: float = DEFAULT_POLL_INTERVAL
    ) -> "StarknetProvider":
        return cls(FullNodeClient(node_url=rpc_url), poll_interval=poll_interval)

    async def estimate_fee(
        self, transactions: list[dict], block_id: str = "pending"
    ) -> list[dict]:
        # Draft transactions arrive in RPC form, so they go through the
        # client's transport rather than its AccountTransaction-typed API.
        result = await self.client._client.call(
            method_name="estimateFee",
            params={
                "request": transactions,
                "simulation_flags": [],
                "block_id": block_id,
            },
        )
        return [_normalize_fee_estimate(entry) for entry in result]

    async def get_transaction_receipt(self, tx_hash: Union[int, str]) -> dict:
        receipt = await self.client.get_transaction_receipt(_to_hash(tx_hash))
        return _receipt_to_dict(receipt)

    async def wait_for_transaction(self, tx_hash: Union[int, str]) -> None:
        """Wait until the transaction is accepted.

        Polling is bounded by ``wait_for_tx``'s retry count. A reverted,
        rejected or never-received transaction raises one of starknet-py's
        ``TransactionFailedError`` subclasses.
        """
        tx_hash = _to_hash(tx_hash)
        logger.debug("Waiting for transaction %s", hex(tx_hash))
        await self.client.wait_for_tx(tx_hash, check_interval=self.poll_interval)
