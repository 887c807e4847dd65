"""EscrowNet Python SDK — user registration and escrow calls on Starknet."""

from escrownet.client import EscrowNetSDK
from escrownet.contract import CONTRACT_ADDRESS, ESCROW_NET_ABI, StarknetContractBinding
from escrownet.errors import (
    EscrowNetError,
    EstimationError,
    InsufficientFundsError,
    InsufficientGasError,
    InvalidNonceError,
    TransactionError,
    ValidationError,
)
from escrownet.gas import estimate_fees
from escrownet.provider import MAINNET_RPC_URL, SEPOLIA_RPC_URL, StarknetProvider
from escrownet.types import (
    EscrowParams,
    ExecutionStatus,
    FinalityStatus,
    GasEstimate,
    ResourceBound,
    TransactionResult,
)

__version__ = "0.1.0"
__all__ = [
    "EscrowNetSDK",
    "CONTRACT_ADDRESS",
    "ESCROW_NET_ABI",
    "StarknetContractBinding",
    "EscrowNetError",
    "EstimationError",
    "InsufficientFundsError",
    "InsufficientGasError",
    "InvalidNonceError",
    "TransactionError",
    "ValidationError",
    "estimate_fees",
    "MAINNET_RPC_URL",
    "SEPOLIA_RPC_URL",
    "StarknetProvider",
    "EscrowParams",
    "ExecutionStatus",
    "FinalityStatus",
    "GasEstimate",
    "ResourceBound",
    "TransactionResult",
]
