"""Gas-fee estimation using starknet_estimateFee."""

from __future__ import annotations

import logging
from typing import Union

from escrownet.errors import EstimationError
from escrownet.hashing import to_felt
from escrownet.types import GasEstimate, Provider, ResourceBound

logger = logging.getLogger(__name__)

# Caps sent with the estimation request; the node ignores them for the estimate
PLACEHOLDER_RESOURCE_BOUNDS = {
    "l1_gas": {"max_amount": "0x1000", "max_price_per_unit": "0x0"},
    "l1_data_gas": {"max_amount": "0x1000", "max_price_per_unit": "0x0"},
    "l2_gas": {"max_amount": "0x0", "max_price_per_unit": "0x0"},
}

# 20% buffer on estimated amounts, as a fraction
BUFFER_NUMERATOR = 6
BUFFER_DENOMINATOR = 5


def _with_buffer(value: Union[int, str]) -> str:
    amount = to_felt(value)
    # ceil(amount * 1.2) without going through float
    return hex(-(-amount * BUFFER_NUMERATOR // BUFFER_DENOMINATOR))


async def estimate_fees(provider: Provider, transaction: dict) -> GasEstimate:
    """
    Estimate resource bounds for a transaction.

    Args:
        provider: Anything implementing ``estimate_fee`` (see ``Provider``)
        transaction: Draft transaction in Starknet RPC form

    Returns:
        GasEstimate with L1 and L1-data amounts padded by 20% and L2 at zero

    Raises:
        EstimationError: If the estimate cannot be fetched or read
    """
    try:
        estimates = await provider.estimate_fee(
            [{**transaction, "resource_bounds": PLACEHOLDER_RESOURCE_BOUNDS}],
            block_id="pending",
        )
        overall_fee = estimates[0]["overall_fee"]
        estimate = GasEstimate(
            l1_gas=ResourceBound(max_amount=_with_buffer(overall_fee["l1_gas"])),
            l1_data_gas=ResourceBound(
                max_amount=_with_buffer(overall_fee["l1_data_gas"])
            ),
            l2_gas=ResourceBound(max_amount="0x0"),
        )
    except Exception as e:
        raise EstimationError(f"Failed to estimate gas fees: {e}") from e

    logger.debug("Estimated resource bounds: %s", estimate)
    return estimate
