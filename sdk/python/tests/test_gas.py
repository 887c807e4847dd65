"""Tests for gas-fee estimation."""

from unittest.mock import AsyncMock

import pytest

from escrownet.errors import EscrowNetError, EstimationError
from escrownet.gas import PLACEHOLDER_RESOURCE_BOUNDS, estimate_fees

DRAFT_TX = {
    "type": "INVOKE",
    "sender_address": "0x123",
    "calldata": [],
    "signature": [],
    "nonce": "0x0",
    "version": "0x3",
}


@pytest.fixture
def provider():
    provider = AsyncMock()
    provider.estimate_fee.return_value = [
        {"overall_fee": {"l1_gas": "1000", "l1_data_gas": "500"}}
    ]
    return provider


class TestEstimateFees:
    """Tests for estimate_fees."""

    @pytest.mark.asyncio
    async def test_applies_buffer(self, provider):
        estimate = await estimate_fees(provider, DRAFT_TX)

        assert int(estimate.l1_gas.max_amount, 16) >= 1200
        assert int(estimate.l1_data_gas.max_amount, 16) >= 600
        assert estimate.l2_gas.max_amount == "0x0"

    @pytest.mark.asyncio
    async def test_exact_amounts_and_prices(self, provider):
        estimate = await estimate_fees(provider, DRAFT_TX)

        assert estimate.l1_gas.max_amount == hex(1200)
        assert estimate.l1_data_gas.max_amount == hex(600)
        assert estimate.l1_gas.max_price_per_unit == "0x0"
        assert estimate.l1_data_gas.max_price_per_unit == "0x0"
        assert estimate.l2_gas.max_price_per_unit == "0x0"

    @pytest.mark.asyncio
    async def test_rounds_up(self, provider):
        provider.estimate_fee.return_value = [
            {"overall_fee": {"l1_gas": 1, "l1_data_gas": "0x7"}}
        ]

        estimate = await estimate_fees(provider, DRAFT_TX)

        # 1 * 1.2 -> 2, 7 * 1.2 = 8.4 -> 9
        assert estimate.l1_gas.max_amount == "0x2"
        assert estimate.l1_data_gas.max_amount == "0x9"

    @pytest.mark.asyncio
    async def test_large_amounts_stay_exact(self, provider):
        provider.estimate_fee.return_value = [
            {"overall_fee": {"l1_gas": 10**30, "l1_data_gas": 0}}
        ]

        estimate = await estimate_fees(provider, DRAFT_TX)

        assert int(estimate.l1_gas.max_amount, 16) == 12 * 10**29
        assert estimate.l1_data_gas.max_amount == "0x0"

    @pytest.mark.asyncio
    async def test_sends_placeholder_bounds_against_pending_block(self, provider):
        await estimate_fees(provider, DRAFT_TX)

        provider.estimate_fee.assert_awaited_once_with(
            [{**DRAFT_TX, "resource_bounds": PLACEHOLDER_RESOURCE_BOUNDS}],
            block_id="pending",
        )
        assert "resource_bounds" not in DRAFT_TX

    @pytest.mark.asyncio
    async def test_to_dict_matches_resource_bounds_shape(self, provider):
        estimate = await estimate_fees(provider, DRAFT_TX)

        assert estimate.to_dict() == {
            "l1_gas": {"max_amount": "0x4b0", "max_price_per_unit": "0x0"},
            "l1_data_gas": {"max_amount": "0x258", "max_price_per_unit": "0x0"},
            "l2_gas": {"max_amount": "0x0", "max_price_per_unit": "0x0"},
        }

    @pytest.mark.asyncio
    async def test_wraps_provider_errors(self, provider):
        provider.estimate_fee.side_effect = Exception("Estimation failed")

        with pytest.raises(EstimationError) as exc:
            await estimate_fees(provider, DRAFT_TX)

        assert "Failed to estimate gas fees" in str(exc.value)
        assert "Estimation failed" in str(exc.value)
        assert isinstance(exc.value, EscrowNetError)

    @pytest.mark.asyncio
    async def test_wraps_malformed_response(self, provider):
        provider.estimate_fee.return_value = []

        with pytest.raises(EstimationError, match="Failed to estimate gas fees"):
            await estimate_fees(provider, DRAFT_TX)
