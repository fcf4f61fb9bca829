"""Serum DEX account and event layouts.

Field order follows the Serum program's serialization exactly; do not reorder.
"""

from __future__ import annotations

import enum
from ..models.base import BaseLayout, BitFlags
from ..models.fields import U64, U128, Blob, PublicKey, Seq128

Blob5 = Blob(5)
Blob7 = Blob(7)
Blob1024 = Blob(1024)
U64x128 = Seq128(U64)
U128x128 = Seq128(U128)


class AccountFlags(BitFlags):
    """Account type flags at the head of every Serum account."""

    initialized: bool = False
    market: bool = False
    open_orders: bool = False
    request_queue: bool = False
    event_queue: bool = False
    bids: bool = False
    asks: bool = False


class OpenOrders(BaseLayout):
    """Open orders account of one owner on one market."""

    head_padding: Blob5 = None
    account_flags: AccountFlags
    market: PublicKey
    owner: PublicKey
    base_token_free: U64
    base_token_total: U64
    quote_token_free: U64
    quote_token_total: U64
    free_slot_bits: U128
    is_bid_bits: U128
    orders: U128x128
    client_ids: U64x128
    referrer_rebates_accrued: U64
    tail_padding: Blob7 = None

    def order_slots(self) -> list[tuple[int, int, bool]]:
        """Return ``(slot, order_id, is_bid)`` for every occupied slot."""
        return [
            (slot, self.orders[slot], bool((self.is_bid_bits >> slot) & 1))
            for slot in range(128)
            if not (self.free_slot_bits >> slot) & 1
        ]


class MarketState(BaseLayout):
    """Market state account (v2 layout)."""

    head_padding: Blob5 = None
    account_flags: AccountFlags
    own_address: PublicKey
    vault_signer_nonce: U64
    base_mint: PublicKey
    quote_mint: PublicKey
    base_vault: PublicKey
    base_deposits_total: U64
    base_fees_accrued: U64
    quote_vault: PublicKey
    quote_deposits_total: U64
    quote_fees_accrued: U64
    quote_dust_threshold: U64
    request_queue: PublicKey
    event_queue: PublicKey
    bids: PublicKey
    asks: PublicKey
    base_lot_size: U64
    quote_lot_size: U64
    fee_rate_bps: U64
    referrer_rebates_accrued: U64
    tail_padding: Blob7 = None


class DidSwap(BaseLayout):
    """Event emitted by the swap program after a completed swap."""

    given_amount: U64
    min_expected_swap_amount: U64
    from_amount: U64
    to_amount: U64
    spill_amount: U64
    from_mint: PublicKey
    to_mint: PublicKey
    quote_mint: PublicKey
    authority: PublicKey


class Side(enum.Enum):
    """Order side as used by the swap program's instruction API."""

    BID = 0
    ASK = 1

    @property
    def byte(self) -> int:
        """Single-byte wire encoding."""
        return self.value

    @property
    def params(self) -> dict[str, dict[str, str]]:
        """Rust enum form expected in instruction arguments."""
        return {self.name.lower(): {}}


LAYOUTS: dict[str, type[BaseLayout]] = {
    "account_flags": AccountFlags,
    "open_orders": OpenOrders,
    "market_state": MarketState,
    "did_swap": DidSwap,
}
