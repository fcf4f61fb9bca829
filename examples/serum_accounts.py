#!/usr/bin/env python3
"""Decode Serum DEX accounts.

The bytes would normally come from a getAccountInfo RPC call; here they are
built by hand so the example runs offline.
"""

from __future__ import annotations

from solayout import DecodeError, decode
from solayout.serum import AccountFlags, MarketState, OpenOrders


def fake_open_orders() -> bytes:
    data = bytearray(OpenOrders.byte_width())
    data[5] = 0x05  # initialized | open_orders
    data[13:45] = bytes(range(32))  # market
    data[77:85] = (1_500_000).to_bytes(8, "little")  # base_token_free
    # All slots free except slot 0, which holds a bid
    data[109:125] = ((2**128 - 1) & ~1).to_bytes(16, "little")
    data[125:141] = (1).to_bytes(16, "little")
    data[141:157] = (42 << 64 | 7).to_bytes(16, "little")
    return bytes(data)


def main() -> None:
    account = decode(OpenOrders, fake_open_orders())
    print(f"Flags: {account.account_flags}")
    print(f"Market: {account.market.hex()}")
    print(f"Base free: {account.base_token_free}")
    for slot, order_id, is_bid in account.order_slots():
        print(f"Slot {slot}: order {order_id:#x} {'bid' if is_bid else 'ask'}")

    flags = decode(AccountFlags, account.to_bytes()[5:13])
    print(f"Re-read flags: open_orders={flags.open_orders}")

    # A market account is expected here, but an open orders account was fetched
    try:
        market = decode(MarketState, fake_open_orders(), strict=True)
    except DecodeError as e:
        print(f"Not a market account: {e}")
    else:
        print(f"Unexpected market: {market.own_address.hex()}")


if __name__ == "__main__":
    main()
