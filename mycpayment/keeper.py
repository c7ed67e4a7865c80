"""State of the payment module and its genesis import and export."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from mycpayment.address import Bech32Codec
from mycpayment.store import Item, Map, Sequence
from mycpayment.types import (
    MERCHANT_KEY,
    PARAMS_KEY,
    PAYMENT_COUNT_KEY,
    PAYMENT_KEY,
    SETTLEMENT_COUNT_KEY,
    SETTLEMENT_KEY,
    BankKeeper,
    GenesisState,
    Merchant,
    Params,
    Payment,
    Settlement,
    default_genesis,
)


class Keeper:
    """Holds the module's collections and the address allowed to change params."""

    def __init__(
        self,
        address_codec: Bech32Codec,
        authority: bytes,
        bank_keeper: BankKeeper | None = None,
        store: MutableMapping[bytes, Any] | None = None,
    ) -> None:
        try:
            address_codec.bytes_to_string(authority)
        except (ValueError, TypeError) as err:
            raise ValueError(f"invalid authority address {authority!r}: {err}") from err

        self.store: MutableMapping[bytes, Any] = {} if store is None else store
        self.address_codec = address_codec
        self.authority = bytes(authority)
        self.bank_keeper = bank_keeper

        self.params: Item[Params] = Item(self.store, PARAMS_KEY, "params")
        self.merchant: Map[str, Merchant] = Map(self.store, MERCHANT_KEY, str, "merchant")
        self.payment: Map[int, Payment] = Map(self.store, PAYMENT_KEY, int, "payment")
        self.payment_seq = Sequence(self.store, PAYMENT_COUNT_KEY, "paymentSequence")
        self.settlement: Map[int, Settlement] = Map(
            self.store, SETTLEMENT_KEY, int, "settlement"
        )
        self.settlement_seq = Sequence(
            self.store, SETTLEMENT_COUNT_KEY, "settlementSequence"
        )

    def init_genesis(self, gen_state: GenesisState) -> None:
        """Load the module's state from a genesis state."""
        for merchant in gen_state.merchant_map:
            self.merchant.set(merchant.index, merchant)
        for payment in gen_state.payment_list:
            self.payment.set(payment.id, payment)
        self.payment_seq.set(gen_state.payment_count)
        for settlement in gen_state.settlement_list:
            self.settlement.set(settlement.id, settlement)
        self.settlement_seq.set(gen_state.settlement_count)
        self.params.set(gen_state.params)

    def export_genesis(self) -> GenesisState:
        """Return the module's current state as a genesis state."""
        genesis = default_genesis()
        genesis.params = self.params.get()
        genesis.merchant_map = [value for _, value in self.merchant.walk()]
        genesis.payment_list = [value for _, value in self.payment.walk()]
        genesis.payment_count = self.payment_seq.peek()
        genesis.settlement_list = [value for _, value in self.settlement.walk()]
        genesis.settlement_count = self.settlement_seq.peek()
        return genesis