"""Handlers for the transactions the payment module accepts."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from mycpayment.errors import (
    InvalidAddressError,
    InvalidRequestError,
    InvalidSignerError,
    KeyNotFoundError,
    LogicError,
    NotFoundError,
    UnauthorizedError,
)
from mycpayment.keeper import Keeper
from mycpayment.types import (
    Merchant,
    MsgCreateMerchant,
    MsgCreatePayment,
    MsgCreateSettlement,
    MsgDeleteMerchant,
    MsgDeletePayment,
    MsgDeleteSettlement,
    MsgUpdateMerchant,
    MsgUpdateParams,
    MsgUpdatePayment,
    MsgUpdateSettlement,
    Payment,
    Settlement,
)

_STORE_ERRORS = (ValueError, TypeError)


@dataclass(frozen=True)
class _Kind:
    """How one stored record kind reports its errors."""

    name: str
    record: type
    by_index: bool = False
    signer_label: str = "invalid address"
    remove_verb: str = "delete"


_MERCHANT = _Kind(
    "merchant",
    Merchant,
    by_index=True,
    signer_label="invalid signer address",
    remove_verb="remove",
)
_PAYMENT = _Kind("payment", Payment)
_SETTLEMENT = _Kind("settlement", Settlement)


def _record(kind: _Kind, msg: Any, **overrides: Any) -> Any:
    values = {
        item.name: getattr(msg, item.name)
        for item in fields(kind.record)
        if hasattr(msg, item.name)
    }
    return replace(kind.record(**values), **overrides)


class MsgServer:
    """Executes module messages against a keeper."""

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    def _check_address(self, creator: str, label: str = "invalid address") -> None:
        try:
            self.keeper.address_codec.string_to_bytes(creator)
        except _STORE_ERRORS as err:
            raise InvalidAddressError(f"{label}: {err}") from err

    @staticmethod
    def _existing(kind: _Kind, collection: Any, key: Any) -> Any:
        try:
            return collection.get(key)
        except NotFoundError:
            message = "index not set" if kind.by_index else f"key {key} doesn't exist"
            raise KeyNotFoundError(message) from None
        except _STORE_ERRORS as err:
            message = str(err) if kind.by_index else f"failed to get {kind.name}"
            raise LogicError(message) from err

    def _create_numbered(self, kind: _Kind, sequence: Any, collection: Any, msg: Any) -> int:
        self._check_address(msg.creator)
        try:
            next_id = sequence.next()
        except _STORE_ERRORS as err:
            raise InvalidRequestError("failed to get next id") from err
        try:
            collection.set(next_id, _record(kind, msg, id=next_id))
        except _STORE_ERRORS as err:
            raise LogicError(f"failed to set {kind.name}") from err
        return next_id

    def _owned(self, kind: _Kind, collection: Any, key: Any, creator: str) -> None:
        self._check_address(creator, kind.signer_label)
        current = self._existing(kind, collection, key)
        if creator != current.creator:
            raise UnauthorizedError("incorrect owner")

    def _update(self, kind: _Kind, collection: Any, key: Any, msg: Any) -> None:
        self._owned(kind, collection, key, msg.creator)
        try:
            collection.set(key, _record(kind, msg))
        except _STORE_ERRORS as err:
            raise LogicError(f"failed to update {kind.name}") from err

    def _delete(self, kind: _Kind, collection: Any, key: Any, creator: str) -> None:
        self._owned(kind, collection, key, creator)
        try:
            collection.remove(key)
        except _STORE_ERRORS as err:
            raise LogicError(f"failed to {kind.remove_verb} {kind.name}") from err

    def create_merchant(self, msg: MsgCreateMerchant) -> None:
        """Register a merchant under a new index."""
        self._check_address(msg.creator)
        try:
            exists = self.keeper.merchant.has(msg.index)
        except _STORE_ERRORS as err:
            raise LogicError(str(err)) from err
        if exists:
            raise InvalidRequestError("index already set")
        try:
            self.keeper.merchant.set(msg.index, _record(_MERCHANT, msg))
        except _STORE_ERRORS as err:
            raise LogicError(str(err)) from err

    def update_merchant(self, msg: MsgUpdateMerchant) -> None:
        """Replace a merchant owned by the signer."""
        self._update(_MERCHANT, self.keeper.merchant, msg.index, msg)

    def delete_merchant(self, msg: MsgDeleteMerchant) -> None:
        """Remove a merchant owned by the signer."""
        self._delete(_MERCHANT, self.keeper.merchant, msg.index, msg.creator)

    def create_payment(self, msg: MsgCreatePayment) -> int:
        """Store a new payment and return its id."""
        return self._create_numbered(
            _PAYMENT, self.keeper.payment_seq, self.keeper.payment, msg
        )

    def update_payment(self, msg: MsgUpdatePayment) -> None:
        """Replace a payment owned by the signer."""
        self._update(_PAYMENT, self.keeper.payment, msg.id, msg)

    def delete_payment(self, msg: MsgDeletePayment) -> None:
        """Remove a payment owned by the signer."""
        self._delete(_PAYMENT, self.keeper.payment, msg.id, msg.creator)

    def create_settlement(self, msg: MsgCreateSettlement) -> int:
        """Store a new settlement and return its id."""
        return self._create_numbered(
            _SETTLEMENT, self.keeper.settlement_seq, self.keeper.settlement, msg
        )

    def update_settlement(self, msg: MsgUpdateSettlement) -> None:
        """Replace a settlement owned by the signer."""
        self._update(_SETTLEMENT, self.keeper.settlement, msg.id, msg)

    def delete_settlement(self, msg: MsgDeleteSettlement) -> None:
        """Remove a settlement owned by the signer."""
        self._delete(_SETTLEMENT, self.keeper.settlement, msg.id, msg.creator)

    def update_params(self, msg: MsgUpdateParams) -> None:
        """Replace the module parameters; only the authority may do so."""
        codec = self.keeper.address_codec
        try:
            authority = codec.string_to_bytes(msg.authority)
        except _STORE_ERRORS as err:
            raise ValueError(f"invalid authority address: {err}") from err

        if authority != self.keeper.authority:
            expected = codec.bytes_to_string(self.keeper.authority)
            raise InvalidSignerError(
                f"invalid authority; expected {expected}, got {msg.authority}"
            )

        msg.params.validate()
        self.keeper.params.set(msg.params)