"""Records, messages and genesis state of the payment module."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Protocol

MODULE_NAME = "payment"
STORE_KEY = MODULE_NAME
GOV_MODULE_NAME = "gov"
PROTO_PACKAGE = "mycchain.payment.v1"

PARAMS_KEY = b"p_payment"
MERCHANT_KEY = b"merchant/value/"
PAYMENT_KEY = b"payment/value/"
PAYMENT_COUNT_KEY = b"payment/count/"
SETTLEMENT_KEY = b"settlement/value/"
SETTLEMENT_COUNT_KEY = b"settlement/count/"

# Checks run by Params.validate, keyed by parameter name.
_PARAM_CHECKS: dict[str, Callable[[Any], None]] = {}


@dataclass(frozen=True)
class Params:
    """Module parameters; the module defines none yet."""

    def validate(self) -> None:
        """Run the check registered for each parameter; a failing check raises."""
        for item in fields(self):
            check = _PARAM_CHECKS.get(item.name)
            if check is not None:
                check(getattr(self, item.name))


def default_params() -> Params:
    """Return the default parameters."""
    return Params()


@dataclass
class _Signed:
    creator: str = ""


@dataclass
class _MerchantFields(_Signed):
    index: str = ""
    name: str = ""
    status: str = ""
    registered_at: int = 0


@dataclass
class _PaymentFields(_Signed):
    merchant_id: str = ""
    customer_id: str = ""
    amount: str = ""
    status: str = ""
    created_at: int = 0


@dataclass
class _SettlementFields(_Signed):
    merchant_id: str = ""
    total_amount: str = ""
    settlement_date: int = 0
    status: str = ""


@dataclass
class Merchant(_MerchantFields):
    """A merchant registered under a unique index."""


@dataclass
class Payment(_PaymentFields):
    """A payment stored under a sequential id."""

    id: int = 0


@dataclass
class Settlement(_SettlementFields):
    """A settlement stored under a sequential id."""

    id: int = 0


_LISTS: dict[str, type] = {
    "merchant_map": Merchant,
    "payment_list": Payment,
    "settlement_list": Settlement,
}
_COUNTS = ("payment_count", "settlement_count")


def _record_to_dict(record: Any) -> dict[str, Any]:
    return {
        item.name: (
            str(getattr(record, item.name))
            if isinstance(item.default, int)
            else getattr(record, item.name)
        )
        for item in fields(record)
    }


def _record_from_dict(cls: type, data: dict[str, Any]) -> Any:
    return cls(
        **{
            item.name: (
                int(data[item.name])
                if isinstance(item.default, int)
                else data[item.name]
            )
            for item in fields(cls)
            if item.name in data
        }
    )


def _check_unique_ids(records: list[Any], count: int, kind: str) -> None:
    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"duplicated id for {kind}")
        if record.id >= count:
            raise ValueError(f"{kind} id should be lower or equal than the last id")
        seen.add(record.id)


@dataclass
class GenesisState:
    """The complete state of the module at genesis or export."""

    params: Params = field(default_factory=Params)
    merchant_map: list[Merchant] = field(default_factory=list)
    payment_list: list[Payment] = field(default_factory=list)
    payment_count: int = 0
    settlement_list: list[Settlement] = field(default_factory=list)
    settlement_count: int = 0

    def validate(self) -> None:
        """Raise ValueError when the state is inconsistent."""
        indexes: set[str] = set()
        for merchant in self.merchant_map:
            if merchant.index in indexes:
                raise ValueError("duplicated index for merchant")
            indexes.add(merchant.index)

        _check_unique_ids(self.payment_list, self.payment_count, "payment")
        _check_unique_ids(self.settlement_list, self.settlement_count, "settlement")
        self.params.validate()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form; 64-bit integers become strings."""
        result: dict[str, Any] = {"params": {}}
        for name in _LISTS:
            result[name] = [_record_to_dict(r) for r in getattr(self, name)]
        for name in _COUNTS:
            result[name] = str(getattr(self, name))
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenesisState:
        """Build a state from its JSON form; missing entries take defaults."""
        lists = {
            name: [_record_from_dict(rtype, r) for r in data.get(name) or []]
            for name, rtype in _LISTS.items()
        }
        counts = {name: int(data.get(name, 0)) for name in _COUNTS}
        return cls(params=Params(), **lists, **counts)


def default_genesis() -> GenesisState:
    """Return the default genesis state."""
    return GenesisState(params=default_params())


@dataclass
class MsgCreateMerchant(_MerchantFields):
    pass


@dataclass
class MsgUpdateMerchant(_MerchantFields):
    pass


@dataclass
class MsgDeleteMerchant(_Signed):
    index: str = ""


@dataclass
class MsgCreatePayment(_PaymentFields):
    pass


@dataclass
class MsgUpdatePayment(_PaymentFields):
    id: int = 0


@dataclass
class MsgDeletePayment(_Signed):
    id: int = 0


@dataclass
class MsgCreateSettlement(_SettlementFields):
    pass


@dataclass
class MsgUpdateSettlement(_SettlementFields):
    id: int = 0


@dataclass
class MsgDeleteSettlement(_Signed):
    id: int = 0


@dataclass
class MsgUpdateParams:
    authority: str = ""
    params: Params = field(default_factory=Params)


@dataclass
class PageRequest:
    """Pagination of a list query: by start key or by offset."""

    key: bytes | None = None
    offset: int = 0
    limit: int = 0
    count_total: bool = False
    reverse: bool = False


@dataclass
class PageResponse:
    next_key: bytes | None = None
    total: int = 0


class AuthKeeper(Protocol):
    """What the module needs from the account keeper."""

    def address_codec(self) -> Any: ...

    def get_account(self, address: bytes) -> Any: ...


class BankKeeper(Protocol):
    """What the module needs from the bank keeper."""

    def spendable_coins(self, address: bytes) -> Any: ...


_REGISTERED_MESSAGES = (
    MsgCreateSettlement,
    MsgUpdateSettlement,
    MsgDeleteSettlement,
    MsgCreatePayment,
    MsgUpdatePayment,
    MsgDeletePayment,
    MsgCreateMerchant,
    MsgUpdateMerchant,
    MsgDeleteMerchant,
    MsgUpdateParams,
)


def message_type_urls() -> list[str]:
    """Return the type URLs of every message the module accepts."""
    return [f"/{PROTO_PACKAGE}.{msg.__name__}" for msg in _REGISTERED_MESSAGES]