"""The payment module as a unit the application wires together."""

from __future__ import annotations

import json
from typing import Any

from mycpayment.address import Bech32Codec, module_address, sample_acc_address
from mycpayment.keeper import Keeper
from mycpayment.types import (
    GOV_MODULE_NAME,
    MODULE_NAME,
    PROTO_PACKAGE,
    AuthKeeper,
    BankKeeper,
    GenesisState,
    Merchant,
    Payment,
    Settlement,
    default_genesis,
    default_params,
)

CONSENSUS_VERSION = 1


def _command(
    rpc_method: str,
    use: str = "",
    short: str = "",
    alias: tuple[str, ...] = (),
    positional_args: tuple[str, ...] = (),
    skip: bool = False,
) -> dict[str, Any]:
    return {
        "rpc_method": rpc_method,
        "use": use,
        "short": short,
        "alias": list(alias),
        "positional_args": list(positional_args),
        "skip": skip,
    }


def _parse_genesis(raw: bytes | str) -> GenesisState:
    try:
        return GenesisState.from_dict(json.loads(raw))
    except (ValueError, TypeError, AttributeError, KeyError) as err:
        raise ValueError(f"failed to unmarshal {MODULE_NAME} genesis state: {err}") from err


def _encode_genesis(state: GenesisState) -> bytes:
    return json.dumps(state.to_dict()).encode()


class AppModule:
    """Bundles the keeper with genesis handling and command descriptions."""

    def __init__(
        self,
        keeper: Keeper,
        auth_keeper: AuthKeeper | None = None,
        bank_keeper: BankKeeper | None = None,
    ) -> None:
        self.keeper = keeper
        self.auth_keeper = auth_keeper
        self.bank_keeper = bank_keeper
        self.block_height = 0

    def name(self) -> str:
        """Return the module name."""
        return MODULE_NAME

    def consensus_version(self) -> int:
        """Return the version that changes with each state-breaking change."""
        return CONSENSUS_VERSION

    def default_genesis(self) -> bytes:
        """Return the default genesis state as JSON."""
        return _encode_genesis(default_genesis())

    def validate_genesis(self, raw: bytes | str) -> None:
        """Parse and check a JSON genesis state, raising ValueError if bad."""
        _parse_genesis(raw).validate()

    def init_genesis(self, raw: bytes | str) -> None:
        """Load the module's state from a JSON genesis state."""
        state = _parse_genesis(raw)
        try:
            self.keeper.init_genesis(state)
        except (ValueError, TypeError) as err:
            raise RuntimeError(
                f"failed to initialize {MODULE_NAME} genesis state: {err}"
            ) from err

    def export_genesis(self) -> bytes:
        """Return the module's current state as JSON."""
        try:
            state = self.keeper.export_genesis()
        except (LookupError, ValueError, TypeError) as err:
            raise RuntimeError(f"failed to export {MODULE_NAME} genesis state: {err}") from err
        return _encode_genesis(state)

    def begin_block(self) -> int:
        """Start a new block and return its height; the module has no other block logic."""
        self.block_height += 1
        return self.block_height

    def end_block(self) -> int:
        """Finish the current block and return its height; no state is changed."""
        return self.block_height

    def generate_genesis_state(self) -> bytes:
        """Return a small JSON genesis state with random creators."""
        state = GenesisState(
            params=default_params(),
            merchant_map=[
                Merchant(creator=sample_acc_address(), index="0"),
                Merchant(creator=sample_acc_address(), index="1"),
            ],
            payment_list=[
                Payment(id=0, creator=sample_acc_address()),
                Payment(id=1, creator=sample_acc_address()),
            ],
            payment_count=2,
            settlement_list=[
                Settlement(id=0, creator=sample_acc_address()),
                Settlement(id=1, creator=sample_acc_address()),
            ],
            settlement_count=2,
        )
        return _encode_genesis(state)

    def auto_cli_options(self) -> dict[str, Any]:
        """Describe the command-line commands for queries and transactions."""
        query_commands = [
            _command("Params", "params", "Shows the parameters of the module"),
            _command("ListMerchant", "list-merchant", "List all merchant"),
            _command(
                "GetMerchant",
                "get-merchant [id]",
                "Gets a merchant",
                alias=("show-merchant",),
                positional_args=("index",),
            ),
            _command("ListPayment", "list-payment", "List all payment"),
            _command(
                "GetPayment",
                "get-payment [id]",
                "Gets a payment by id",
                alias=("show-payment",),
                positional_args=("id",),
            ),
            _command("ListSettlement", "list-settlement", "List all settlement"),
            _command(
                "GetSettlement",
                "get-settlement [id]",
                "Gets a settlement by id",
                alias=("show-settlement",),
                positional_args=("id",),
            ),
        ]
        merchant_fields = ("index", "name", "status", "registered_at")
        payment_fields = ("merchant_id", "customer_id", "amount", "status", "created_at")
        settlement_fields = ("merchant_id", "total_amount", "settlement_date", "status")
        tx_commands = [
            _command("UpdateParams", skip=True),
            _command(
                "CreateMerchant",
                "create-merchant [index] [name] [status] [registered-at]",
                "Create a new merchant",
                positional_args=merchant_fields,
            ),
            _command(
                "UpdateMerchant",
                "update-merchant [index] [name] [status] [registered-at]",
                "Update merchant",
                positional_args=merchant_fields,
            ),
            _command(
                "DeleteMerchant",
                "delete-merchant [index]",
                "Delete merchant",
                positional_args=("index",),
            ),
            _command(
                "CreatePayment",
                "create-payment [merchant-id] [customer-id] [amount] [status] [created-at]",
                "Create payment",
                positional_args=payment_fields,
            ),
            _command(
                "UpdatePayment",
                "update-payment [id] [merchant-id] [customer-id] [amount] [status] [created-at]",
                "Update payment",
                positional_args=("id",) + payment_fields,
            ),
            _command(
                "DeletePayment",
                "delete-payment [id]",
                "Delete payment",
                positional_args=("id",),
            ),
            _command(
                "CreateSettlement",
                "create-settlement [merchant-id] [total-amount] [settlement-date] [status]",
                "Create settlement",
                positional_args=settlement_fields,
            ),
            _command(
                "UpdateSettlement",
                "update-settlement [id] [merchant-id] [total-amount] [settlement-date] [status]",
                "Update settlement",
                positional_args=("id",) + settlement_fields,
            ),
            _command(
                "DeleteSettlement",
                "delete-settlement [id]",
                "Delete settlement",
                positional_args=("id",),
            ),
        ]
        return {
            "query": {
                "service": f"{PROTO_PACKAGE}.Query",
                "rpc_command_options": query_commands,
            },
            "tx": {
                "service": f"{PROTO_PACKAGE}.Msg",
                "enhance_custom_command": True,
                "rpc_command_options": tx_commands,
            },
        }


def _resolve_authority(address_codec: Bech32Codec, authority: str) -> bytes:
    if not authority:
        return module_address(GOV_MODULE_NAME)
    try:
        return address_codec.string_to_bytes(authority)
    except ValueError:
        return module_address(authority)


def provide_module(
    address_codec: Bech32Codec,
    authority: str = "",
    bank_keeper: BankKeeper | None = None,
    auth_keeper: AuthKeeper | None = None,
) -> tuple[Keeper, AppModule]:
    """Build the keeper and the module.

    The authority defaults to the governance module's address; a given
    authority is read as an account address, or else as a module name.
    """
    keeper = Keeper(address_codec, _resolve_authority(address_codec, authority), bank_keeper)
    return keeper, AppModule(keeper, auth_keeper, bank_keeper)