import json

import pytest

from mycpayment.address import Bech32Codec, module_address
from mycpayment.module import AppModule, provide_module
from mycpayment.types import (
    GOV_MODULE_NAME,
    MODULE_NAME,
    GenesisState,
    Merchant,
    Payment,
    Settlement,
    default_genesis,
    default_params,
)


@pytest.fixture
def module():
    _, app_module = provide_module(Bech32Codec())
    return app_module


def test_name_and_version(module):
    assert module.name() == MODULE_NAME
    assert module.consensus_version() == 1


def test_default_genesis_round_trip(module):
    raw = module.default_genesis()
    assert GenesisState.from_dict(json.loads(raw)) == default_genesis()


def test_validate_genesis_rejects_bad_json(module):
    with pytest.raises(ValueError, match="failed to unmarshal payment genesis state"):
        module.validate_genesis(b"{not json")


def test_validate_genesis_rejects_duplicates(module):
    state = GenesisState(merchant_map=[Merchant(index="0"), Merchant(index="0")])
    raw = json.dumps(state.to_dict())
    with pytest.raises(ValueError, match="duplicated index for merchant"):
        module.validate_genesis(raw)


def test_init_then_export_round_trip(module):
    state = GenesisState(
        params=default_params(),
        merchant_map=[Merchant(index="0"), Merchant(index="1")],
        payment_list=[Payment(id=0), Payment(id=1)],
        payment_count=2,
        settlement_list=[Settlement(id=0), Settlement(id=1)],
        settlement_count=2,
    )
    module.init_genesis(json.dumps(state.to_dict()))
    exported = GenesisState.from_dict(json.loads(module.export_genesis()))
    assert exported == state


def test_init_genesis_rejects_bad_json(module):
    with pytest.raises(ValueError):
        module.init_genesis("[1, 2")


def test_export_without_params_fails(module):
    with pytest.raises(RuntimeError):
        module.export_genesis()


def test_blocks_leave_state_unchanged(module):
    module.init_genesis(module.default_genesis())
    before = module.export_genesis()
    module.begin_block()
    module.end_block()
    assert module.export_genesis() == before


def test_generate_genesis_state_is_valid(module):
    raw = module.generate_genesis_state()
    state = GenesisState.from_dict(json.loads(raw))
    state.validate()
    assert [m.index for m in state.merchant_map] == ["0", "1"]
    assert state.payment_count == len(state.payment_list)
    assert state.settlement_count == len(state.settlement_list)
    codec = Bech32Codec()
    creators = [m.creator for m in state.merchant_map] + [p.creator for p in state.payment_list]
    for creator in creators:
        assert codec.bytes_to_string(codec.string_to_bytes(creator)) == creator


def test_generated_genesis_loads(module):
    raw = module.generate_genesis_state()
    module.init_genesis(raw)
    exported = GenesisState.from_dict(json.loads(module.export_genesis()))
    assert exported == GenesisState.from_dict(json.loads(raw))


def test_auto_cli_query_commands(module):
    options = module.auto_cli_options()
    methods = [c["rpc_method"] for c in options["query"]["rpc_command_options"]]
    assert methods == [
        "Params",
        "ListMerchant",
        "GetMerchant",
        "ListPayment",
        "GetPayment",
        "ListSettlement",
        "GetSettlement",
    ]
    assert options["query"]["service"].endswith(".Query")


def test_auto_cli_tx_commands(module):
    options = module.auto_cli_options()
    commands = {c["rpc_method"]: c for c in options["tx"]["rpc_command_options"]}
    assert commands["UpdateParams"]["skip"] is True
    assert commands["CreatePayment"]["positional_args"] == [
        "merchant_id",
        "customer_id",
        "amount",
        "status",
        "created_at",
    ]
    assert commands["DeleteMerchant"]["use"] == "delete-merchant [index]"
    assert options["tx"]["enhance_custom_command"] is True


def test_provide_module_default_authority():
    keeper, app_module = provide_module(Bech32Codec())
    assert keeper.authority == module_address(GOV_MODULE_NAME)
    assert app_module.keeper is keeper


def test_provide_module_bech32_authority():
    codec = Bech32Codec()
    address = module_address("admin")
    keeper, _ = provide_module(codec, codec.bytes_to_string(address))
    assert keeper.authority == address


def test_provide_module_named_authority():
    keeper, _ = provide_module(Bech32Codec(), "admin")
    assert keeper.authority == module_address("admin")


def test_module_constructed_directly_shares_keeper():
    keeper, _ = provide_module(Bech32Codec())
    app_module = AppModule(keeper)
    app_module.init_genesis(app_module.default_genesis())
    assert keeper.params.get() == default_params()