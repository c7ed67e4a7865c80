# mycpayment

A self-contained ledger module that keeps merchants, payments and settlements
in an ordered key-value store. It handles create, update and delete messages,
answers paginated queries, and imports and exports its state as a JSON
genesis document.

## Installation

```
pip install mycpayment
```

The `test` extra adds pytest for running the test suite.

## Concepts

- **Merchants** (`mycpayment.types.Merchant`) are stored under a string
  index. Only the account that created a merchant may update or delete it.
- **Payments** and **settlements** (`Payment`, `Settlement`) get sequential
  ids from a counter that starts at 0. Only their creator may change or
  remove them.
- Account addresses are bech32 strings. `mycpayment.address.Bech32Codec`
  converts between raw address bytes and their text form (the default prefix
  is `cosmos`). `module_address` derives the address of a named module
  account, and `sample_acc_address` returns a random one.
- The **authority** may replace the module parameters and nobody else may.
  By default it is the address of the `gov` module account.

## Usage

```python
from mycpayment.address import Bech32Codec
from mycpayment.module import provide_module
from mycpayment.msg_server import MsgServer
from mycpayment.query import QueryServer
from mycpayment.types import MsgCreateMerchant, MsgCreatePayment, PageRequest

codec = Bech32Codec("cosmos")
keeper, app = provide_module(codec)

creator = codec.bytes_to_string(b"signerAddr__________________")
server = MsgServer(keeper)
server.create_merchant(MsgCreateMerchant(creator=creator, index="shop-1", name="Shop"))
payment_id = server.create_payment(
    MsgCreatePayment(creator=creator, merchant_id="shop-1", amount="100")
)
print(payment_id)  # 0

queries = QueryServer(keeper)
print(queries.get_merchant("shop-1").name)  # Shop
payments, page = queries.list_payment(PageRequest(limit=10, count_total=True))
print(len(payments), page.total)  # 1 1
```

`provide_module(address_codec, authority, bank_keeper, auth_keeper)` builds a
`Keeper` and an `AppModule`. If `authority` is given, it is read as a bech32
account address. If it does not parse as one, it is taken as a module name.

### Messages

`MsgServer` has `create_merchant`, `update_merchant`, `delete_merchant`,
`create_payment`, `update_payment`, `delete_payment`, `create_settlement`,
`update_settlement`, `delete_settlement` and `update_params`. The create
methods for payments and settlements return the new id. The others return
`None`.

### Queries

`QueryServer` has `params`, `get_merchant` (by index), `get_payment` and
`get_settlement` (by id), and `list_merchant`, `list_payment` and
`list_settlement`.

The list queries take a `PageRequest` and return a list of records together
with a `PageResponse`. A page is selected either by `offset` or by `key`,
which is the `next_key` from the previous response. Giving both is an error.
A `limit` of 0 means 100 records, with the total counted. The function
`collection_paginate` does the same for any `mycpayment.store.Map`.

### Storage

`Keeper` keeps its collections (`params`, `merchant`, `payment`,
`payment_seq`, `settlement`, `settlement_seq`) in one mutable mapping from
bytes to values. By default this is a fresh in-memory `dict`. You can pass any
`MutableMapping` as `store` to `Keeper`. The collection types `Item`,
`Sequence` and `Map` live in `mycpayment.store`.

## Errors

Failures raise exceptions from `mycpayment.errors`:

- `InvalidAddressError` for a malformed creator address.
- `KeyNotFoundError` when a record to update, delete or fetch by id does not
  exist.
- `UnauthorizedError` when the signer is not the owner.
- `InvalidRequestError`, for example when a merchant index is already taken.
- `InvalidSignerError` when a parameter update comes from the wrong
  authority. A parameter update with an unparseable authority raises
  `ValueError`.
- `StatusError`, which carries a `StatusCode`, for rejected queries. Examples
  are `INVALID_ARGUMENT` for a `None` request and `NOT_FOUND` for an unknown
  merchant index.

## Genesis

`AppModule.default_genesis()` returns the default state as JSON bytes.

- `validate_genesis(raw)` checks a JSON state. It raises `ValueError` for
  duplicated indexes or ids, or for an id that is not below its count.
- `init_genesis(raw)` loads a JSON state into the keeper.
- `export_genesis()` dumps the keeper's state as JSON.

In that JSON, counts and other 64-bit integers are written as strings.

`generate_genesis_state()` builds a small sample state with random creators.
`auto_cli_options()` returns a description of the query and transaction
commands as a dictionary.

## What this package does not do

It is a library only. It has:

- no command-line program,
- no network or RPC server,
- no transaction signing or fee handling,
- no randomized operation simulation.

State is kept only in the mapping handed to the `Keeper`. Nothing is written
to disk unless that mapping does it. `begin_block` and `end_block` only track
a block height and change no state.