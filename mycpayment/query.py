"""Read-only queries over the payment module's state."""

from __future__ import annotations

from typing import Any

from mycpayment.errors import KeyNotFoundError, NotFoundError, StatusCode, StatusError
from mycpayment.keeper import Keeper
from mycpayment.store import Map
from mycpayment.types import (
    Merchant,
    PageRequest,
    PageResponse,
    Params,
    Payment,
    Settlement,
)

DEFAULT_LIMIT = 100


def _paginate_by_key(
    collection: Map, key: bytes, limit: int, reverse: bool
) -> tuple[list[Any], PageResponse]:
    if reverse:
        entries = [
            entry for entry in reversed(list(collection.items_from(None))) if entry[0] <= key
        ]
    else:
        entries = collection.items_from(key)
    results: list[Any] = []
    next_key = None
    for raw, value in entries:
        if len(results) == limit:
            next_key = raw
            break
        results.append(value)
    return results, PageResponse(next_key=next_key)


def _paginate_no_key(
    collection: Map, offset: int, limit: int, count_total: bool, reverse: bool
) -> tuple[list[Any], PageResponse]:
    entries = list(collection.items_from(None))
    if reverse:
        entries.reverse()
    results: list[Any] = []
    next_key = None
    count = 0
    for raw, value in entries:
        if count < offset:
            count += 1
            continue
        if count >= offset + limit:
            if next_key is None:
                next_key = raw
            if not count_total:
                break
            count += 1
            continue
        results.append(value)
        count += 1
    return results, PageResponse(next_key=next_key, total=count if count_total else 0)


def collection_paginate(
    collection: Map, page_request: PageRequest | None
) -> tuple[list[Any], PageResponse]:
    """Return one page of a collection's values and the page details.

    A page is chosen either by a start key or by an offset, not both. A
    zero limit means the default limit, with the total counted.
    """
    request = PageRequest() if page_request is None else page_request
    limit = request.limit
    count_total = request.count_total
    if request.offset > 0 and request.key:
        raise ValueError("invalid request, either offset or key is expected, got both")
    if limit == 0:
        limit = DEFAULT_LIMIT
        count_total = True
    if request.key:
        return _paginate_by_key(collection, bytes(request.key), limit, request.reverse)
    return _paginate_no_key(collection, request.offset, limit, count_total, request.reverse)


def _invalid_request() -> StatusError:
    return StatusError(StatusCode.INVALID_ARGUMENT, "invalid request")


class QueryServer:
    """Answers queries against a keeper.

    A request of None is rejected as invalid, as a missing request is.
    """

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    @staticmethod
    def _list(collection: Map, request: PageRequest | None) -> tuple[list[Any], PageResponse]:
        if request is None:
            raise _invalid_request()
        try:
            return collection_paginate(collection, request)
        except (ValueError, TypeError) as err:
            raise StatusError(StatusCode.INTERNAL, str(err)) from err

    @staticmethod
    def _get_by_id(collection: Map, request: int | None) -> Any:
        if request is None:
            raise _invalid_request()
        try:
            return collection.get(request)
        except NotFoundError:
            raise KeyNotFoundError() from None
        except (ValueError, TypeError):
            raise StatusError(StatusCode.INTERNAL, "internal error") from None

    def params(self, request: Any = ()) -> Params:
        """Return the module parameters, or the empty set if none are stored."""
        if request is None:
            raise _invalid_request()
        try:
            return self.keeper.params.get()
        except NotFoundError:
            return Params()
        except (ValueError, TypeError):
            raise StatusError(StatusCode.INTERNAL, "internal error") from None

    def list_merchant(
        self, request: PageRequest | None
    ) -> tuple[list[Merchant], PageResponse]:
        """Return a page of merchants."""
        return self._list(self.keeper.merchant, request)

    def get_merchant(self, request: str | None) -> Merchant:
        """Return the merchant stored under an index."""
        if request is None:
            raise _invalid_request()
        try:
            return self.keeper.merchant.get(request)
        except NotFoundError:
            raise StatusError(StatusCode.NOT_FOUND, "not found") from None
        except (ValueError, TypeError):
            raise StatusError(StatusCode.INTERNAL, "internal error") from None

    def list_payment(
        self, request: PageRequest | None
    ) -> tuple[list[Payment], PageResponse]:
        """Return a page of payments."""
        return self._list(self.keeper.payment, request)

    def get_payment(self, request: int | None) -> Payment:
        """Return the payment with an id."""
        return self._get_by_id(self.keeper.payment, request)

    def list_settlement(
        self, request: PageRequest | None
    ) -> tuple[list[Settlement], PageResponse]:
        """Return a page of settlements."""
        return self._list(self.keeper.settlement, request)

    def get_settlement(self, request: int | None) -> Settlement:
        """Return the settlement with an id."""
        return self._get_by_id(self.keeper.settlement, request)