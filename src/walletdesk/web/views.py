"""View state for the wallet set and wallet pages.

A list view holds ``is_loading``, ``error`` and ``items`` and refreshes them
with ``fetch()``. A create view tracks ``is_submitting`` and ``server_error``
and calls its ``on_success`` callback after a successful submit; pages pass
the list view's ``fetch`` there so the list refreshes after a create.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional

import httpx
from pydantic import BaseModel

from walletdesk.web.client import LocalApiClient
from walletdesk.web.contracts.envelope import ApiResponse
from walletdesk.web.contracts.wallets import Wallet, WalletSet

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred"

OnSuccess = Callable[[], Awaitable[Any]]


class ViewError(Exception):
    """A failed envelope, carrying the text to display."""


def unwrap(response: ApiResponse, fallback: str) -> Any:
    """Return the envelope's data, or raise ViewError with display text."""
    if not response.success:
        raise ViewError(response.error_message(fallback))
    return response.data


def describe_failure(exc: Exception) -> str:
    """Reduce a network or decoding failure to display text."""
    return str(exc) or GENERIC_ERROR


class ListView(ABC):
    """Loads a list from the API and keeps the last result."""

    item_model: type[BaseModel] = BaseModel
    fallback_error = "Failed to fetch"
    empty_message = "Nothing found."

    def __init__(self, api: LocalApiClient):
        self.api = api
        self.is_loading = True
        self.error: Optional[str] = None
        self.items: list = []
        self._generation = 0

    @property
    def is_empty(self) -> bool:
        return not self.is_loading and self.error is None and not self.items

    @abstractmethod
    async def _load(self) -> ApiResponse:
        """Request the list envelope from the API."""
        raise NotImplementedError()

    async def fetch(self) -> None:
        """Reload the list; results of a superseded fetch are dropped."""
        self._generation += 1
        generation = self._generation
        self.is_loading = True
        self.error = None

        error: Optional[str] = None
        items: list = []
        try:
            data = unwrap(await self._load(), self.fallback_error)
            items = [self.item_model.model_validate(item) for item in data or []]
        except ViewError as e:
            error = str(e)
        except (httpx.HTTPError, ValueError) as e:
            error = describe_failure(e)

        if generation != self._generation:
            logger.debug("Dropping stale %s result", type(self).__name__)
            return

        if error is not None:
            logger.warning("%s: %s", type(self).__name__, error)
        self.error = error
        self.items = items
        self.is_loading = False


class WalletSetsListView(ListView):
    item_model = WalletSet
    fallback_error = "Failed to fetch wallet sets"
    empty_message = "No wallet sets found."

    async def _load(self) -> ApiResponse:
        return await self.api.list_wallet_sets()


class WalletsView(ListView):
    """Wallets of one wallet set; changing the set id refetches."""

    item_model = Wallet
    fallback_error = "Failed to fetch wallets"
    empty_message = "No wallets found in this set."

    def __init__(self, api: LocalApiClient, wallet_set_id: str):
        super().__init__(api)
        self.wallet_set_id = wallet_set_id

    async def set_wallet_set(self, wallet_set_id: str) -> None:
        if wallet_set_id != self.wallet_set_id:
            self.wallet_set_id = wallet_set_id
            await self.fetch()

    async def fetch(self) -> None:
        if not self.wallet_set_id:
            # Supersede any fetch still running for the previous set
            self._generation += 1
            self.items = []
            self.error = None
            self.is_loading = False
            return
        await super().fetch()

    async def _load(self) -> ApiResponse:
        return await self.api.list_wallets(self.wallet_set_id)


class CreateView(ABC):
    """Submits a creation form and surfaces server errors back to it."""

    fallback_error = "Failed to create"

    def __init__(self, api: LocalApiClient, on_success: Optional[OnSuccess] = None):
        self.api = api
        self.on_success = on_success
        self.is_submitting = False
        self.server_error: Optional[str] = None
        self.created: Any = None

    @abstractmethod
    async def _create(self, form: dict) -> ApiResponse:
        """Post the form and return the envelope."""
        raise NotImplementedError()

    async def submit(self, form: dict) -> bool:
        """Submit the form; returns True when the platform accepted it."""
        self.is_submitting = True
        self.server_error = None
        try:
            self.created = unwrap(await self._create(form), self.fallback_error)
        except ViewError as e:
            self.server_error = str(e)
        except (httpx.HTTPError, ValueError) as e:
            self.server_error = describe_failure(e)
        finally:
            self.is_submitting = False

        if self.server_error is not None:
            logger.warning("%s: %s", type(self).__name__, self.server_error)
            return False

        if self.on_success is not None:
            await self.on_success()
        return True


class CreateWalletSetView(CreateView):
    fallback_error = "Failed to create wallet set"

    async def _create(self, form: dict) -> ApiResponse:
        return await self.api.create_wallet_set(form)


class CreateWalletView(CreateView):
    fallback_error = "Failed to create wallet"

    def __init__(
        self,
        api: LocalApiClient,
        wallet_set_id: str,
        on_success: Optional[OnSuccess] = None,
    ):
        super().__init__(api, on_success)
        self.wallet_set_id = wallet_set_id

    async def _create(self, form: dict) -> ApiResponse:
        return await self.api.create_wallet(self.wallet_set_id, form)


class WalletSetsPage:
    """Wallet set list plus the wallet set creation form."""

    def __init__(self, api: LocalApiClient):
        self.wallet_sets = WalletSetsListView(api)
        self.create_form = CreateWalletSetView(api, on_success=self.wallet_sets.fetch)

    async def mount(self) -> None:
        await self.wallet_sets.fetch()


class WalletSetPage:
    """Wallets of one wallet set plus the wallet creation form."""

    def __init__(self, api: LocalApiClient, wallet_set_id: str):
        self.wallet_set_id = wallet_set_id
        self.wallets = WalletsView(api, wallet_set_id)
        self.create_form = CreateWalletView(
            api, wallet_set_id, on_success=self.wallets.fetch
        )

    async def mount(self) -> None:
        await self.wallets.fetch()
