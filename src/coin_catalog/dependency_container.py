"""
Dependency injection container for the catalog sync.

Wires together:
- HTTP client (aiohttp wrapper) and retry handler
- Catalog client
- Dataset store and sync state store
- Override table and token transformer
- Bootstrap loader and coin syncer
"""

from coin_catalog import __version__
from coin_catalog.config.state import ConfigState
from coin_catalog.infrastructure.state import FileStateStore, IStateStore
from coin_catalog.ingestion.adapters.catalog_plugin import CatalogClient, CatalogRetryHandler
from coin_catalog.ingestion.config.value_objects import (
    CatalogApiConfig,
    HttpClientConfig,
    RetryConfig,
)
from coin_catalog.ingestion.connectors.aiohttp_client import AiohttpClient
from coin_catalog.ingestion.ports import ICatalogProvider
from coin_catalog.orchestration.bootstrap import BootstrapLoader
from coin_catalog.orchestration.coin_syncer import CoinSyncer
from coin_catalog.orchestration.notifications import ChangeNotifier
from coin_catalog.orchestration.sync_state import SyncStateTracker
from coin_catalog.storage.ports import ICoinStorage
from coin_catalog.storage.repositories import JsonFileCoinStorage
from coin_catalog.storage.snapshots import SnapshotSource
from coin_catalog.transformation.overrides import OverrideTable
from coin_catalog.transformation.token_transformer import TokenTransformer


class CatalogDependencyContainer:
    """
    Single place where all concrete implementations are chosen.

    Any collaborator can be passed in to replace the default built from
    ``settings`` (tests pass in-memory stores and fake providers).

    Usage:
        container = CatalogDependencyContainer(settings)
        container.create_bootstrap_loader().run()
        outcome = await container.create_coin_syncer().sync_from_status()
    """

    def __init__(
        self,
        settings: ConfigState,
        storage: ICoinStorage | None = None,
        state_store: IStateStore | None = None,
        provider: ICatalogProvider | None = None,
        overrides: OverrideTable | None = None,
    ):
        self.settings = settings
        self._storage = storage
        self._state_store = state_store
        self._provider = provider
        self._overrides = overrides
        self._tracker: SyncStateTracker | None = None
        self.notifier = ChangeNotifier()
        self.transformer = TokenTransformer()

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------
    @property
    def storage(self) -> ICoinStorage:
        if self._storage is None:
            self._storage = JsonFileCoinStorage(self.settings.storage.dataset_path)
        return self._storage

    @property
    def state_store(self) -> IStateStore:
        if self._state_store is None:
            self._state_store = FileStateStore(self.settings.storage.state_path)
        return self._state_store

    @property
    def overrides(self) -> OverrideTable:
        if self._overrides is None:
            overrides_file = self.settings.sync.overrides_file
            self._overrides = (
                OverrideTable.from_yaml(overrides_file)
                if overrides_file
                else OverrideTable.default()
            )
        return self._overrides

    @property
    def tracker(self) -> SyncStateTracker:
        if self._tracker is None:
            self._tracker = SyncStateTracker(self.state_store)
        return self._tracker

    def create_catalog_api_config(self) -> CatalogApiConfig:
        catalog = self.settings.catalog
        return CatalogApiConfig(
            base_url=catalog.base_url,
            app_version=catalog.app_version or __version__,
            app_platform=catalog.app_platform,
            app_id=catalog.app_id,
            api_key=catalog.api_key,
            http_config=HttpClientConfig(timeout=catalog.timeout),
            retry_config=RetryConfig(
                max_attempts=catalog.max_attempts,
                base_delay=catalog.retry_base_delay,
            ),
        )

    @property
    def provider(self) -> ICatalogProvider:
        if self._provider is None:
            config = self.create_catalog_api_config()
            self._provider = CatalogClient(
                config=config,
                http_client=AiohttpClient(config.http_config),
                retry_handler=CatalogRetryHandler(config.retry_config),
            )
        return self._provider

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------
    def create_bootstrap_loader(self) -> BootstrapLoader:
        return BootstrapLoader(
            storage=self.storage,
            tracker=self.tracker,
            snapshots=SnapshotSource(self.settings.storage.snapshot_dir),
            overrides=self.overrides,
            transformer=self.transformer,
            version=self.settings.sync.bootstrap_version,
        )

    def create_coin_syncer(self) -> CoinSyncer:
        return CoinSyncer(
            storage=self.storage,
            provider=self.provider,
            tracker=self.tracker,
            overrides=self.overrides,
            transformer=self.transformer,
            notifier=self.notifier,
        )

    async def close(self) -> None:
        """Release the HTTP session if the default catalog client was created."""
        if isinstance(self._provider, CatalogClient):
            await self._provider.close()
