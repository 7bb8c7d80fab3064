"""
Dependency Injection Configuration

Central container that wires up all dependencies for the draft engine.
"""

from typing import Any, Dict, Optional

from ..application.draft_service import DraftApplicationService
from ..application.interfaces import (
    IChampionCatalog,
    IDraftConfiguration,
    IDraftRepository,
    ISnapshotCodec,
)
from .draft_config_adapter import DraftConfigurationAdapter
from .snapshot_codec import DraftSnapshotCodec
from .storage_adapter import JsonDraftRepository, MemoryDraftRepository


class DraftContainer:
    """
    Dependency injection container for the draft engine.

    Centralizes dependency wiring and caches the application service.
    """

    def __init__(
        self,
        persistent: bool = False,
        configuration: Optional[IDraftConfiguration] = None,
        champion_catalog: Optional[IChampionCatalog] = None
    ):
        """
        Args:
            persistent: Store drafts as JSON files instead of in memory
            configuration: Settings source (environment by default)
            champion_catalog: Optional catalogue for id checks and role inference
        """
        self.persistent = persistent
        self._services: Dict[str, Any] = {}
        self._setup_dependencies(configuration, champion_catalog)

    def _setup_dependencies(
        self,
        configuration: Optional[IDraftConfiguration],
        champion_catalog: Optional[IChampionCatalog]
    ) -> None:
        configuration = configuration or DraftConfigurationAdapter()
        codec = DraftSnapshotCodec()
        self._services['draft_configuration'] = configuration
        self._services['snapshot_codec'] = codec
        self._services['champion_catalog'] = champion_catalog

        if self.persistent:
            self._services['draft_repository'] = JsonDraftRepository(
                base_dir=configuration.get_data_dir(),
                codec=codec,
                max_history=configuration.get_max_history(),
            )
        else:
            self._services['draft_repository'] = MemoryDraftRepository()

    def get_draft_service(self) -> DraftApplicationService:
        """Get configured draft application service"""
        if 'draft_service' not in self._services:
            self._services['draft_service'] = DraftApplicationService(
                draft_repository=self.get_draft_repository(),
                configuration=self.get_draft_configuration(),
                snapshot_codec=self.get_snapshot_codec(),
                champion_catalog=self.get_champion_catalog(),
            )
        return self._services['draft_service']

    def get_draft_repository(self) -> IDraftRepository:
        return self._services['draft_repository']

    def get_draft_configuration(self) -> IDraftConfiguration:
        return self._services['draft_configuration']

    def get_snapshot_codec(self) -> ISnapshotCodec:
        return self._services['snapshot_codec']

    def get_champion_catalog(self) -> Optional[IChampionCatalog]:
        return self._services['champion_catalog']

    def set_champion_catalog(self, catalog: Optional[IChampionCatalog]) -> None:
        """Replace the catalogue, rebuilding the service on next access"""
        self._services['champion_catalog'] = catalog
        self._services.pop('draft_service', None)

    def cleanup(self) -> None:
        """Cleanup resources"""
        repo = self._services.get('draft_repository')
        if hasattr(repo, 'clear_all_drafts'):
            repo.clear_all_drafts()
        self._services.clear()


# Global container instance
_container: Optional[DraftContainer] = None


def get_container() -> DraftContainer:
    """Get global container instance"""
    global _container
    if _container is None:
        _container = DraftContainer()
    return _container


def initialize_container(
    persistent: bool = False,
    configuration: Optional[IDraftConfiguration] = None,
    champion_catalog: Optional[IChampionCatalog] = None
) -> DraftContainer:
    """Initialize global container"""
    global _container
    _container = DraftContainer(persistent, configuration, champion_catalog)
    return _container


def cleanup_container() -> None:
    """Cleanup global container"""
    global _container
    if _container:
        _container.cleanup()
        _container = None
