"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from livelist.config import AppPaths, AppSettings
from livelist.managers.pagination_manager import PaginationManager
from livelist.services.live_api_client import LiveApiClient
from livelist.viewmodels.live_view_model import LiveViewModel


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _api_client: Optional[LiveApiClient] = field(default=None, init=False, repr=False)
    _scheduler: Optional[object] = field(default=None, init=False, repr=False)
    _view_model: Optional[LiveViewModel] = field(default=None, init=False, repr=False)

    @property
    def api_client(self) -> LiveApiClient:
        if self._api_client is None:
            api = self.settings.api
            self._api_client = LiveApiClient(
                base_url=api.base_url,
                list_path=api.list_path,
                timeout_seconds=api.timeout_seconds,
            )
        return self._api_client

    @property
    def scheduler(self):
        if self._scheduler is None:
            from livelist.services.fetch_scheduler import GLibFetchScheduler

            self._scheduler = GLibFetchScheduler()
        return self._scheduler

    @property
    def view_model(self) -> LiveViewModel:
        if self._view_model is None:
            self._view_model = LiveViewModel(
                data_source=self.api_client,
                scheduler=self.scheduler,
                pagination=PaginationManager(
                    prefetch_distance=self.settings.display.prefetch_distance
                ),
            )
        return self._view_model

    def shutdown(self) -> None:
        if self._scheduler is not None:
            if self._api_client is not None:
                self._scheduler.run_sync(self._api_client.aclose)
            self._scheduler.stop()

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(str(paths.config_path)),
            paths=paths,
        )
