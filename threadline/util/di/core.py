"""Configuration providers."""

from dishka import Scope, provide

from threadline.config import CommentSettings, DatabaseSettings, Settings
from threadline.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections, read once per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from the environment and .env file."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide page size bounds and the cascade deadline."""
        return settings.comments
