"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import Settings
from nutrition_engine.services.catalog import CatalogService


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.catalog_debug)
    catalog_service = CatalogService(
        thresholds=resolved_settings.dietary_thresholds(),
        suggestion_limit=resolved_settings.suggestion_limit,
        default_sort=resolved_settings.default_sort,
        debug=resolved_settings.catalog_debug,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
    )
