"""Logging for the function catalog.

Keeps logging calls out of the catalog's business logic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import loguru
from loguru import logger

if TYPE_CHECKING:
    from funcdeck.registry.protocol import DiscoveryWarning


class CatalogLogger:
    """Handles all logging for FunctionCatalog."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        self._logger = logger_instance

    def target_registered(self, target_name: str, position: int) -> None:
        """Log a target registration."""
        self._logger.bind(target=target_name, position=position).debug(
            "Registered target {} at position {}", target_name, position
        )

    def discovery_started(self, target_count: int) -> None:
        """Log start of discovery."""
        self._logger.bind(targets=target_count).debug(
            "Discovering functions across {} target(s)", target_count
        )

    def function_excluded(self, warning: DiscoveryWarning) -> None:
        """Log a function excluded from the catalog."""
        self._logger.bind(
            target=warning.target_name, function=warning.function_name
        ).warning("Excluded {}: {}", warning.function_name, warning.reason)

    def discovery_completed(self, descriptor_count: int, warning_count: int) -> None:
        """Log discovery summary."""
        self._logger.bind(
            descriptors=descriptor_count, warnings=warning_count
        ).info(
            "Catalog ready: {} function(s), {} excluded",
            descriptor_count,
            warning_count,
        )

    def catalog_reset(self, target_count: int, descriptor_count: int) -> None:
        """Log catalog teardown."""
        self._logger.bind(
            targets=target_count, descriptors=descriptor_count
        ).debug(
            "Catalog reset: released {} target(s), {} function(s)",
            target_count,
            descriptor_count,
        )
