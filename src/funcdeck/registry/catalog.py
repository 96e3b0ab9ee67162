"""Ordered catalog of invokable functions discovered on registered targets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import threading
from typing import Any

from funcdeck.core.config import FuncdeckConfig, load_config_from_env
from funcdeck.errors import DescriptorIndexError
from funcdeck.invocation.engine import InvocationEngine
from funcdeck.invocation.formatter import ResultFormatter
from funcdeck.invocation.outcome import InvocationOutcome
from funcdeck.registry.discovery import discover
from funcdeck.registry.loader import load_targets
from funcdeck.registry.logger import CatalogLogger
from funcdeck.registry.protocol import (
    DiscoveryWarning,
    FunctionDescriptor,
    target_name_of,
)


class FunctionCatalog:
    """
    Catalog of invokable functions across registered targets.

    Provides:
    - Ordered target registration
    - Discovery of ``@invokable`` functions into an indexed descriptor list
    - Reset back to the empty, pre-init state
    - Invocation by index through an InvocationEngine

    Descriptors are ordered by target registration order, then by declaration
    order within each target. Positions are stable for one catalog lifetime.

    Example:
        catalog = FunctionCatalog()
        catalog.register(DevicePolicyTarget(DeviceContext()))
        catalog.init_function()

        for index, descriptor in enumerate(catalog.descriptors()):
            print(index, descriptor.signature)

        outcome = catalog.invoke(0, ["true"])

        catalog.reset()
    """

    def __init__(
        self,
        targets: Iterable[Any] = (),
        *,
        engine: InvocationEngine | None = None,
        catalog_logger: CatalogLogger | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._engine = engine or InvocationEngine()
        self._logger = catalog_logger or CatalogLogger()
        self._targets: list[Any] = []
        self._descriptors: tuple[FunctionDescriptor, ...] = ()
        self._warnings: tuple[DiscoveryWarning, ...] = ()
        self._initialized = False
        for target in targets:
            self.register(target)

    @property
    def engine(self) -> InvocationEngine:
        return self._engine

    @property
    def initialized(self) -> bool:
        return self._initialized

    def register(self, target: Any) -> None:
        """
        Register a target; its functions follow previously registered ones.

        Registering after init marks the catalog stale, so the next
        init_function() rebuilds from scratch.

        Args:
            target: Object or module exposing ``@invokable`` functions
        """
        with self._lock:
            self._targets.append(target)
            self._initialized = False
            self._logger.target_registered(
                target_name_of(target), len(self._targets) - 1
            )

    def targets(self) -> tuple[Any, ...]:
        """Registered targets in registration order."""
        with self._lock:
            return tuple(self._targets)

    def init_function(self) -> None:
        """
        Discover functions on every registered target.

        No-op if already initialized. Discovery problems are recorded as
        warnings and exclude only the affected function.
        """
        with self._lock:
            if self._initialized:
                return
            self._logger.discovery_started(len(self._targets))

            descriptors: list[FunctionDescriptor] = []
            warnings: list[DiscoveryWarning] = []
            for target in self._targets:
                result = discover(target)
                descriptors.extend(result.descriptors)
                for warning in result.warnings:
                    self._logger.function_excluded(warning)
                warnings.extend(result.warnings)

            self._descriptors = tuple(descriptors)
            self._warnings = tuple(warnings)
            self._initialized = True
            self._logger.discovery_completed(len(descriptors), len(warnings))

    def descriptors(self) -> tuple[FunctionDescriptor, ...]:
        """Current ordered descriptors (empty before init and after reset)."""
        with self._lock:
            return self._descriptors

    def warnings(self) -> tuple[DiscoveryWarning, ...]:
        """Functions excluded during the last discovery."""
        with self._lock:
            return self._warnings

    def get(self, name: str) -> FunctionDescriptor | None:
        """
        Retrieve the first descriptor with the given name.

        Args:
            name: Function display name

        Returns:
            Descriptor if found, None otherwise
        """
        with self._lock:
            for descriptor in self._descriptors:
                if descriptor.name == name:
                    return descriptor
        return None

    def descriptor_at(self, index: int) -> FunctionDescriptor:
        """
        Return the descriptor at ``index``.

        Raises:
            DescriptorIndexError: If index is negative or past the end
        """
        with self._lock:
            if not 0 <= index < len(self._descriptors):
                raise DescriptorIndexError(index, len(self._descriptors))
            return self._descriptors[index]

    def invoke(
        self, index: int, raw_args: Sequence[str | None] = ()
    ) -> InvocationOutcome:
        """
        Invoke the function at ``index`` with raw text arguments.

        Args:
            index: Position in descriptors()
            raw_args: One raw value per parameter

        Returns:
            Success or Failure from the engine

        Raises:
            DescriptorIndexError: If index is out of range
        """
        descriptor = self.descriptor_at(index)
        return self._engine.invoke(descriptor, raw_args)

    def reset(self) -> None:
        """Release targets and clear descriptors. Safe to call repeatedly."""
        with self._lock:
            self._logger.catalog_reset(len(self._targets), len(self._descriptors))
            self._targets.clear()
            self._descriptors = ()
            self._warnings = ()
            self._initialized = False
            self._engine.release()

    def __len__(self) -> int:
        """Return number of discovered functions."""
        return len(self.descriptors())

    def __contains__(self, name: object) -> bool:
        """Check if a function with this name was discovered."""
        return any(d.name == name for d in self.descriptors())


# ---------------------------------------------------------------------------
# Process-wide catalog
# ---------------------------------------------------------------------------

_process_catalog: FunctionCatalog | None = None
_process_config: FuncdeckConfig | None = None
_process_lock = threading.Lock()


def build_catalog(config: FuncdeckConfig) -> FunctionCatalog:
    """Create and initialize a catalog from configuration."""
    engine = InvocationEngine(
        ResultFormatter(indent=config.result_indent or None),
        serialize_invocations=config.serialize_invocations,
    )
    catalog = FunctionCatalog(load_targets(config.targets), engine=engine)
    catalog.init_function()
    return catalog


def _was_reset(catalog: FunctionCatalog) -> bool:
    return not catalog.initialized and not catalog.targets()


def get_catalog(config: FuncdeckConfig | None = None) -> FunctionCatalog:
    """
    Return the process-wide catalog, building it on first access.

    If the cached catalog was reset in place, the next access rebuilds it
    from the configuration it was first built with.

    Args:
        config: Configuration for the first build; loaded from env if None.
            Ignored once the catalog exists.

    Raises:
        ConfigError: If env configuration is invalid
        TargetLoadError: If a configured target cannot be loaded
    """
    global _process_catalog, _process_config
    with _process_lock:
        if _process_catalog is None or _was_reset(_process_catalog):
            _process_config = config or _process_config or load_config_from_env()
            _process_catalog = build_catalog(_process_config)
        return _process_catalog


def reset_catalog() -> None:
    """Tear down the process-wide catalog; the next access rebuilds it."""
    global _process_catalog, _process_config
    with _process_lock:
        if _process_catalog is not None:
            _process_catalog.reset()
        _process_catalog = None
        _process_config = None
