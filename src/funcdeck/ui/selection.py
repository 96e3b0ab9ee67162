"""Run a selected catalog function: collect parameters, then invoke."""

from __future__ import annotations

from funcdeck.invocation.outcome import Cancelled, InvocationOutcome
from funcdeck.registry.catalog import FunctionCatalog
from funcdeck.ui.collector import ParameterCollector


def run_selection(
    catalog: FunctionCatalog,
    index: int,
    collector: ParameterCollector,
) -> InvocationOutcome | Cancelled:
    """Invoke the function at ``index``, asking ``collector`` for arguments.

    Zero-parameter functions are invoked directly. A cancelled collection
    returns Cancelled without calling the engine.

    Raises:
        DescriptorIndexError: If index is out of range.
    """
    descriptor = catalog.descriptor_at(index)
    if not descriptor.parameters:
        return catalog.invoke(index)

    raw_args = collector.collect(descriptor)
    if raw_args is None:
        return Cancelled(function_name=descriptor.name)
    return catalog.invoke(index, raw_args)
