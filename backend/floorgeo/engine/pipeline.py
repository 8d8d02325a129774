"""Pipeline orchestrator — runs generation transforms in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from floorgeo.engine import layer_names
from floorgeo.engine.config import GenerationConfig
from floorgeo.engine.context import GenerationContext
from floorgeo.engine.registry import TransformRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ("stage0", "stage1", "stage2")


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for stage_name in _STAGE_PACKAGES:
        package = importlib.import_module(f"floorgeo.engine.{stage_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Orchestrates the generation pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: GenerationConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or GenerationConfig()

    def run(self, ctx: GenerationContext) -> GenerationContext:
        """Run every applicable transform on the given context."""
        start = time.perf_counter()
        ctx.config = self.config

        skip_ids = self._adaptive_gate(ctx)
        requested = {s.id for s in self.registry.all()} - skip_ids
        ordered = self.registry.resolve_order(requested)

        logger.info(
            "Pipeline: %d transforms queued (%d skipped)",
            len(ordered),
            len(skip_ids),
        )

        for spec in ordered:
            self._run_one(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def _run_one(self, ctx: GenerationContext, spec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)

    def _adaptive_gate(self, ctx: GenerationContext) -> set[str]:
        """Skip transforms whose inputs are absent from the drawing.

        - No unit labels: no unit areas and nothing to route
        - No walkway geometry: no graph and no routes
        """
        skip: set[str] = set()

        if not ctx.unit_number_labels():
            skip.update({"T1.01", "T2.02"})

        if not ctx.entities_on(layer_names.WALKWAYS):
            skip.update({"T2.01", "T2.02"})

        return skip


def create_pipeline(config: GenerationConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    register_transforms()
    return Pipeline(config=config)
