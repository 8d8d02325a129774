"""Transform registry — every generation step is a function registered via decorator.

Usage:
    @transform(id="T1.01", stage=Stage.REGIONS, dependencies=["T0.02"])
    def unit_areas(ctx: GenerationContext) -> None:
        ...

Adding a new transform = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from floorgeo.engine.context import GenerationContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    RASTERIZATION = 0
    REGIONS = 1
    ROUTING = 2


@dataclass
class TransformSpec:
    id: str
    stage: Stage
    fn: Callable[["GenerationContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of generation transforms."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.stage.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.stage, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Dependency-first order. ``None`` means every registered transform.

        Requested ids pull in their transitive dependencies; unknown dependency
        ids are ignored. Ties are broken by id.
        """
        roots = sorted(self._transforms if requested_ids is None else requested_ids)
        ordered: list[TransformSpec] = []
        done: set[str] = set()
        in_progress: set[str] = set()

        def visit(tid: str) -> None:
            if tid in done or tid not in self._transforms:
                return
            if tid in in_progress:
                raise ValueError(f"Circular dependency detected at: {tid}")
            in_progress.add(tid)
            spec = self._transforms[tid]
            for dep in sorted(spec.dependencies):
                visit(dep)
            in_progress.discard(tid)
            done.add(tid)
            ordered.append(spec)

        for tid in roots:
            visit(tid)
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["GenerationContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                stage=stage,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
