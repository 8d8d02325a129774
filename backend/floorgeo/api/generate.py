"""POST /api/generate — unit areas, background contours and unit routes."""

from __future__ import annotations

import time

from fastapi import APIRouter

from floorgeo.engine.context import GenerationContext
from floorgeo.engine.pipeline import create_pipeline
from floorgeo.models.requests import GenerateRequest
from floorgeo.models.responses import GenerateResponse

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest) -> GenerateResponse:
    start = time.perf_counter()

    ctx = GenerationContext(
        entities=[e.to_entity() for e in req.entities],
        unit_labels=[label.to_label() for label in req.unit_labels],
        hidden_layers=set(req.hidden_layers),
    )
    create_pipeline().run(ctx)

    elapsed = (time.perf_counter() - start) * 1000
    return GenerateResponse.from_context(ctx, elapsed)
