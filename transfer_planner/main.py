from __future__ import annotations

import json
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .codes import extract_course_codes, normalize_code, parse_requirements_list
from .config import configure_logging, get_settings
from .equivalency import apply_equivalency, parse_equivalency
from .models import (
    CodesRequest,
    CodesResponse,
    EquivalencyRequest,
    EquivalencyResponse,
    Plan,
    PrereqValidateRequest,
    PrereqValidateResponse,
    SchedulingConfig,
    TermsRequest,
    TermsResponse,
    TextRequest,
)
from .planner import PlanInputs, build_plan
from .prereqs import PrereqParseError, parse_prereq_graph
from .samples import sample_bundle
from .terms import term_sequence

settings = get_settings()
configure_logging(settings)
log = logging.getLogger(__name__)

app = FastAPI(title="Transfer-to-Grad Planner Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


def _plan_or_422(body: PlanInputs) -> Plan:
    try:
        return build_plan(body)
    except PrereqParseError as exc:
        log.warning("Rejected plan request: %s", exc)
        raise HTTPException(status_code=422, detail=f"Prerequisite graph: {exc}") from exc


# -----------------------------------------------------------------------------
# FastAPI endpoints
# -----------------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/codes/normalize", response_model=CodesResponse)
async def api_normalize_codes(body: CodesRequest):
    return CodesResponse(codes=[normalize_code(c) for c in body.codes])


@app.post("/codes/extract", response_model=CodesResponse)
async def api_extract_codes(body: TextRequest):
    return CodesResponse(codes=extract_course_codes(body.text))


@app.post("/requirements/parse", response_model=CodesResponse)
async def api_parse_requirements(body: TextRequest):
    return CodesResponse(codes=parse_requirements_list(body.text))


@app.post("/equivalency/apply", response_model=EquivalencyResponse)
async def api_apply_equivalency(body: EquivalencyRequest):
    mapping = parse_equivalency(body.text)
    completed = [normalize_code(c) for c in body.completed if c.strip()]
    return EquivalencyResponse(completed=apply_equivalency(completed, mapping), mappings=mapping)


@app.post("/prereqs/validate", response_model=PrereqValidateResponse)
async def api_validate_prereqs(body: PrereqValidateRequest):
    result = parse_prereq_graph(body.raw)
    if not result.ok:
        return PrereqValidateResponse(valid=False, error=str(result.error))
    return PrereqValidateResponse(valid=True, graph=result.graph)


@app.post("/terms", response_model=TermsResponse)
async def api_terms(body: TermsRequest):
    config = SchedulingConfig(start_term=body.start_term, term_count=body.term_count)
    return TermsResponse(labels=term_sequence(config.start_term, config.term_count))


@app.post("/plans/generate", response_model=Plan)
async def api_generate_plan(body: PlanInputs):
    return _plan_or_422(body)


@app.post("/plans/export")
async def api_export_plan(body: PlanInputs):
    plan = _plan_or_422(body)
    return Response(
        content=json.dumps(plan.model_dump(mode="json"), indent=2),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="transfer_plan.json"'},
    )


@app.get("/samples")
async def api_samples():
    return sample_bundle()
