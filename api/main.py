# api/main.py
"""
FastAPI backend for electruss - exposes the truss engine as a REST API.
"""

import io
import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, ConfigDict, Field

from electruss import Member, Node, TrussError, TrussResult, compute
from electruss.config import CONFIG
from electruss.io import model_to_document, result_to_dict
from electruss.post import member_table, summarize

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{CONFIG.app_name} API",
    description=CONFIG.app_subtitle,
    version=CONFIG.version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

Identifier = Union[int, str]


class FixedData(BaseModel):
    """Restraint state of a node."""
    x: bool
    y: bool


class LoadData(BaseModel):
    """Joint load; missing components are zero."""
    fx: Optional[float] = None
    fy: Optional[float] = None


class NodeData(BaseModel):
    """Node as sent by the editor."""
    id: Identifier
    x: float
    y: float
    fixed: FixedData
    load: Optional[LoadData] = None


class EdgeData(BaseModel):
    """Member as sent by the editor."""
    model_config = ConfigDict(populate_by_name=True)

    id: Identifier
    start: Identifier = Field(alias="from")
    end: Identifier = Field(alias="to")
    area: float = Field(description="Cross-sectional area")
    elastic_modulus: float = Field(description="Young's modulus")


class TrussRequest(BaseModel):
    """Nodes and edges to analyse."""
    nodes: List[NodeData]
    edges: List[EdgeData]


class DisplacementData(BaseModel):
    id: Identifier
    dx: float
    dy: float


class ReactionData(BaseModel):
    id: Identifier
    rx: float
    ry: float


class MemberForceData(BaseModel):
    id: Identifier
    axial_force: float


class SummaryData(BaseModel):
    max_tension: float
    max_compression: float
    max_displacement: float
    max_displacement_node: Optional[Identifier] = None


class AnalysisResult(BaseModel):
    """Complete analysis result."""
    success: bool
    error: Optional[str] = None
    error_kind: Optional[str] = None
    displacements: Optional[List[DisplacementData]] = None
    reactions: Optional[List[ReactionData]] = None
    member_forces: Optional[List[MemberForceData]] = None
    max_displacement: Optional[float] = None
    summary: Optional[SummaryData] = None


# =============================================================================
# Analysis
# =============================================================================

def to_engine(request: TrussRequest) -> Tuple[List[Node], List[Member]]:
    nodes = []
    for node in request.nodes:
        load = (0.0, 0.0)
        if node.load is not None:
            load = (node.load.fx or 0.0, node.load.fy or 0.0)
        nodes.append(Node(node.id, node.x, node.y, fixed=(node.fixed.x, node.fixed.y), load=load))
    members = [
        Member(edge.id, edge.start, edge.end, area=edge.area, elastic_modulus=edge.elastic_modulus)
        for edge in request.edges
    ]
    return nodes, members


def run_analysis(request: TrussRequest) -> Tuple[List[Node], List[Member], TrussResult]:
    nodes, members = to_engine(request)
    return nodes, members, compute(nodes, members)


def analyze_request(request: TrussRequest) -> AnalysisResult:
    """Analyse a truss. Engine failures are reported in the result, not raised."""
    try:
        _, _, result = run_analysis(request)
    except TrussError as e:
        logger.info("Analysis failed (%s): %s", e.kind, e)
        return AnalysisResult(success=False, error=str(e), error_kind=e.kind)

    data = result_to_dict(result)
    return AnalysisResult(
        success=True,
        displacements=data['displacements'],
        reactions=data['reactions'],
        member_forces=data['member_forces'],
        max_displacement=data['max_displacement'],
        summary=summarize(result),
    )


def _solve_or_400(request: TrussRequest) -> Tuple[List[Node], List[Member], TrussResult]:
    try:
        return run_analysis(request)
    except TrussError as e:
        logger.info("Export refused (%s): %s", e.kind, e)
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": f"{CONFIG.app_name} API", "version": CONFIG.version}


@app.post("/api/analyze", response_model=AnalysisResult)
async def analyze(request: TrussRequest):
    """Analyse a truss and return displacements, reactions and member forces."""
    return analyze_request(request)


@app.post("/api/export/csv")
async def export_csv(request: TrussRequest):
    """Export the member force table as CSV."""
    nodes, members, result = _solve_or_400(request)

    output = io.StringIO()
    member_table(nodes, members, result).to_csv(output, index=False)
    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=truss_members.csv"}
    )


@app.post("/api/export/json")
async def export_json(request: TrussRequest):
    """Export the truss document together with its results."""
    nodes, members, result = _solve_or_400(request)

    payload: Dict[str, Any] = model_to_document(nodes, members)
    payload["results"] = result_to_dict(result)
    payload["summary"] = summarize(result)

    return StreamingResponse(
        iter([json.dumps(payload, indent=2)]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=truss_model.json"}
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
