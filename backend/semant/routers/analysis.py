"""Analysis routes: run a sentiment executor over a batch of documents."""

from fastapi import APIRouter, HTTPException

from semant.schemas import analysis as schemas
from semant.services.analysis_service import AnalysisRun, ProviderNotFoundError, analysis_service

router = APIRouter()


def to_response(run: AnalysisRun) -> schemas.AnalysisResponse:
    return schemas.AnalysisResponse(
        provider=run.summary.provider,
        total=run.summary.total,
        processed=run.summary.processed,
        failed=run.summary.failed,
        canceled=run.summary.canceled,
        results=[
            schemas.DocumentResult(
                id=document_id,
                outputs=[
                    schemas.OutputItem(provider=o.provider, score=o.score, label=o.label) for o in result.outputs
                ],
            )
            for document_id, result in run.results.items()
        ],
        events=[
            schemas.ProgressItem(
                status=event.status.value,
                total=event.total,
                processed=event.processed,
                failed=event.failed,
                reason=event.reason,
            )
            for event in run.events
        ],
    )


# Plain def: executors block on the network, FastAPI runs this in its thread pool.
@router.post("/v1/run", response_model=schemas.AnalysisResponse)
def run_analysis(payload: schemas.AnalysisRequest) -> schemas.AnalysisResponse:
    try:
        run = analysis_service.run(
            ((document.id, document.text) for document in payload.documents),
            provider=payload.provider,
            key=payload.key,
            secret=payload.secret,
            language=payload.language,
            output_format=payload.format,
            debug=payload.debug,
            stop_after_failures=payload.stopAfterFailures,
        )
    except ProviderNotFoundError:
        raise HTTPException(status_code=404, detail="PROVIDER_NOT_FOUND")
    return to_response(run)
