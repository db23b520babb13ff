from pydantic import BaseModel, Field, field_validator

from semant.services.executors import OutputFormat


class DocumentIn(BaseModel):
    id: str = Field(..., min_length=1)
    text: str


class AnalysisRequest(BaseModel):
    provider: str = "bitext"
    key: str | None = None
    secret: str | None = None
    language: str | None = None
    format: OutputFormat = OutputFormat.XML
    debug: bool = False
    stopAfterFailures: int | None = Field(default=None, gt=0)
    documents: list[DocumentIn]

    @field_validator("documents")
    @classmethod
    def _unique_ids(cls, value: list[DocumentIn]) -> list[DocumentIn]:
        seen: set[str] = set()
        for document in value:
            if document.id in seen:
                raise ValueError(f"duplicate document id: {document.id}")
            seen.add(document.id)
        return value


class OutputItem(BaseModel):
    provider: str
    score: float
    label: str


class DocumentResult(BaseModel):
    id: str
    outputs: list[OutputItem]


class ProgressItem(BaseModel):
    status: str
    total: int
    processed: int
    failed: int
    reason: str | None = None


class AnalysisResponse(BaseModel):
    provider: str
    total: int
    processed: int
    failed: int
    canceled: bool
    results: list[DocumentResult]
    events: list[ProgressItem]
