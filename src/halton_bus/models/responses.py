from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class DelayResult(BaseModel):
    summary: str = Field(description="First line of the announcement")
    text: str = Field(description="Full announcement text")


class GetBusDelaysResponse(BaseModel):
    delays: list[DelayResult]
    count: int = Field(description="Number of delays reported")
    last_updated: str | None = Field(
        default=None, description="Feed lastBuildDate as ISO 8601 (if known)"
    )
    api_available: bool = Field(description="False if the feed could not be retrieved")


class GetTransportationStatusResponse(BaseModel):
    notice: str | None = Field(
        default=None, description="Current general transportation notice (HTML fragment)"
    )
    api_available: bool = Field(description="False if the status page could not be retrieved")


class GetSchoolNamesResponse(BaseModel):
    schools: list[str]
    count: int = Field(description="Number of schools returned")
    total_count: int = Field(description="Total schools before filtering")
    api_available: bool = Field(description="False if the school list could not be loaded")
