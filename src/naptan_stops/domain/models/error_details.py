"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failed data fetch, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    def describe(self) -> str:
        """Render as "HTTP <status>: <reason>" or just the reason."""
        if self.status_code is None:
            return self.reason
        return f"HTTP {self.status_code}: {self.reason}"
