"""Scanner configuration using Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CAPACITY = 128


class ScannerConfig(BaseModel):
    """Validated construction options for a Scanner."""

    model_config = ConfigDict(frozen=True)

    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    # Reject horizons larger than the buffer instead of growing to fit them
    strict_horizon: bool = False
