"""Configuration models for the weighted randomizer."""

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt


class TelemetryConfig(BaseModel):
    """Controls whether randomizer events reach telemetry sinks."""

    enabled: bool = False
    sample_rate: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fraction of events forwarded to sinks.",
    )


class RandomizerConfig(BaseModel):
    """Top-level configuration object for a randomizer."""

    default_count: NonNegativeInt = Field(
        default=1,
        description="Number of draws made when next() is called without a count.",
    )
    validate_weights: bool = Field(
        default=True,
        description="Reject negative or non-finite weights when the population is set.",
    )
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)


__all__ = ["RandomizerConfig", "TelemetryConfig"]
