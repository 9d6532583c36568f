"""DTOs and schemas for sensor data"""
import struct

from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_float32(value: float) -> float:
    """Round a value to single precision, rejecting values outside its range"""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise ValueError(f"{value} is out of range for a 32-bit float")


class Reading(BaseModel):
    """Schema for a submitted sensor reading"""
    model_config = ConfigDict(strict=True)

    data: float = Field(allow_inf_nan=False)

    @field_validator("data")
    @classmethod
    def single_precision(cls, value: float) -> float:
        return to_float32(value)


class WindowEntry(BaseModel):
    """One slot of the sliding window; time == 0 marks a placeholder"""
    model_config = ConfigDict(frozen=True)

    data: float
    time: int = Field(ge=0)

    @field_validator("data")
    @classmethod
    def single_precision(cls, value: float) -> float:
        return to_float32(value)


class HealthResponse(BaseModel):
    """Schema for health check"""
    status: str
    timestamp: str
    value_count: int
    debug: bool
