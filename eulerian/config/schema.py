"""Configuration schema using Pydantic."""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class GraphConfig(BaseModel):
    """Graph generation configuration."""
    type: Literal["random", "ring", "complete", "k-regular"] = Field(
        default="random", description="Generator type"
    )
    vertices: int = Field(gt=0, description="Number of vertices")
    edges: int = Field(default=0, ge=0, description="Target number of edges")
    seed: int = Field(gt=0, description="Random seed for edge generation")
    k: Optional[int] = Field(default=None, ge=0, description="Degree for k-regular graphs")


class OutputConfig(BaseModel):
    """Output configuration."""
    verbose: bool = Field(default=False, description="Print graph statistics")
    verify: bool = Field(default=False, description="Verify the circuit after construction")


class Config(BaseModel):
    """Main configuration object."""
    model_config = ConfigDict(extra="forbid")

    graph: GraphConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
