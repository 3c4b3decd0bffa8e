"""Cluster connection configuration model"""

from pydantic import BaseModel, ConfigDict, Field


class ClusterConfig(BaseModel):
    """cluster endpoint and credentials model"""

    model_config = ConfigDict(frozen=True)

    server: str = Field(min_length=1)
    token: str = Field(min_length=1, repr=False)
    verify_ssl: bool = True
    page_size: int = Field(default=500, gt=0)
