# ============================================================================
# HEALTH RESPONSE MODELS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Response schemas
# PURPOSE: Pydantic V2 models for the status document and error bodies
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Response Models

Pydantic V2 models for the /health response.
Field names on the wire are camelCase (aliases); Python attributes are
snake_case. Always dump with by_alias=True.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


STATUS_OK = "ok"
STATUS_FAIL_PREFIX = "fail:"


class ServiceInfo(BaseModel):
    """Static service identity."""

    name: str = Field(default="", description="Service name")
    description: str = Field(default="", description="Service description")
    version: str = Field(default="", description="Service version")


class EnvironmentInfo(BaseModel):
    """Runtime environment snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    node_env: Optional[str] = Field(
        default=None,
        alias="nodeEnv",
        description="Deployment environment (e.g. production, staging)",
    )
    node_version: Optional[str] = Field(
        default=None,
        alias="nodeVersion",
        description="Runtime version of the serving interpreter",
    )
    process_name: Optional[str] = Field(default=None, alias="processName")
    pid: Optional[int] = Field(default=None)
    cwd: Optional[str] = Field(default=None)


class GitInfo(BaseModel):
    """Build provenance from version control."""

    model_config = ConfigDict(populate_by_name=True)

    commit_hash: Optional[str] = Field(default=None, alias="commitHash")
    branch_name: Optional[str] = Field(default=None, alias="branchName")
    tag: Optional[str] = Field(default=None)


class StatusDocument(BaseModel):
    """Aggregated health report, built fresh for every request."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "fail:postgres",
                "uptime": 3600.5,
                "upSince": "2026-10-19T08:00:00Z",
                "service": {"name": "orders", "description": "Order API", "version": "1.4.0"},
                "connections": {"redis": True, "postgres": False},
                "env": {
                    "nodeEnv": "production",
                    "nodeVersion": "3.12.4",
                    "processName": "uvicorn",
                    "pid": 4242,
                    "cwd": "/app",
                },
                "git": {"commitHash": "3f2c9e1", "branchName": "main", "tag": "v1.4.0"},
            }
        },
    )

    status: str = Field(..., description="'ok' or 'fail:<name>,<name>'")
    uptime: float = Field(..., description="Seconds since service start")
    up_since: datetime = Field(..., alias="upSince")
    service: ServiceInfo = Field(default_factory=ServiceInfo)
    connections: Dict[str, bool] = Field(default_factory=dict)
    env: EnvironmentInfo = Field(default_factory=EnvironmentInfo)
    git: GitInfo = Field(default_factory=GitInfo)

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-ready dictionary with wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorResponse(BaseModel):
    """Error body for FATAL evaluations and invalid filters."""

    message: str = Field(..., description="Human readable error message")


__all__ = [
    "STATUS_OK",
    "STATUS_FAIL_PREFIX",
    "ServiceInfo",
    "EnvironmentInfo",
    "GitInfo",
    "StatusDocument",
    "ErrorResponse",
]
