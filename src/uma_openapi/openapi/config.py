"""Generator configuration: document version, servers, feature flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from uma_openapi.models.enums import Environment
from uma_openapi.models.openapi import OpenAPIServer

if TYPE_CHECKING:
    from uma_openapi.config import Settings

REMOTE_SERVER_URL = "http://your-unraid-server:34600"


@dataclass
class FeatureFlags:
    """Which API features the document advertises."""

    # Disabled for the internal network API
    authentication: bool = False
    bulk_operations: bool = True
    websockets: bool = True
    metrics: bool = True
    zfs: bool = True
    array_control: bool = True
    vm_management: bool = True

    def as_dict(self) -> dict[str, bool]:
        return {
            "authentication": self.authentication,
            "bulk_operations": self.bulk_operations,
            "websockets": self.websockets,
            "metrics": self.metrics,
            "zfs": self.zfs,
            "array_control": self.array_control,
            "vm_management": self.vm_management,
        }


@dataclass
class OpenAPIConfig:
    version: str = "2025.06.16"
    port: int = 34600
    base_url: str = ""
    environment: str = Environment.PROD
    strict_categories: bool = False
    features: FeatureFlags = field(default_factory=FeatureFlags)

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenAPIConfig:
        return cls(
            version=settings.api_version,
            port=settings.port,
            base_url=settings.base_url,
            environment=settings.environment,
            strict_categories=settings.strict_categories,
            features=FeatureFlags(
                authentication=settings.feature_authentication,
                bulk_operations=settings.feature_bulk_operations,
                websockets=settings.feature_websockets,
                metrics=settings.feature_metrics,
                zfs=settings.feature_zfs,
                array_control=settings.feature_array_control,
                vm_management=settings.feature_vm_management,
            ),
        )

    def get_servers(self) -> list[OpenAPIServer]:
        """Local server first, then the remote placeholder (prod only) and any custom URL."""
        servers = [
            OpenAPIServer(url=f"http://localhost:{self.port}", description="Local UMA API server"),
        ]
        if self.environment == Environment.PROD:
            servers.append(
                OpenAPIServer(
                    url=REMOTE_SERVER_URL,
                    description="Remote UMA API server (replace with your server IP)",
                )
            )
        if self.base_url:
            servers.append(OpenAPIServer(url=self.base_url, description="Custom UMA API server"))
        return servers

    def get_security_schemes(self) -> dict[str, Any]:
        if not self.features.authentication:
            return {}
        return {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "JWT token obtained from /api/v1/auth/login",
            },
            "ApiKeyAuth": {
                "type": "apiKey",
                "in": "header",
                "name": "X-API-Key",
                "description": "API key for authentication",
            },
        }
