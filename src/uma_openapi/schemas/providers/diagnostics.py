"""Diagnostics health, info and repair schemas."""

from uma_openapi.schemas.providers._shared import prop, string_list, timestamp


def get_diagnostics_schemas() -> dict:
    return {
        "DiagnosticsHealth": _health(),
        "DiagnosticsInfo": _info(),
        "DiagnosticsRepair": _repair(),
    }


def _health() -> dict:
    return {
        "type": "object",
        "properties": {
            "status": prop(
                "string", "Overall health status", "healthy",
                enum=["healthy", "warning", "critical", "unknown"],
            ),
            "checks": {
                "type": "array",
                "description": "List of individual health checks",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Name of the health check", "disk_health"),
                        "status": prop(
                            "string", "Status of this check", "passed",
                            enum=["passed", "warning", "critical", "unknown"],
                        ),
                        "message": prop(
                            "string", "Descriptive message about the check result",
                            "All disks are healthy",
                        ),
                        "critical": prop("boolean", "Whether this is a critical check", False),
                        "remediation": prop(
                            "string", "Suggested remediation steps", "No action required",
                        ),
                        "last_updated": timestamp(
                            "When this check was last performed", "2024-01-01T12:00:00Z",
                        ),
                    },
                    "required": ["name", "status", "message"],
                },
            },
            "last_check": timestamp(
                "When the health check was last performed", "2024-01-01T12:00:00Z",
            ),
            "message": prop("string", "Overall health message", "System is healthy"),
        },
        "required": ["status", "checks", "last_check"],
    }


def _info() -> dict:
    return {
        "type": "object",
        "properties": {
            "version": prop("string", "UMA version", "1.0.0"),
            "system": prop("string", "System identifier", "uma"),
            "diagnostics": prop("string", "Diagnostics system status", "enabled"),
            "capabilities": string_list(
                "Available diagnostic capabilities",
                ["health_checks", "system_repair", "log_analysis"],
            ),
            "last_run": timestamp("When diagnostics were last run", "2024-01-01T12:00:00Z"),
            "message": prop(
                "string", "Diagnostic system message", "Diagnostics system operational",
            ),
        },
        "required": ["version", "system", "diagnostics"],
    }


def _repair() -> dict:
    return {
        "type": "object",
        "properties": {
            "action": prop("string", "Repair action that was performed", "fix_permissions"),
            "status": prop(
                "string", "Status of the repair operation", "success",
                enum=["success", "failed", "partial", "in_progress"],
            ),
            "message": prop(
                "string", "Result message from the repair operation",
                "Permissions fixed successfully",
            ),
            "details": string_list(
                "Detailed repair steps performed",
                ["Fixed /var/log permissions", "Corrected disk mount points"],
            ),
            "timestamp": timestamp("When the repair was performed", "2024-01-01T12:00:00Z"),
            "duration": prop("number", "Duration of repair operation in seconds", 5.2),
        },
        "required": ["action", "status", "message", "timestamp"],
    }
