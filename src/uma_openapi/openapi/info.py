"""The `info` block of the generated document."""

from uma_openapi.models.openapi import OpenAPIContact, OpenAPIInfo
from uma_openapi.openapi.config import OpenAPIConfig

FALLBACK_VERSION = "2025.06.17"

DESCRIPTION = """\
Unraid Management Agent API providing comprehensive server management.

## Features

### System Monitoring
- **Hardware Monitoring**: CPU usage, RAM utilization, temperatures, fan speeds
- **Real-time Metrics**: Live system statistics with WebSocket updates
- **GPU Monitoring**: Graphics card status and utilization
- **Network Monitoring**: Interface statistics and connectivity status

### Storage Management
- **Array Management**: Unraid array start/stop with proper orchestration
- **Disk Monitoring**: Individual disk health, SMART data, temperatures
- **Cache Management**: Cache disk status and performance metrics
- **ZFS Support**: ZFS pool monitoring and management
- **Parity Operations**: Parity check status and scheduling

### Container & VM Control
- **Docker Management**: Individual and bulk container operations (start/stop/restart/pause)
- **VM Lifecycle**: Virtual machine control and monitoring
- **Resource Monitoring**: Container and VM resource usage

### UPS & Power Management
- **UPS Integration**: Hardware integration with the apcupsd daemon
- **Power Control**: System shutdown and reboot capabilities
- **Battery Monitoring**: UPS battery status, runtime, and load information

### Real-time Updates
- **WebSocket Support**: Live updates for system stats, Docker events, and storage status
- **Event Streaming**: Notifications for system changes

## Authentication

Supports JWT-based authentication and API key authentication when enabled.
"""


def build_info(config: OpenAPIConfig) -> OpenAPIInfo:
    version = config.version
    if not version or version == "unknown":
        version = FALLBACK_VERSION

    return OpenAPIInfo(
        title="UMA REST API",
        description=DESCRIPTION,
        version=version,
        contact=OpenAPIContact(
            name="UMA Development Team",
            url="https://github.com/domalab/uma",
            email="ruaan.deysel@gmail.com",
        ),
    )
