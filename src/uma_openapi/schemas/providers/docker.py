"""Docker container, image and network schemas."""

from uma_openapi.schemas.providers._shared import prop, ref, string_list, timestamp

CONTAINER_STATUSES = ["created", "running", "paused", "restarting", "removing", "exited", "dead"]
CONTAINER_OPERATIONS = ["start", "stop", "restart", "pause", "resume"]
CONTAINER_NAME_PATTERN = "^[a-zA-Z0-9][a-zA-Z0-9_.-]+$"


def get_docker_schemas() -> dict:
    return {
        "ContainerInfo": _container_info(),
        "ContainerState": _container_state(),
        "ContainerOperationResult": _operation_result(),
        "ContainerOperationResponse": _operation_response(),
        "BulkOperationRequest": _bulk_request(),
        "BulkOperationResponse": _bulk_response(),
        "BulkOperationSummary": _bulk_summary(),
        "DockerImage": _image(),
        "DockerNetwork": _network(),
        "DockerInfo": _docker_info(),
        "ContainerPort": _port(),
        "DockerContainerList": _list_of(
            "ContainerInfo", "List of Docker containers",
            {"id": "1234567890ab", "name": "jackett", "status": "running"},
        ),
        "DockerContainerInfo": _container_detail(),
        "DockerImageList": _list_of(
            "DockerImage", "List of Docker images",
            {"id": "sha256:abc123", "tags": ["organization/application:latest"], "size": 142000000},
        ),
        "DockerNetworkList": _list_of(
            "DockerNetwork", "List of Docker networks",
            {"id": "network123", "name": "bridge", "driver": "bridge"},
        ),
    }


def _list_of(item: str, description: str, example: dict) -> dict:
    return {
        "type": "array",
        "description": description,
        "items": ref(item),
        "example": [example],
    }


def _untyped_object(description: str) -> dict:
    return {"type": "object", "description": description, "additionalProperties": True}


def _container_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "Container ID", "1234567890ab", pattern="^[a-f0-9]{12}$"),
            "name": prop("string", "Container name", "jackett", pattern=CONTAINER_NAME_PATTERN),
            "status": prop("string", "Container status", "running", enum=CONTAINER_STATUSES),
            "state": ref("ContainerState"),
            "created": timestamp("Container creation timestamp"),
            "image": prop("string", "Container image", "lscr.io/linuxserver/jackett"),
            "ports": {
                "type": "array",
                "items": ref("ContainerPort"),
                "description": "Container port mappings",
            },
            "labels": {
                "type": "object",
                "description": "Container labels",
                "additionalProperties": {"type": "string"},
            },
            "mounts": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "source": {"type": "string"},
                        "destination": {"type": "string"},
                        "mode": {"type": "string"},
                    },
                },
            },
            "environment": string_list(
                "Environment variables",
                ["PATH=/usr/local/sbin:/usr/local/bin", "HOME=/root"],
            ),
            "networks": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "ip_address": {"type": "string"},
                    },
                },
                "description": "Network configurations",
            },
            "restart_policy": prop(
                "string", "Container restart policy", "unless-stopped",
                enum=["no", "always", "unless-stopped", "on-failure"],
            ),
            "started_at": timestamp("Container start timestamp"),
        },
        "required": ["id", "name", "status", "created"],
    }


def _container_state() -> dict:
    return {
        "type": "object",
        "properties": {
            "status": prop("string", "Container state status", "running"),
            "running": prop("boolean", "Whether the container is running", True),
            "paused": prop("boolean", "Whether the container is paused", False),
            "restarting": prop("boolean", "Whether the container is restarting", False),
            "pid": prop("integer", "Container process ID", 1234),
            "exit_code": prop("integer", "Container exit code", 0),
            "started_at": timestamp("Container start timestamp"),
            "finished_at": timestamp("Container finish timestamp"),
        },
    }


def _port() -> dict:
    return {
        "type": "object",
        "properties": {
            "private_port": prop(
                "integer", "Container internal port", 32400, minimum=1, maximum=65535,
            ),
            "public_port": prop("integer", "Host external port", 32400, minimum=1, maximum=65535),
            "type": prop("string", "Port protocol", "tcp", enum=["tcp", "udp"]),
            "ip": prop("string", "Bind IP address", "0.0.0.0"),
        },
        "required": ["private_port", "type"],
    }


def _bulk_request() -> dict:
    return {
        "type": "object",
        "properties": {
            "container_ids": {
                "type": "array",
                "items": {"type": "string", "pattern": CONTAINER_NAME_PATTERN},
                "description": "Array of container IDs or names",
                "example": ["jackett", "homeassistant", "qbittorrent"],
                "minItems": 1,
                "maxItems": 50,
                "uniqueItems": True,
            },
        },
        "required": ["container_ids"],
    }


def _bulk_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "summary": ref("BulkOperationSummary"),
            "results": {
                "type": "array",
                "items": ref("ContainerOperationResult"),
                "description": "Individual operation results",
            },
        },
        "required": ["summary", "results"],
    }


def _bulk_summary() -> dict:
    return {
        "type": "object",
        "properties": {
            "total": prop("integer", "Total number of operations attempted", 3, minimum=0),
            "successful": prop("integer", "Number of successful operations", 2, minimum=0),
            "failed": prop("integer", "Number of failed operations", 1, minimum=0),
            "operation": prop(
                "string", "Type of operation performed", "start", enum=CONTAINER_OPERATIONS,
            ),
        },
        "required": ["total", "successful", "failed", "operation"],
    }


def _operation_result() -> dict:
    return {
        "type": "object",
        "properties": {
            "container_id": prop("string", "Container ID or name", "container1"),
            "success": prop("boolean", "Whether the operation was successful", True),
            "message": prop("string", "Operation result message", "Container started successfully"),
            "error": prop("string", "Error message if operation failed", "Container not found"),
        },
        "required": ["container_id", "success"],
    }


def _operation_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": prop("boolean", "Whether the operation was successful", True),
            "message": prop("string", "Operation result message", "Container started successfully"),
            "container_id": prop("string", "Container ID or name", "container1"),
        },
        "required": ["success", "message", "container_id"],
    }


def _image() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "Image ID", "sha256:1234567890ab"),
            "repo_tags": string_list("Repository tags", ["lscr.io/linuxserver/jackett:latest"]),
            "size": prop("integer", "Image size in bytes", 1073741824, minimum=0),
            "created": timestamp("Image creation timestamp"),
        },
        "required": ["id", "repo_tags", "size", "created"],
    }


def _network() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "Network ID", "1234567890ab"),
            "name": prop("string", "Network name", "bridge"),
            "driver": prop("string", "Network driver", "bridge"),
            "scope": prop("string", "Network scope", "local"),
        },
        "required": ["id", "name", "driver"],
    }


def _commit(subject: str, example: str) -> dict:
    return {
        "type": "object",
        "description": f"{subject} commit information",
        "properties": {
            "Expected": prop("string", f"Expected {subject.lower()} version", example),
            "ID": prop("string", f"{subject} commit ID", example),
        },
    }


def _docker_info() -> dict:
    def count(description, example):
        return prop("integer", description, example, minimum=0)

    def flag(description, example):
        return prop("boolean", description, example)

    # Lower-case keys are UMA's summary; CamelCase keys are passed through
    # from the Docker engine's /info payload.
    return {
        "type": "object",
        "properties": {
            "containers": count("Total number of containers", 13),
            "containers_running": count("Number of running containers", 13),
            "containers_paused": count("Number of paused containers", 0),
            "containers_stopped": count("Number of stopped containers", 0),
            "images": count("Total number of images", 13),
            "server_version": prop("string", "Docker server version", "27.5.1"),
            "last_updated": timestamp("Last update timestamp", "2025-06-20T01:06:25Z"),
            "ID": prop("string", "Docker daemon ID", "dcf99289-02ab-4aaf-b8f6-562f8ca37734"),
            "Name": prop("string", "Docker daemon name", "Cube"),
            "ServerVersion": prop("string", "Server version (alternative field)", "27.5.1"),
            "Containers": count("Total containers (alternative field)", 13),
            "ContainersRunning": count("Running containers (alternative field)", 13),
            "ContainersPaused": count("Paused containers (alternative field)", 0),
            "ContainersStopped": count("Stopped containers (alternative field)", 0),
            "Images": count("Total images (alternative field)", 13),
            "NCPU": prop("integer", "Number of CPUs", 12, minimum=1),
            "MemTotal": count("Total memory in bytes", 67645440000),
            "NFd": count("Number of file descriptors", 125),
            "NGoroutines": count("Number of goroutines", 153),
            "NEventsListener": count("Number of events listeners", 1),
            "Driver": prop("string", "Storage driver", "btrfs"),
            "DriverStatus": {
                "type": "array",
                "items": {"type": "array", "items": {"type": "string"}},
                "description": "Driver status",
                "example": [["Btrfs", ""]],
            },
            "DockerRootDir": prop("string", "Docker root directory", "/var/lib/docker"),
            "LoggingDriver": prop("string", "Logging driver", "json-file"),
            "CgroupDriver": prop("string", "Cgroup driver", "systemd"),
            "CgroupVersion": prop("string", "Cgroup version", "2"),
            "DefaultRuntime": prop("string", "Default container runtime", "runc"),
            "Runtimes": _untyped_object("Available container runtimes"),
            "InitBinary": prop("string", "Init binary path", "docker-init"),
            "Isolation": prop("string", "Container isolation", ""),
            "KernelVersion": prop("string", "Kernel version", "6.12.24-Unraid"),
            "OperatingSystem": prop("string", "Operating system", "Unraid OS 7.1 x86_64"),
            "OSType": prop("string", "Operating system type", "linux"),
            "OSVersion": prop("string", "OS version", "7.1"),
            "Architecture": prop("string", "System architecture", "x86_64"),
            "SystemTime": timestamp("System time", "2025-06-20T10:57:01Z"),
            "IndexServerAddress": prop(
                "string", "Index server address", "https://index.docker.io/v1/",
            ),
            "HttpProxy": prop("string", "HTTP proxy setting", ""),
            "HttpsProxy": prop("string", "HTTPS proxy setting", ""),
            "NoProxy": prop("string", "No proxy setting", ""),
            "ProductLicense": prop("string", "Product license", "Community Engine"),
            "Debug": flag("Debug mode enabled", False),
            "ExperimentalBuild": flag("Experimental build flag", False),
            "LiveRestoreEnabled": flag("Live restore enabled", False),
            "MemoryLimit": flag("Memory limit support", True),
            "SwapLimit": flag("Swap limit support", False),
            "CpuCfsPeriod": flag("CPU CFS period support", True),
            "CpuCfsQuota": flag("CPU CFS quota support", True),
            "CPUShares": flag("CPU shares support", True),
            "CPUSet": flag("CPU set support", True),
            "PidsLimit": flag("PIDs limit support", True),
            "OomKillDisable": flag("OOM kill disable support", True),
            "IPv4Forwarding": flag("IPv4 forwarding enabled", True),
            "BridgeNfIptables": flag("Bridge netfilter iptables support", False),
            "BridgeNfIp6tables": flag("Bridge netfilter ip6tables support", False),
            "SecurityOptions": string_list(
                "Security options", ["name=seccomp,profile=builtin", "name=cgroupns"],
            ),
            "CDISpecDirs": string_list("CDI specification directories", ["/etc/cdi", "/var/run/cdi"]),
            "Labels": string_list("Docker daemon labels", []),
            "Warnings": string_list("Docker daemon warnings", []),
            "GenericResources": {
                "anyOf": [
                    {"type": "array", "items": {"type": "object"}},
                    {"type": "null"},
                ],
                "description": "Generic resources (null if none)",
                "example": [],
            },
            "RegistryConfig": _untyped_object("Registry configuration"),
            "ClientInfo": _untyped_object("Docker client information"),
            "Containerd": _untyped_object("Containerd information"),
            "Plugins": _untyped_object("Docker plugins"),
            "Swarm": _untyped_object("Docker swarm information"),
            "ContainerdCommit": _commit("Containerd", "v1.7.24-0-g61f9fd88"),
            "RuncCommit": _commit("Runc", "v1.2.4-0-g6c52b3f"),
            "InitCommit": _commit("Init", "de40ad0"),
        },
        "required": [
            "containers", "containers_running", "containers_paused",
            "containers_stopped", "images",
        ],
    }


def _container_detail() -> dict:
    return {
        "allOf": [
            ref("ContainerInfo"),
            {
                "type": "object",
                "properties": {
                    "logs": string_list(
                        "Recent container logs", ["Container started", "Service initialized"],
                    ),
                    "stats": {
                        "type": "object",
                        "description": "Container resource statistics",
                        "properties": {
                            "cpu_percent": prop("number", "CPU usage percentage", 15.5),
                            "memory_usage": prop("integer", "Memory usage in bytes", 134217728),
                            "memory_limit": prop("integer", "Memory limit in bytes", 1073741824),
                        },
                    },
                },
            },
        ],
    }
