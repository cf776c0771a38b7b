"""Virtual machine management schemas."""

from uma_openapi.schemas.providers._shared import array_of, prop, ref, timestamp

OS_TYPES = ["windows", "linux", "macos", "other"]
VM_NAME_PATTERN = "^[a-zA-Z0-9][a-zA-Z0-9_.-]+$"
MAC_PATTERN = "^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$"


def get_vm_schemas() -> dict:
    return {
        "VMInfo": _info(),
        "VMState": _state(),
        "VMOperation": _operation(),
        "VMOperationResponse": _operation_response(),
        "VMResources": _resources(),
        "VMDisk": _disk(),
        "VMNetwork": _network(),
        "VMConfig": _config(),
        "VMStats": _stats(),
        "VMSnapshot": _snapshot(),
        "BulkVMOperation": _bulk_operation(),
        "BulkVMResponse": _bulk_response(),
        "VMList": {
            "type": "array",
            "description": "List of virtual machines",
            "items": ref("VMInfo"),
            "example": [
                {
                    "id": "vm-001",
                    "name": "Ubuntu-Server",
                    "state": "running",
                    "cpu": 2,
                    "memory": 4096,
                    "template": "Ubuntu",
                }
            ],
        },
        "VMSnapshotList": {
            "type": "array",
            "description": "List of VM snapshots",
            "items": ref("VMSnapshot"),
            "example": [
                {
                    "name": "pre-update-snapshot",
                    "description": "Snapshot before system update",
                    "state": "shutoff",
                    "creation_time": "2025-06-16T14:30:00Z",
                    "current": False,
                }
            ],
        },
        "VMSnapshotResponse": _snapshot_response(),
    }


def _percent(description: str, example: float) -> dict:
    return prop("number", description, example, minimum=0, maximum=100)


def _bytes(description: str, example: int) -> dict:
    return prop("integer", description, example, minimum=0)


def _info() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "VM identifier", "vm-001"),
            "name": prop("string", "VM name", "Windows-10-Gaming", pattern=VM_NAME_PATTERN),
            "description": prop("string", "VM description", "Windows 10 gaming virtual machine"),
            "state": ref("VMState"),
            "os_type": prop("string", "Operating system type", "windows", enum=OS_TYPES),
            "template": prop("string", "VM template used", "Windows 10"),
            "resources": ref("VMResources"),
            "disks": array_of("VMDisk", "VM disk attachments"),
            "networks": array_of("VMNetwork", "VM network interfaces"),
            "created": timestamp("VM creation timestamp"),
            "last_updated": timestamp("Last update timestamp"),
        },
        "required": ["id", "name", "state", "os_type", "resources", "created", "last_updated"],
    }


def _state() -> dict:
    return {
        "type": "object",
        "properties": {
            "status": prop(
                "string", "VM status", "running",
                enum=["running", "stopped", "paused", "suspended", "starting", "stopping", "error"],
            ),
            "uptime": _bytes("VM uptime in seconds", 3600),
            "cpu_usage": _percent("CPU usage percentage", 25.5),
            "memory_usage": _percent("Memory usage percentage", 45.2),
            "memory_used": _bytes("Used memory in bytes", 4294967296),
            "vnc_port": prop("integer", "VNC port number", 5900, minimum=5900, maximum=6000),
            "autostart": prop("boolean", "Whether VM starts automatically", True),
            "last_updated": timestamp("Last state update timestamp"),
        },
        "required": ["status", "last_updated"],
    }


def _resources() -> dict:
    return {
        "type": "object",
        "properties": {
            "vcpus": prop("integer", "Number of virtual CPUs", 4, minimum=1, maximum=64),
            "memory": prop("integer", "Allocated memory in bytes", 8589934592, minimum=134217728),
            "memory_mb": prop("integer", "Allocated memory in MB", 8192, minimum=128),
            "cpu_mode": prop(
                "string", "CPU mode", "host-passthrough",
                enum=["host-passthrough", "host-model", "custom"],
            ),
            "cpu_topology": {
                "type": "object",
                "properties": {
                    "sockets": {"type": "integer", "example": 1, "minimum": 1},
                    "cores": {"type": "integer", "example": 4, "minimum": 1},
                    "threads": {"type": "integer", "example": 1, "minimum": 1},
                },
            },
            "machine_type": prop("string", "Machine type", "pc-q35-6.2"),
            "bios": prop("string", "BIOS type", "ovmf", enum=["seabios", "ovmf"]),
        },
        "required": ["vcpus", "memory", "memory_mb"],
    }


def _disk() -> dict:
    return {
        "type": "object",
        "properties": {
            "device": prop("string", "Disk device name", "vda"),
            "source": prop(
                "string", "Disk source path", "/mnt/user/domains/Windows-10-Gaming/vdisk1.img",
            ),
            "type": prop("string", "Disk type", "file", enum=["file", "block", "network"]),
            "bus": prop("string", "Disk bus type", "virtio", enum=["virtio", "sata", "ide", "scsi"]),
            "format": prop("string", "Disk format", "raw", enum=["raw", "qcow2", "vmdk", "vdi"]),
            "size": _bytes("Disk size in bytes", 107374182400),
            "readonly": prop("boolean", "Whether disk is read-only", False),
            "bootable": prop("boolean", "Whether disk is bootable", True),
        },
        "required": ["device", "source", "type", "bus"],
    }


def _network() -> dict:
    return {
        "type": "object",
        "properties": {
            "interface": prop("string", "Network interface name", "vnet0"),
            "type": prop("string", "Network type", "bridge", enum=["bridge", "network", "direct"]),
            "source": prop("string", "Network source", "br0"),
            "model": prop("string", "Network model", "virtio", enum=["virtio", "e1000", "rtl8139"]),
            "mac_address": prop("string", "MAC address", "52:54:00:12:34:56", pattern=MAC_PATTERN),
            "link_state": prop("string", "Link state", "up", enum=["up", "down"]),
        },
        "required": ["interface", "type", "source", "model"],
    }


def _operation() -> dict:
    return {
        "type": "object",
        "properties": {
            "operation": prop(
                "string", "VM operation to perform", "start",
                enum=["start", "stop", "restart", "pause", "resume", "suspend", "reset"],
            ),
            "force": prop("boolean", "Force the operation", False, default=False),
        },
        "required": ["operation"],
    }


def _operation_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": prop("boolean", "Whether the operation was successful", True),
            "message": prop("string", "Operation result message", "VM started successfully"),
            "vm_id": prop("string", "VM identifier", "vm-001"),
            "operation": prop("string", "Operation that was performed", "start"),
            "state": prop("string", "Current VM state after operation", "running"),
        },
        "required": ["success", "message", "vm_id", "operation"],
    }


def _config() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "VM name", "Windows-10-Gaming"),
            "description": prop("string", "VM description", "Windows 10 gaming virtual machine"),
            "os_type": prop("string", "Operating system type", "windows", enum=OS_TYPES),
            "autostart": prop("boolean", "Whether VM starts automatically", True),
            "resources": ref("VMResources"),
            "disks": array_of("VMDisk"),
            "networks": array_of("VMNetwork"),
        },
        "required": ["name", "os_type", "resources"],
    }


def _stats() -> dict:
    return {
        "type": "object",
        "properties": {
            "vm_id": prop("string", "VM identifier", "vm-001"),
            "cpu_usage": _percent("CPU usage percentage", 25.5),
            "memory_usage": _percent("Memory usage percentage", 45.2),
            "memory_used": _bytes("Used memory in bytes", 4294967296),
            "memory_total": _bytes("Total allocated memory in bytes", 8589934592),
            "disk_read": _bytes("Disk read bytes", 1073741824),
            "disk_write": _bytes("Disk write bytes", 536870912),
            "network_rx": _bytes("Network received bytes", 268435456),
            "network_tx": _bytes("Network transmitted bytes", 134217728),
            "uptime": _bytes("VM uptime in seconds", 3600),
            "last_updated": timestamp("Last update timestamp"),
        },
        "required": ["vm_id", "cpu_usage", "memory_usage", "last_updated"],
    }


def _snapshot() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "Snapshot name", "pre-update-snapshot"),
            "description": prop("string", "Snapshot description", "Snapshot before system update"),
            "state": prop(
                "string", "VM state when snapshot was taken", "shutoff",
                enum=["running", "shutoff", "paused"],
            ),
            "creation_time": timestamp("Snapshot creation timestamp"),
            "parent": prop("string", "Parent snapshot name", "base-snapshot"),
            "current": prop("boolean", "Whether this is the current snapshot", True),
        },
        "required": ["name", "state", "creation_time"],
    }


def _bulk_operation() -> dict:
    return {
        "type": "object",
        "properties": {
            "vm_ids": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of VM IDs or names",
                "example": ["vm-001", "vm-002", "Windows-10-Gaming"],
                "minItems": 1,
                "maxItems": 20,
                "uniqueItems": True,
            },
            "operation": prop(
                "string", "Operation to perform on all VMs", "start",
                enum=["start", "stop", "restart", "pause", "resume"],
            ),
            "force": prop("boolean", "Force the operation", False, default=False),
        },
        "required": ["vm_ids", "operation"],
    }


def _bulk_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "summary": {
                "type": "object",
                "properties": {
                    "total": _bytes("Total number of VMs processed", 3),
                    "successful": _bytes("Number of successful operations", 2),
                    "failed": _bytes("Number of failed operations", 1),
                    "operation": prop("string", "Operation performed", "start"),
                },
                "required": ["total", "successful", "failed", "operation"],
            },
            "results": {
                "type": "array",
                "description": "Individual operation results",
                "items": {
                    "type": "object",
                    "properties": {
                        "vm_id": prop("string", "VM identifier", "vm-001"),
                        "success": prop("boolean", "Whether the operation was successful", True),
                        "message": prop(
                            "string", "Operation result message", "VM started successfully",
                        ),
                        "error": prop("string", "Error message if operation failed", "VM not found"),
                        "state": prop("string", "Current VM state after operation", "running"),
                    },
                    "required": ["vm_id", "success", "message"],
                },
            },
        },
        "required": ["summary", "results"],
    }


def _snapshot_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": prop("boolean", "Whether the snapshot operation was successful", True),
            "message": prop("string", "Operation result message", "Snapshot created successfully"),
            "snapshot": ref("VMSnapshot"),
            "vm_id": prop("string", "VM identifier", "vm-001"),
            "operation": prop(
                "string", "Snapshot operation performed", "create",
                enum=["create", "delete", "revert"],
            ),
        },
        "required": ["success", "message", "vm_id", "operation"],
    }
