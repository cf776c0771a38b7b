"""Array, disk, parity, cache, boot and ZFS storage schemas."""

from uma_openapi.schemas.providers._shared import array_of, prop, ref, string_list, timestamp

DISK_STATUSES = ["active", "standby", "spun_down", "error", "missing"]
ARRAY_STATES = ["started", "stopped", "starting", "stopping"]
SMART_HEALTH = ["PASSED", "FAILED", "UNKNOWN"]
ZFS_STATES = ["ONLINE", "DEGRADED", "FAULTED", "OFFLINE", "UNAVAIL", "REMOVED"]


def get_storage_schemas() -> dict:
    return {
        "ArrayInfo": _array_info(),
        "ArrayDisk": _array_member("data", "disk1", "/dev/sda", "WD-WCC4N7XXXXXX", 35.0),
        "ParityDisk": _array_member("parity", "parity", "/dev/sdb", "WD-WCC4N7YYYYYY", 34.0),
        "DiskInfo": _disk_info(),
        "SMARTData": _smart_data(),
        "ParityInfo": _parity_info(),
        "ParityCheckInfo": _parity_check_info(),
        "CacheInfo": _cache_info(),
        "ZFSPoolInfo": _zfs_pool(),
        "ZFSDatasetInfo": _zfs_dataset(),
        "ArrayOperation": _array_operation(),
        "ArrayStatus": _array_status(),
        "DiskTemperature": _disk_temperature(),
        "StorageOverview": _overview(),
        "BootInfo": _boot_info(),
        "DiskList": _disk_list(),
        "StorageGeneral": _general(),
        "ZFSInfo": _zfs_info(),
    }


def _updated(example: str = "2025-06-16T14:30:00Z") -> dict:
    return timestamp("Last update timestamp", example)


def _percent(description: str, example: float) -> dict:
    return prop("number", description, example, minimum=0, maximum=100)


def _size(type_: str, description: str, example) -> dict:
    return prop(type_, description, example, minimum=0)


def _array_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "disks": array_of("ArrayDisk", "Array data disks"),
            "parity": array_of("ParityDisk", "Parity disks"),
            "protection": prop(
                "string", "Array protection level", "parity",
                enum=["parity", "dual-parity", "none"],
            ),
            "state": prop("string", "Array state", "started", enum=ARRAY_STATES),
            "sync_action": prop(
                "string", "Current synchronization action", "check P",
                enum=["check", "check P", "resync", "none", "idle"],
            ),
            "sync_progress": _percent("Synchronization progress percentage", 45.2),
            "last_updated": _updated("2025-06-19T14:30:00Z"),
        },
        "required": ["disks", "parity", "protection", "state", "last_updated"],
    }


def _array_member(role: str, name: str, device: str, serial: str, temperature: float) -> dict:
    """Data and parity members of the array share one shape; only ``type`` differs."""
    if role == "parity":
        disk_types, name_description = ["parity", "parity2"], "Parity disk name"
    else:
        disk_types, name_description = ["data", "cache", "pool"], "Disk name"
    return {
        "type": "object",
        "properties": {
            "device": prop("string", "Device path", device),
            "health": prop("string", "Disk health status", "PASSED", enum=SMART_HEALTH),
            "name": prop("string", name_description, name),
            "serial": prop("string", "Disk serial number", serial),
            "size": prop("string", "Disk size (human readable)", "8.0 TB"),
            "smart_data": {
                "type": "object",
                "description": "SMART data attributes",
                "additionalProperties": True,
            },
            "status": prop("string", "Disk status", "active", enum=DISK_STATUSES),
            "temperature": prop("number", "Disk temperature in Celsius", temperature),
            "type": prop("string", "Disk type", disk_types[0], enum=disk_types),
        },
        "required": ["device", "name", "status", "type"],
    }


def _disk_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "Disk name", "disk1", pattern=r"^(disk|parity|cache)\d*$"),
            "device": prop("string", "Device path", "/dev/sda"),
            "serial": prop("string", "Disk serial number", "WD-WCC4N7XXXXXX"),
            "model": prop("string", "Disk model", "WDC WD80EFAX-68LHPN0"),
            "size": _size("integer", "Disk size in bytes", 8000000000000),
            "used": _size("integer", "Used space in bytes", 4000000000000),
            "free": _size("integer", "Free space in bytes", 4000000000000),
            "usage_percent": _percent("Usage percentage", 50.0),
            "temperature": prop("number", "Disk temperature in Celsius", 35.0),
            "status": prop("string", "Disk status", "active", enum=DISK_STATUSES),
            "filesystem": prop("string", "Filesystem type", "xfs"),
            "health": prop(
                "string", "Disk health status", "healthy",
                enum=["healthy", "unknown", "warning", "critical"],
            ),
            "type": prop("string", "Disk type", "disk", enum=["disk", "parity", "cache", "pool"]),
            "smart_data": {
                "type": "object",
                "description": "SMART monitoring data",
                "properties": {
                    "available": prop("boolean", "Whether SMART data is available", True),
                    "status": prop(
                        "string", "SMART status", "passed", enum=["passed", "failed", "unknown"],
                    ),
                    "attributes": {
                        "type": "object",
                        "description": "SMART attributes",
                        "additionalProperties": {"type": "number"},
                        "example": {"power_on_hours": 18762, "power_cycle_count": 241},
                    },
                },
                "required": ["available", "status"],
            },
            "smart": ref("SMARTData"),
            "last_updated": _updated(),
        },
        "required": [
            "name", "device", "size", "status", "health", "type", "smart_data", "last_updated",
        ],
    }


def _smart_data() -> dict:
    def counter(description, example):
        return _size("integer", description, example)

    return {
        "type": "object",
        "properties": {
            "overall_health": prop(
                "string", "Overall SMART health status", "PASSED", enum=SMART_HEALTH,
            ),
            "temperature": prop("number", "Current temperature in Celsius", 35.0),
            "power_on_hours": counter("Total power-on hours", 8760),
            "power_cycle_count": counter("Power cycle count", 100),
            "reallocated_sectors": counter("Reallocated sector count", 0),
            "pending_sectors": counter("Current pending sector count", 0),
            "uncorrectable_errors": counter("Offline uncorrectable error count", 0),
            "last_test_result": prop("string", "Last self-test result", "Completed without error"),
            "last_updated": timestamp("Last SMART data update"),
        },
        "required": ["overall_health", "last_updated"],
    }


def _optional_disk(description: str) -> dict:
    return {"anyOf": [ref("DiskInfo"), {"type": "null"}], "description": description}


def _parity_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "parity1": _optional_disk("First parity disk (null if not present)"),
            "parity2": _optional_disk("Second parity disk (null if not present)"),
            "check_status": ref("ParityCheckInfo"),
            "last_updated": _updated(),
        },
        "required": ["last_updated"],
    }


def _parity_check_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "status": prop(
                "string", "Parity check status", "idle",
                enum=["idle", "running", "paused", "cancelled"],
            ),
            "progress": _percent("Check progress percentage", 0.0),
            "speed": _size("integer", "Check speed in bytes per second", 150000000),
            "eta": _size("integer", "Estimated time to completion in seconds", 0),
            "errors": _size("integer", "Number of errors found", 0),
            "last_check": timestamp("Last parity check timestamp", "2025-06-01T02:00:00Z"),
            "duration": _size("integer", "Last check duration in seconds", 28800),
            "scheduled": prop("string", "Next scheduled check", "Monthly on 1st at 02:00"),
        },
        "required": ["status", "progress", "errors"],
    }


def _cache_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "disks": array_of("DiskInfo", "Cache disks"),
            "pool_status": prop(
                "string", "Cache pool status", "online",
                enum=["online", "degraded", "offline", "faulted"],
            ),
            "total_size": _size("integer", "Total cache size in bytes", 1000000000000),
            "used": _size("integer", "Used cache space in bytes", 500000000000),
            "free": _size("integer", "Free cache space in bytes", 500000000000),
            "usage_percent": _percent("Cache usage percentage", 50.0),
            "pools": {
                "type": "array",
                "description": "Cache pools information",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Pool name", "cache"),
                        "type": prop("string", "Pool type", "cache", enum=["cache", "zfs_cache"]),
                        "device": prop("string", "Pool device", "/dev/nvme0n1p1"),
                        "mountpoint": prop("string", "Pool mountpoint", "/mnt/cache"),
                        "size": prop("string", "Pool size", "477G"),
                        "used": prop("string", "Used space", "67G"),
                        "available": prop("string", "Available space", "408G"),
                        "usage": prop("string", "Usage percentage", "14%"),
                        "health": prop(
                            "string", "Pool health", "healthy",
                            enum=["healthy", "ONLINE", "DEGRADED", "FAULTED"],
                        ),
                        "temperature": prop("number", "Pool temperature", 0),
                        "smart_data": {
                            "type": "object",
                            "description": "SMART data for the pool",
                            "additionalProperties": True,
                        },
                    },
                    "required": ["name", "type", "size", "health"],
                },
            },
            "last_updated": _updated(),
        },
        "required": ["disks", "pool_status", "pools", "last_updated"],
    }


def _zfs_pool() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "ZFS pool name", "tank"),
            "status": prop("string", "Pool status", "ONLINE", enum=ZFS_STATES),
            "health": prop("string", "Pool health", "ONLINE", enum=ZFS_STATES),
            "size": _size("integer", "Total pool size in bytes", 2000000000000),
            "allocated": _size("integer", "Allocated space in bytes", 1000000000000),
            "free": _size("integer", "Free space in bytes", 1000000000000),
            "fragmentation": _percent("Pool fragmentation percentage", 15.5),
            "capacity": _percent("Pool capacity percentage", 50.0),
            "dedup_ratio": prop("number", "Deduplication ratio", 1.0, minimum=1.0),
            "last_updated": _updated(),
        },
        "required": ["name", "status", "health", "size", "last_updated"],
    }


def _zfs_dataset() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "Dataset name", "tank/data"),
            "type": prop(
                "string", "Dataset type", "filesystem",
                enum=["filesystem", "volume", "snapshot"],
            ),
            "used": _size("integer", "Used space in bytes", 500000000000),
            "available": _size("integer", "Available space in bytes", 1500000000000),
            "referenced": _size("integer", "Referenced space in bytes", 500000000000),
            "compression": prop("string", "Compression algorithm", "lz4"),
            "mountpoint": prop("string", "Dataset mountpoint", "/mnt/tank/data"),
            "last_updated": _updated(),
        },
        "required": ["name", "type", "used", "available", "last_updated"],
    }


def _array_operation() -> dict:
    return {
        "type": "object",
        "properties": {
            "operation": prop(
                "string", "Array operation to perform", "start", enum=["start", "stop"],
            ),
            "force": prop(
                "boolean", "Force the operation (use with caution)", False, default=False,
            ),
        },
        "required": ["operation"],
    }


def _array_status() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": prop("boolean", "Whether the operation was successful", True),
            "message": prop("string", "Operation result message", "Array started successfully"),
            "status": prop("string", "Current array status", "started", enum=ARRAY_STATES),
            "warnings": string_list("Any warnings from the operation", ["Disk temperature high"]),
        },
        "required": ["success", "message", "status"],
    }


def _disk_temperature() -> dict:
    return {
        "type": "object",
        "properties": {
            "disk": prop("string", "Disk identifier", "disk1"),
            "device": prop("string", "Device path", "/dev/sda"),
            "temperature": prop("number", "Current temperature in Celsius", 35.0),
            "max_temperature": prop("number", "Maximum safe temperature", 60.0),
            "status": prop(
                "string", "Temperature status", "normal",
                enum=["normal", "warm", "hot", "critical"],
            ),
            "last_updated": _updated(),
        },
        "required": ["disk", "device", "temperature", "status", "last_updated"],
    }


def _overview() -> dict:
    return {
        "type": "object",
        "properties": {
            "array": ref("ArrayInfo"),
            "parity": ref("ParityInfo"),
            "cache": ref("CacheInfo"),
            "disks": array_of("DiskInfo", "All disks in the system"),
            "zfs_pools": array_of("ZFSPoolInfo", "ZFS pools (if available)"),
            "total_capacity": _size("integer", "Total storage capacity in bytes", 50000000000000),
            "total_used": _size("integer", "Total used storage in bytes", 25000000000000),
            "total_free": _size("integer", "Total free storage in bytes", 25000000000000),
            "overall_usage_percent": _percent("Overall storage usage percentage", 50.0),
            "last_updated": _updated(),
        },
        "required": [
            "array", "disks", "total_capacity", "total_used", "total_free", "last_updated",
        ],
    }


def _boot_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "device": prop("string", "Boot device path", "/dev/sdb1"),
            "filesystem": prop("string", "Boot filesystem type", "vfat"),
            "size": _size("integer", "Boot device size in bytes", 1073741824),
            "used": _size("integer", "Used space in bytes", 536870912),
            "free": _size("integer", "Free space in bytes", 536870912),
            "usage_percent": _percent("Usage percentage", 50.0),
            "usage": _percent("Usage percentage (alternative field)", 6.6),
            "available": prop("string", "Available space (human readable)", "29.9GB"),
            "mount_point": prop("string", "Mount point", "/boot"),
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": [
            "device", "filesystem", "size", "used", "free",
            "usage", "available", "mount_point", "last_updated",
        ],
    }


def _disk_list() -> dict:
    return {
        "type": "array",
        "description": "List of storage disks",
        "items": ref("DiskInfo"),
        "example": [
            {"name": "disk1", "device": "/dev/sda", "size": 8000000000000, "status": "active"},
        ],
    }


def _space_usage(description: str, path: str, total: int, used: int, free: int,
                 usage: float, subject: str) -> dict:
    return {
        "type": "object",
        "description": description,
        "properties": {
            "path": prop("string", f"{subject} path", path),
            "total": _size("number", f"Total {subject.lower()} space in bytes", total),
            "used": _size("number", f"Used {subject.lower()} space in bytes", used),
            "free": _size("number", f"Free {subject.lower()} space in bytes", free),
            "usage": _percent(f"{subject} usage percentage", usage),
            "last_updated": _updated("2025-06-20T00:56:59Z"),
        },
        "required": ["path", "total", "used", "free", "usage", "last_updated"],
    }


def _general() -> dict:
    return {
        "type": "object",
        "properties": {
            "total_capacity": _size("integer", "Total storage capacity in bytes", 50000000000000),
            "total_used": _size("integer", "Total used storage in bytes", 25000000000000),
            "total_free": _size("integer", "Total free storage in bytes", 25000000000000),
            "usage_percent": _percent("Overall usage percentage", 50.0),
            "disk_count": _size("integer", "Total number of disks", 8),
            "array_status": prop(
                "string", "Array status", "started", enum=[*ARRAY_STATES, "unknown"],
            ),
            "parity_valid": prop("boolean", "Whether parity is valid", True),
            "log_usage": _space_usage(
                "Log directory usage information", "/var/log",
                134217728, 4771840, 129445888, 3.56, "Log",
            ),
            "boot_usage": {
                "type": "object",
                "description": "Boot device usage information",
                "properties": {
                    "device": prop("string", "Boot device path", "/dev/sda1"),
                    "filesystem": prop("string", "Boot filesystem type", "vfat"),
                    "size": prop("string", "Boot device size", "32GB"),
                    "used": prop("string", "Used boot space", "2.1GB"),
                    "available": prop("string", "Available boot space", "29.9GB"),
                    "usage": _percent("Boot usage percentage", 6.6),
                    "last_updated": _updated("2025-06-20T00:56:59Z"),
                },
                "required": [
                    "device", "filesystem", "size", "used", "available", "usage", "last_updated",
                ],
            },
            "docker_vdisk": _space_usage(
                "Docker virtual disk usage information", "/var/lib/docker",
                161061273600, 12305375232, 148755898368, 7.64, "Docker vdisk",
            ),
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": [
            "total_capacity", "total_used", "total_free", "usage_percent", "disk_count",
            "array_status", "log_usage", "boot_usage", "docker_vdisk", "last_updated",
        ],
    }


def _zfs_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "pools": array_of("ZFSPoolInfo", "ZFS pools"),
            "datasets": array_of("ZFSDatasetInfo", "ZFS datasets"),
            "total_capacity": _size("integer", "Total ZFS capacity in bytes", 2000000000000),
            "total_used": _size("integer", "Total ZFS used space in bytes", 1000000000000),
            "total_free": _size("integer", "Total ZFS free space in bytes", 1000000000000),
            "overall_health": prop(
                "string", "Overall ZFS health status", "ONLINE", enum=ZFS_STATES[:5],
            ),
            "version": prop("string", "ZFS version", "2.1.5"),
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": [
            "pools", "datasets", "total_capacity", "total_used",
            "total_free", "overall_health", "last_updated",
        ],
    }
