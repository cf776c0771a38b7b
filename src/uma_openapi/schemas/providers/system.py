"""System monitoring and control schemas: CPU, memory, sensors, GPU, UPS, logs."""

from uma_openapi.schemas.providers._shared import array_of, prop, ref, string_list, timestamp


def get_system_schemas() -> dict:
    return {
        "SystemInfo": _system_info(),
        "CPUInfo": _cpu(),
        "MemoryInfo": _memory(),
        "TemperatureData": _temperature_data(),
        "FanData": _fan_data(),
        "GPUInfo": _gpu_info(),
        "GPU": _gpu(),
        "GPUMemory": _gpu_memory(),
        "GPUPower": _gpu_power(),
        "GPUClocks": _gpu_clocks(),
        "GPUEngines": _gpu_engines(),
        "UPSInfo": _ups(),
        "NetworkInfo": _network(),
        "SystemResources": _resources(),
        "FilesystemInfo": _filesystems(),
        "SystemScript": _script(),
        "ExecuteRequest": _execute_request(),
        "ExecuteResponse": _execute_response(),
        "LogEntry": _log_entry(),
        "SensorChip": _sensor_chip(),
        "FanInput": _fan_input(),
        "TemperatureInput": _temperature_input(),
        "FanInfo": _fan_info(),
        "SystemLogs": _logs(),
        "SystemLogsAll": _logs_all(),
        "ParityCheckStatus": _parity_check_status(),
        "ParityDiskInfo": _parity_disks(),
        "TemperatureInfo": _temperature_info(),
    }


def _updated(example: str = "2025-06-16T14:30:00Z") -> dict:
    return timestamp("Last update timestamp", example)


def _percent(description: str, example: float) -> dict:
    return prop("number", description, example, minimum=0, maximum=100)


def _bytes(description: str, example: int) -> dict:
    return prop("integer", description, example, minimum=0)


def _load_averages(example: list) -> dict:
    return {
        "type": "array",
        "items": {"type": "number"},
        "description": "Load average (1, 5, 15 minutes)",
        "example": example,
    }


def _system_info() -> dict:
    load_average = _load_averages([0.5, 0.7, 0.8])
    load_average.update(minItems=3, maxItems=3)
    return {
        "type": "object",
        "properties": {
            "hostname": prop("string", "System hostname", "unraid-server"),
            "kernel": prop("string", "Kernel version", "5.19.17-Unraid"),
            "uptime": prop("integer", "System uptime in seconds", 86400, minimum=0),
            "load_average": load_average,
            "architecture": prop("string", "System architecture", "x86_64"),
            "last_updated": _updated(),
        },
        "required": ["hostname", "kernel", "uptime", "load_average"],
    }


def _cpu() -> dict:
    return {
        "type": "object",
        "properties": {
            "usage": _percent("CPU usage percentage", 12.7),
            "cores": prop("integer", "Number of CPU cores", 6, minimum=1),
            "threads": prop("integer", "Number of CPU threads", 16, minimum=1),
            "model": prop("string", "CPU model name", "Intel(R) Core(TM) i7-8700K CPU @ 3.70GHz"),
            "frequency": prop("number", "Current CPU frequency in MHz", 3700.0, minimum=0),
            "temperature": prop("number", "CPU temperature in Celsius", 41.0),
            "architecture": prop("string", "CPU architecture", "x86_64"),
            "load1": prop("number", "1-minute load average", 0.39, minimum=0),
            "load5": prop("number", "5-minute load average", 0.38, minimum=0),
            "load15": prop("number", "15-minute load average", 0.43, minimum=0),
            "last_updated": _updated(),
        },
        "required": ["usage", "cores", "last_updated"],
    }


def _memory() -> dict:
    return {
        "type": "object",
        "properties": {
            "total": _bytes("Total memory in bytes", 33328439296),
            "available": _bytes("Available memory in bytes", 26384523264),
            "used": _bytes("Used memory in bytes", 6943916032),
            "usage": _percent("Memory usage percentage", 20.8),
            "buffers": _bytes("Buffer memory in bytes", 1073741824),
            "cached": _bytes("Cached memory in bytes", 2147483648),
            "free": _bytes("Free memory in bytes", 826167296),
            "last_updated": _updated(),
        },
        "required": ["total", "available", "used", "usage", "last_updated"],
    }


def _keyed_by_sensor(item: str, description: str) -> dict:
    return {"type": "object", "description": description, "additionalProperties": ref(item)}


def _temperature_data() -> dict:
    return {
        "type": "object",
        "properties": {
            "sensors": _keyed_by_sensor("SensorChip", "Temperature sensors by chip"),
            "last_updated": _updated(),
        },
        "required": ["sensors", "last_updated"],
    }


def _sensor_chip() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "Sensor chip name", "coretemp-isa-0000"),
            "temperatures": _keyed_by_sensor("TemperatureInput", "Temperature inputs"),
        },
    }


def _temperature_input() -> dict:
    return {
        "type": "object",
        "properties": {
            "label": prop("string", "Temperature sensor label", "Core 0"),
            "current": prop("number", "Current temperature in Celsius", 45.0),
            "high": prop("number", "High temperature threshold", 100.0),
            "critical": prop("number", "Critical temperature threshold", 105.0),
        },
        "required": ["label", "current"],
    }


def _fan_data() -> dict:
    return {
        "type": "object",
        "properties": {
            "fans": _keyed_by_sensor("FanInput", "Fan sensors"),
            "last_updated": _updated(),
        },
        "required": ["fans", "last_updated"],
    }


def _fan_input() -> dict:
    return {
        "type": "object",
        "properties": {
            "label": prop("string", "Fan label", "CPU Fan"),
            "current": prop("number", "Current fan speed in RPM", 1200.0, minimum=0),
            "min": prop("number", "Minimum fan speed", 0.0),
            "max": prop("number", "Maximum fan speed", 3000.0),
        },
        "required": ["label", "current"],
    }


def _ups() -> dict:
    return {
        "type": "object",
        "properties": {
            "status": prop(
                "string", "UPS status", "online",
                enum=["online", "onbatt", "lowbatt", "unknown"],
            ),
            "battery_charge": _percent("Battery charge percentage", 95.0),
            "battery_runtime": prop(
                "integer", "Estimated battery runtime in minutes", 45, minimum=0,
            ),
            "load_percent": _percent("UPS load percentage", 25.5),
            "input_voltage": prop("number", "Input voltage", 230.0),
            "output_voltage": prop("number", "Output voltage", 230.0),
            "model": prop("string", "UPS model", "APC Smart-UPS 1500"),
            "voltage": prop("integer", "UPS voltage", 240, minimum=0),
            "available": prop("boolean", "Whether UPS is available", True),
            "detection": {
                "type": "object",
                "description": "UPS detection information",
                "properties": {
                    "available": prop("boolean", "Whether UPS detection is available", True),
                    "last_check": timestamp(
                        "Last detection check timestamp", "2025-06-20T10:56:38Z",
                    ),
                    "type": prop("number", "Detection type", 1),
                },
                "required": ["available", "last_check", "type"],
            },
            "load": prop("integer", "UPS load", 0, minimum=0),
            "runtime": prop("integer", "UPS runtime", 220, minimum=0),
            "last_updated": _updated(),
        },
        "required": [
            "status", "available", "detection", "voltage", "load", "runtime", "last_updated",
        ],
    }


def _gpu_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "gpus": array_of("GPU", "List of detected GPUs with comprehensive monitoring data"),
            "last_updated": _updated("2025-06-19T02:53:23Z"),
        },
        "required": ["gpus", "last_updated"],
    }


def _described_ref(name: str, description: str) -> dict:
    return {**ref(name), "description": description}


def _gpu() -> dict:
    return {
        "type": "object",
        "properties": {
            "index": prop("integer", "GPU index/ID", 0, minimum=0),
            "name": prop(
                "string", "GPU name/model",
                "Intel Corporation CoffeeLake-S GT2 [UHD Graphics 630]",
            ),
            "uuid": prop(
                "string", "GPU UUID (if available)", "GPU-12345678-1234-1234-1234-123456789abc",
            ),
            "vendor": prop("string", "GPU vendor", "Intel", enum=["Intel", "NVIDIA", "AMD"]),
            "type": prop("string", "GPU type", "integrated", enum=["integrated", "discrete"]),
            "driver": prop("string", "GPU driver name", "i915"),
            "usage": _percent("Overall GPU utilization percentage", 0.0),
            "temperature": prop("integer", "GPU temperature in Celsius", 40),
            "memory": _described_ref("GPUMemory", "GPU memory information"),
            "power": _described_ref("GPUPower", "GPU power consumption information"),
            "clocks": _described_ref("GPUClocks", "GPU clock frequencies"),
            "engines": _described_ref("GPUEngines", "GPU engine utilization (Intel-specific)"),
            "status": prop(
                "string", "GPU status", "active", enum=["active", "idle", "error", "unknown"],
            ),
            "last_updated": _updated("2025-06-19T02:53:23Z"),
        },
        "required": [
            "index", "name", "vendor", "type", "driver",
            "usage", "temperature", "status", "last_updated",
        ],
    }


def _gpu_memory() -> dict:
    return {
        "type": "object",
        "properties": {
            "total_bytes": _bytes("Total GPU memory in bytes", 8589934592),
            "used_bytes": _bytes("Used GPU memory in bytes", 2147483648),
            "free_bytes": _bytes("Free GPU memory in bytes", 6442450944),
            "usage_percent": _percent("Memory usage percentage", 25.0),
            "total_formatted": prop("string", "Human-readable total memory", "8 GB"),
            "used_formatted": prop("string", "Human-readable used memory", "2 GB"),
            "free_formatted": prop("string", "Human-readable free memory", "6 GB"),
        },
    }


def _gpu_power() -> dict:
    return {
        "type": "object",
        "properties": {
            "draw_watts": prop("number", "Current power draw in watts", 150.5, minimum=0),
            "limit_watts": prop("number", "Power limit in watts", 200.0, minimum=0),
            "usage_percent": _percent("Power usage percentage of limit", 75.25),
            "draw_formatted": prop("string", "Human-readable power draw", "150.5 W"),
            "limit_formatted": prop("string", "Human-readable power limit", "200 W"),
        },
    }


def _gpu_clocks() -> dict:
    return {
        "type": "object",
        "properties": {
            "core": prop("integer", "Core clock frequency in MHz", 1200, minimum=0),
            "memory": prop("integer", "Memory clock frequency in MHz", 1750, minimum=0),
            "shader": prop("integer", "Shader clock frequency in MHz", 1500, minimum=0),
        },
    }


def _gpu_engines() -> dict:
    return {
        "type": "object",
        "description": "GPU engine utilization percentages (Intel-specific)",
        "properties": {
            "render": _percent("Render/3D engine utilization percentage", 0.0),
            "video": _percent("Video decode engine utilization percentage", 0.0),
            "video_enhance": _percent("Video enhancement engine utilization percentage", 0.0),
            "blitter": _percent("Blitter engine utilization percentage", 0.0),
        },
    }


def _network() -> dict:
    return {
        "type": "object",
        "properties": {
            "interfaces": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Interface name", "eth0"),
                        "ip_address": prop("string", "IP address", "192.168.1.100"),
                        "mac_address": prop("string", "MAC address", "00:11:22:33:44:55"),
                        "status": prop("string", "Interface status", "up", enum=["up", "down"]),
                        "speed": prop("string", "Interface speed", "1000Mbps"),
                    },
                },
            },
            "last_updated": _updated(),
        },
        "required": ["interfaces", "last_updated"],
    }


def _resources() -> dict:
    return {
        "type": "object",
        "properties": {
            "cpu": ref("CPUInfo"),
            "memory": ref("MemoryInfo"),
            "network": {
                "type": "object",
                "description": "Network interface information",
                "properties": {
                    "interfaces": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": prop("string", "Interface name", "eth0"),
                                "ip_address": prop("string", "IP address", "192.168.20.21"),
                                "status": prop(
                                    "string", "Interface status", "up", enum=["up", "down"],
                                ),
                                "rx_bytes": prop(
                                    "number", "Received bytes", 1820920544100, minimum=0,
                                ),
                                "tx_bytes": prop(
                                    "number", "Transmitted bytes", 1199805033, minimum=0,
                                ),
                            },
                            "required": ["name", "status", "rx_bytes", "tx_bytes"],
                        },
                    },
                },
                "required": ["interfaces"],
            },
            "uptime": {
                "type": "object",
                "description": "System uptime information",
                "properties": {
                    "uptime": prop("string", "Human readable uptime", "3d 20h 14m 31s"),
                    "uptime_seconds": prop("number", "Uptime in seconds", 332071, minimum=0),
                    "days": prop("number", "Days component", 3, minimum=0),
                    "hours": prop("number", "Hours component", 20, minimum=0),
                    "minutes": prop("number", "Minutes component", 14, minimum=0),
                    "seconds": prop("number", "Seconds component", 31, minimum=0),
                },
                "required": ["uptime", "uptime_seconds"],
            },
            "load": {
                "type": "object",
                "description": "System load averages",
                "properties": {
                    "load1": prop("number", "1-minute load average", 0.51, minimum=0),
                    "load5": prop("number", "5-minute load average", 0.54, minimum=0),
                    "load15": prop("number", "15-minute load average", 0.59, minimum=0),
                },
                "required": ["load1", "load5", "load15"],
            },
            "load_average": _load_averages([0.5, 0.7, 0.8]),
            "processes": prop("integer", "Number of running processes", 150, minimum=0),
            "last_updated": _updated(),
        },
        "required": ["cpu", "memory", "network", "uptime", "load", "last_updated"],
    }


def _filesystems() -> dict:
    return {
        "type": "object",
        "properties": {
            "filesystems": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "device": prop("string", "Device name", "/dev/sda1"),
                        "mountpoint": prop("string", "Mount point", "/mnt/disk1"),
                        "fstype": prop("string", "Filesystem type", "xfs"),
                        "size": _bytes("Total size in bytes", 1099511627776),
                        "used": _bytes("Used space in bytes", 549755813888),
                        "available": _bytes("Available space in bytes", 549755813888),
                        "usage_percent": _percent("Usage percentage", 50.0),
                    },
                },
            },
            "last_updated": _updated(),
        },
        "required": ["filesystems", "last_updated"],
    }


def _script() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "Script name", "backup_script"),
            "path": prop(
                "string", "Script file path",
                "/boot/config/plugins/user.scripts/scripts/backup_script/script",
            ),
            "description": prop("string", "Script description", "Daily backup script"),
            "executable": prop("boolean", "Whether the script is executable", True),
        },
        "required": ["name", "path"],
    }


def _execute_request() -> dict:
    return {
        "type": "object",
        "properties": {
            "command": prop("string", "Command to execute", "ls -la /mnt/user", maxLength=1000),
            "timeout": prop(
                "integer", "Command timeout in seconds", 30, minimum=1, maximum=300, default=30,
            ),
        },
        "required": ["command"],
    }


def _execute_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": prop("boolean", "Whether the command executed successfully", True),
            "exit_code": prop("integer", "Command exit code", 0),
            "stdout": prop(
                "string", "Command standard output",
                "total 4\ndrwxrwxrwx 1 root root 28 Jun 16 14:30 .",
            ),
            "stderr": prop("string", "Command standard error", ""),
            "duration": prop(
                "number", "Command execution duration in seconds", 0.125, minimum=0,
            ),
        },
        "required": ["success", "exit_code", "stdout", "stderr", "duration"],
    }


def _log_entry() -> dict:
    return {
        "type": "object",
        "properties": {
            "timestamp": timestamp("Log entry timestamp"),
            "level": prop(
                "string", "Log level", "info", enum=["debug", "info", "warn", "error", "fatal"],
            ),
            "message": prop("string", "Log message", "System startup completed"),
            "source": prop("string", "Log source/component", "kernel"),
            "facility": prop("string", "Syslog facility", "daemon"),
        },
        "required": ["timestamp", "level", "message"],
    }


def _fan_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "fans": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Fan name/label", "CPU Fan"),
                        "speed": prop("number", "Current fan speed in RPM", 1200.0, minimum=0),
                        "min_speed": prop("number", "Minimum fan speed", 0.0),
                        "max_speed": prop("number", "Maximum fan speed", 3000.0),
                        "status": prop(
                            "string", "Fan status", "normal",
                            enum=["normal", "warning", "critical", "unknown"],
                        ),
                    },
                    "required": ["name", "speed", "status"],
                },
            },
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": ["fans", "last_updated"],
    }


def _logs() -> dict:
    return {
        "type": "object",
        "properties": {
            "logs": array_of("LogEntry", "System log entries"),
            "total_count": prop("integer", "Total number of log entries", 1000, minimum=0),
            "filtered_count": prop("integer", "Number of filtered log entries", 50, minimum=0),
            "log_sources": string_list(
                "Available log sources", ["kernel", "syslog", "auth", "daemon"],
            ),
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": ["logs", "total_count", "last_updated"],
    }


def _logs_all() -> dict:
    return {
        "type": "object",
        "properties": {
            "logs": array_of("LogEntry", "Array of log entries from all system sources"),
            "sources": string_list(
                "List of log sources included", ["syslog", "kernel", "auth", "daemon"],
            ),
            "total_entries": prop("integer", "Total number of log entries", 1500, minimum=0),
            "time_range": {
                "type": "object",
                "properties": {
                    "start": timestamp("Start time of log range", "2025-06-20T00:00:00Z"),
                    "end": timestamp("End time of log range", "2025-06-20T23:59:59Z"),
                },
                "required": ["start", "end"],
            },
            "filters_applied": {
                "type": "object",
                "properties": {
                    "level": prop("string", "Log level filter applied", "info"),
                    "lines": prop("integer", "Number of lines requested", 1000),
                    "since": timestamp("Since timestamp filter", "2025-06-20T12:00:00Z"),
                },
            },
            "last_updated": _updated("2025-06-20T14:30:00Z"),
        },
        "required": ["logs", "sources", "total_entries", "last_updated"],
    }


def _parity_check_status() -> dict:
    return {
        "type": "object",
        "properties": {
            "status": prop(
                "string", "Parity check status", "idle",
                enum=["idle", "running", "paused", "cancelled", "completed"],
            ),
            "progress": _percent("Check progress percentage", 0.0),
            "speed": prop("integer", "Check speed in bytes per second", 150000000, minimum=0),
            "eta": prop("integer", "Estimated time to completion in seconds", 0, minimum=0),
            "errors": prop("integer", "Number of errors found", 0, minimum=0),
            "last_check": timestamp("Last parity check timestamp", "2025-06-01T02:00:00Z"),
            "duration": prop("integer", "Last check duration in seconds", 28800, minimum=0),
            "type": prop(
                "string", "Type of parity operation", "check", enum=["check", "correct"],
            ),
            "last_updated": _updated("2025-06-20T00:56:56Z"),
        },
        "required": ["status", "progress", "errors", "last_updated"],
    }


def _parity_disk(device: str, serial: str, temperature: float) -> dict:
    return {
        "type": "object",
        "properties": {
            "device": prop("string", "Parity disk device path", device),
            "serial": prop("string", "Disk serial number", serial),
            "model": prop("string", "Disk model", "WDC WD80EFAX-68LHPN0"),
            "size": _bytes("Disk size in bytes", 8000000000000),
            "temperature": prop("number", "Disk temperature in Celsius", temperature),
            "status": prop(
                "string", "Disk status", "active",
                enum=["active", "standby", "spun_down", "error", "missing"],
            ),
        },
        "required": ["device", "size", "status"],
    }


def _parity_disks() -> dict:
    parity2 = _parity_disk("/dev/sdc", "WD-WCC4N7YYYYYY", 36.0)
    parity2["nullable"] = True
    return {
        "type": "object",
        "properties": {
            "parity1": _parity_disk("/dev/sdb", "WD-WCC4N7XXXXXX", 35.0),
            "parity2": parity2,
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": ["parity1", "last_updated"],
    }


def _temperature_info() -> dict:
    levels = ["normal", "warm", "hot", "critical"]
    return {
        "type": "object",
        "properties": {
            "sensors": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Temperature sensor name", "CPU Core 0"),
                        "current": prop("number", "Current temperature in Celsius", 45.0),
                        "high": prop("number", "High temperature threshold", 80.0),
                        "critical": prop("number", "Critical temperature threshold", 100.0),
                        "status": prop("string", "Temperature status", "normal", enum=levels),
                        "chip": prop("string", "Sensor chip identifier", "coretemp-isa-0000"),
                    },
                    "required": ["name", "current", "status"],
                },
            },
            "fans": {
                "type": "array",
                "description": "Fan monitoring data",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Fan name", "nct6793 - fan1"),
                        "source": prop("string", "Fan source chip", "nct6793"),
                        "speed": prop("number", "Fan speed in RPM", 790, minimum=0),
                        "status": prop(
                            "string", "Fan status", "normal",
                            enum=["normal", "warning", "critical"],
                        ),
                        "unit": prop("string", "Speed unit", "RPM"),
                    },
                    "required": ["name", "speed", "status"],
                },
            },
            "overall_status": prop(
                "string", "Overall temperature status", "normal", enum=levels,
            ),
            "max_temperature": prop("number", "Highest temperature reading", 45.0),
            "last_updated": _updated("2024-01-01T12:00:00Z"),
        },
        "required": ["sensors", "fans", "overall_status", "last_updated"],
    }
