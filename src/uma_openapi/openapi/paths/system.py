"""Host monitoring, logs, scripts and power endpoints."""

from uma_openapi.openapi.config import FeatureFlags
from uma_openapi.openapi.paths._builders import (
    API_PREFIX,
    enveloped_list,
    enveloped_ref,
    errors,
    get,
    json_body,
    json_response,
    post,
)
from uma_openapi.schemas.providers._shared import ref

BASE = f"{API_PREFIX}/system"

# (path, summary, description, operation id, data schema)
_READINGS = (
    ("info", "Get system information", "Hostname, kernel, uptime and Unraid version", "getSystemInfo", "SystemInfo"),
    ("cpu", "Get CPU information", "CPU model, core counts, usage and load averages", "getCPUInfo", "CPUInfo"),
    ("memory", "Get memory information", "RAM totals and usage breakdown", "getMemoryInfo", "MemoryInfo"),
    ("temperature", "Get temperature data", "Sensor readings from every detected chip", "getTemperature", "TemperatureInfo"),
    ("temperatures", "Get temperature sensors", "Sensor readings with CPU and motherboard summaries", "getTemperatures", "TemperatureInfo"),
    ("fans", "Get fan information", "Fan speeds reported by the sensor chips", "getFans", "FanInfo"),
    ("gpu", "Get comprehensive GPU monitoring data", "Utilization, memory, power and clocks per GPU", "getGPUInfo", "GPUInfo"),
    ("ups", "Get UPS information", "UPS status from the apcupsd daemon", "getUPSInfo", "UPSInfo"),
    ("network", "Get network information", "Interface addresses, link state and traffic counters", "getNetworkInfo", "NetworkInfo"),
    ("filesystems", "Get filesystem information", "Mounted filesystems with usage", "getFilesystems", "FilesystemInfo"),
)


def _power(action: str, verb: str) -> dict:
    return post(
        f"{verb} system",
        f"{verb} the Unraid server. Running containers and VMs are stopped first unless forced.",
        f"{action}System",
        "System",
        {
            "200": json_response(f"System {action} initiated", ref("SystemOperationResponse")),
            **errors("400", "401", "403", "409", "500"),
        },
        parameters=["ForceParameter", "TimeoutParameter"],
    )


def get_system_paths(features: FeatureFlags) -> dict:
    paths = {
        f"{BASE}/{path}": get(
            summary,
            description,
            operation_id,
            "System",
            {"200": json_response(f"{schema} retrieved successfully", enveloped_ref(schema)), **errors("401", "500")},
        )
        for path, summary, description, operation_id, schema in _READINGS
    }

    if features.metrics:
        paths[f"{BASE}/resources"] = get(
            "Get system resources",
            "Combined CPU, memory, disk and network usage snapshot",
            "getSystemResources",
            "System",
            {"200": json_response("Resource usage retrieved successfully", enveloped_ref("SystemResources")), **errors("401", "500")},
        )

    paths[f"{BASE}/logs"] = get(
        "Get system logs",
        "Paginated syslog entries with level and time filters",
        "getSystemLogs",
        "System",
        {"200": json_response("Log entries retrieved successfully", enveloped_list("LogEntry")), **errors("400", "401", "500")},
        parameters=["PageParameter", "LimitParameter", "LogLevelParameter", "SinceParameter", "UntilParameter"],
    )
    paths[f"{BASE}/logs/all"] = get(
        "Get all system logs",
        "Tail of every log file the agent knows about",
        "getAllSystemLogs",
        "System",
        {"200": json_response("Log files retrieved successfully", enveloped_ref("SystemLogsAll")), **errors("401", "500")},
        parameters=["LogLinesParameter"],
    )
    paths[f"{BASE}/scripts"] = get(
        "List system scripts",
        "User scripts installed through the User Scripts plugin",
        "listSystemScripts",
        "System",
        {"200": json_response("Scripts retrieved successfully", enveloped_list("SystemScript")), **errors("401", "500")},
    )
    paths[f"{BASE}/scripts/{{id}}"] = get(
        "Get system script details",
        "Definition and last run state of one user script",
        "getSystemScript",
        "System",
        {"200": json_response("Script retrieved successfully", enveloped_ref("SystemScript")), **errors("401", "404", "500")},
        parameters=["ScriptIDParameter"],
    )
    paths[f"{BASE}/execute"] = post(
        "Execute system command",
        "Run a shell command on the host and capture its output",
        "executeCommand",
        "System",
        {
            "200": json_response("Command finished", ref("ExecuteResponse")),
            **errors("400", "401", "403", "500"),
        },
        request_body=json_body("ExecuteRequest"),
    )
    paths[f"{BASE}/reboot"] = _power("reboot", "Reboot")
    paths[f"{BASE}/shutdown"] = _power("shutdown", "Shutdown")
    return paths
