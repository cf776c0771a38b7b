"""Array, disk, parity, cache and ZFS endpoints."""

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

BASE = f"{API_PREFIX}/storage"


def _read(summary: str, description: str, operation_id: str, data: dict, parameters=None) -> dict:
    return get(
        summary,
        description,
        operation_id,
        "Storage",
        {"200": json_response("Retrieved successfully", data), **errors("401", "500")},
        parameters,
    )


def _array_operation(action: str) -> dict:
    return post(
        f"{action.capitalize()} Unraid array",
        f"{action.capitalize()} the Unraid array. Runs as an orchestrated sequence and reports the resulting state.",
        f"{action}Array",
        "Storage",
        {
            "200": json_response(f"Array {action} completed", ref("ArrayStatus")),
            **errors("400", "401", "403", "409", "500"),
        },
        request_body=json_body("ArrayOperation"),
    )


def get_storage_paths(features: FeatureFlags) -> dict:
    paths = {
        f"{BASE}/array": _read(
            "Get array information",
            "Array state, capacity and member disks",
            "getArrayInfo",
            enveloped_ref("ArrayInfo"),
        ),
        f"{BASE}/array/start": _array_operation("start"),
        f"{BASE}/array/stop": _array_operation("stop"),
        f"{BASE}/disks": _read(
            "List storage disks",
            "Every disk known to Unraid, optionally with SMART and temperature data",
            "listDisks",
            enveloped_list("DiskInfo"),
            ["SMARTParameter", "TemperatureParameter", "VerboseParameter"],
        ),
        f"{BASE}/disks/{{id}}": get(
            "Get disk information",
            "Details of one disk, optionally with SMART and temperature data",
            "getDisk",
            "Storage",
            {
                "200": json_response("Disk information retrieved successfully", enveloped_ref("DiskInfo")),
                **errors("400", "401", "404", "500"),
            },
            ["DiskIDParameter", "SMARTParameter", "TemperatureParameter"],
        ),
        f"{BASE}/overview": _read(
            "Get storage overview",
            "Array, cache and boot device summary in one response",
            "getStorageOverview",
            enveloped_ref("StorageOverview"),
        ),
        f"{BASE}/parity": _read(
            "Get parity information",
            "Parity disks and last check results",
            "getParityInfo",
            enveloped_ref("ParityInfo"),
        ),
        f"{BASE}/parity/check": _read(
            "Get parity check status",
            "Progress of the running parity check, if any",
            "getParityCheck",
            enveloped_ref("ParityCheckInfo"),
        ),
        f"{BASE}/cache": _read(
            "Get cache information",
            "Cache pool disks and usage",
            "getCacheInfo",
            enveloped_ref("CacheInfo"),
        ),
        f"{BASE}/temperatures": _read(
            "Get disk temperatures",
            "Current temperature of every disk that reports one",
            "getDiskTemperatures",
            enveloped_list("DiskTemperature"),
        ),
    }

    if features.zfs:
        paths[f"{BASE}/zfs/pools"] = _read(
            "List ZFS pools",
            "ZFS pools with health, capacity and fragmentation",
            "listZFSPools",
            enveloped_list("ZFSPoolInfo"),
        )
        paths[f"{BASE}/zfs/datasets"] = _read(
            "List ZFS datasets",
            "ZFS datasets with usage and mount points",
            "listZFSDatasets",
            enveloped_list("ZFSDatasetInfo"),
        )
    return paths
