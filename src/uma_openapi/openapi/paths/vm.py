"""Virtual machine lifecycle endpoints."""

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

BASE = f"{API_PREFIX}/vms"

_VM_ACTIONS = (
    ("start", "Start", []),
    ("stop", "Stop", ["ForceParameter", "TimeoutParameter"]),
    ("restart", "Restart", ["TimeoutParameter"]),
    ("pause", "Pause", []),
    ("resume", "Resume", []),
)

_BULK_ACTIONS = (("start", "Start"), ("stop", "Stop"), ("restart", "Restart"))


def get_vm_paths(features: FeatureFlags) -> dict:
    paths = {
        BASE: get(
            "List virtual machines",
            "Retrieve the libvirt domains defined on the host",
            "listVMs",
            "VMs",
            {
                "200": json_response("Virtual machines retrieved successfully", enveloped_list("VMInfo")),
                **errors("400", "401", "500"),
            },
            ["PageParameter", "LimitParameter", "StatusFilterParameter", "VerboseParameter"],
        ),
        f"{BASE}/{{id}}": get(
            "Get virtual machine information",
            "Configuration and state of one virtual machine",
            "getVM",
            "VMs",
            {
                "200": json_response("Virtual machine retrieved successfully", enveloped_ref("VMInfo")),
                **errors("400", "401", "404", "500"),
            },
            ["VMIDParameter", "VerboseParameter"],
        ),
    }
    for action, verb, extra in _VM_ACTIONS:
        paths[f"{BASE}/{{id}}/{action}"] = post(
            f"{verb} virtual machine",
            f"{verb} a virtual machine",
            f"{action}VM",
            "VMs",
            {
                "200": json_response(f"Virtual machine {action} completed", ref("VMOperationResponse")),
                **errors("400", "401", "403", "404", "409", "500"),
            },
            ["VMIDParameter", *extra],
        )

    if features.metrics:
        paths[f"{BASE}/{{id}}/stats"] = get(
            "Get virtual machine statistics",
            "CPU, memory, disk and network counters for a running virtual machine",
            "getVMStats",
            "VMs",
            {
                "200": json_response("Statistics retrieved successfully", enveloped_ref("VMStats")),
                **errors("401", "404", "500"),
            },
            ["VMIDParameter"],
        )

    if features.bulk_operations:
        for action, verb in _BULK_ACTIONS:
            paths[f"{BASE}/bulk/{action}"] = post(
                f"{verb} multiple virtual machines",
                f"{verb} several virtual machines in one request; each result is reported separately",
                f"bulk{verb}VMs",
                "VMs",
                {
                    "200": json_response(f"Bulk {action} completed", ref("BulkVMResponse")),
                    **errors("400", "401", "403", "500"),
                },
                request_body=json_body("BulkVMOperation"),
            )
    return paths
