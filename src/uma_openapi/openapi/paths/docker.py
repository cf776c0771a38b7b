"""Docker container, image and network endpoints."""

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

BASE = f"{API_PREFIX}/docker"

# (action, operation id verb, extra parameters, conflict possible)
_CONTAINER_ACTIONS = (
    ("start", "Start", ["TimeoutParameter"], True),
    ("stop", "Stop", ["ForceParameter", "TimeoutParameter"], True),
    ("restart", "Restart", ["TimeoutParameter"], False),
    ("pause", "Pause", [], True),
    ("resume", "Resume", [], True),
)


def get_docker_paths(features: FeatureFlags) -> dict:
    paths = {
        f"{BASE}/containers": get(
            "List Docker containers",
            "Retrieve a list of Docker containers with optional filtering and pagination",
            "listContainers",
            "Docker",
            {
                "200": json_response("List of containers retrieved successfully", enveloped_list("ContainerInfo")),
                **errors("400", "401", "500"),
            },
            parameters=[
                "PageParameter", "LimitParameter", "AllContainersParameter",
                "StatusFilterParameter", "VerboseParameter",
            ],
        ),
        f"{BASE}/containers/{{id}}": get(
            "Get container information",
            "Retrieve detailed information about a specific Docker container",
            "getContainer",
            "Docker",
            {
                "200": json_response("Container information retrieved successfully", enveloped_ref("ContainerInfo")),
                **errors("400", "401", "404", "500"),
            },
            parameters=["ContainerIDParameter", "VerboseParameter"],
        ),
    }
    for action, verb, extra, conflicts in _CONTAINER_ACTIONS:
        statuses = ("400", "401", "403", "404", "409", "500") if conflicts else ("400", "401", "403", "404", "500")
        paths[f"{BASE}/containers/{{id}}/{action}"] = post(
            f"{verb} container",
            f"{verb} a Docker container",
            f"{action}Container",
            "Docker",
            {
                "200": json_response(f"Container {action} completed", ref("ContainerOperationResponse")),
                **errors(*statuses),
            },
            parameters=["ContainerIDParameter", *extra],
        )

    if features.bulk_operations:
        for action, verb, _, _ in _CONTAINER_ACTIONS:
            paths[f"{BASE}/containers/bulk/{action}"] = post(
                f"{verb} multiple containers",
                f"{verb} several Docker containers in one request; each result is reported separately",
                f"bulk{verb}Containers",
                "Docker",
                {
                    "200": json_response(f"Bulk {action} completed", ref("BulkOperationResponse")),
                    **errors("400", "401", "403", "500"),
                },
                request_body=json_body("BulkOperationRequest"),
            )

    paths[f"{BASE}/images"] = get(
        "List Docker images",
        "Retrieve the Docker images present on the host",
        "listImages",
        "Docker",
        {"200": json_response("Images retrieved successfully", enveloped_list("DockerImage")), **errors("401", "500")},
    )
    paths[f"{BASE}/networks"] = get(
        "List Docker networks",
        "Retrieve the Docker networks defined on the host",
        "listNetworks",
        "Docker",
        {"200": json_response("Networks retrieved successfully", enveloped_list("DockerNetwork")), **errors("401", "500")},
    )
    paths[f"{BASE}/info"] = get(
        "Get Docker information",
        "Docker engine version, resource totals and daemon settings",
        "getDockerInfo",
        "Docker",
        {"200": json_response("Docker information retrieved successfully", enveloped_ref("DockerInfo")), **errors("401", "500")},
    )
    return paths
