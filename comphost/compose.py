"""
compose.py

docker compose and docker network invocations for a cloned project.
"""

from __future__ import annotations

from pathlib import Path

from .models import CmdResult
from .settings import DOCKER_BIN
from .utils_run import Runner, run_cmd


def network_exists(network: str, run: Runner = run_cmd) -> bool:
    return run([DOCKER_BIN, "network", "inspect", network]).ok


def network_create(network: str, run: Runner = run_cmd) -> CmdResult:
    return run([DOCKER_BIN, "network", "create", network])


def network_connect(network: str, container_id: str, run: Runner = run_cmd) -> CmdResult:
    return run([DOCKER_BIN, "network", "connect", network, container_id])


def ensure_network(network: str, run: Runner = run_cmd) -> tuple[bool, CmdResult | None]:
    """
    make sure the bridge network exists.

    returns (created, failure): created is True when the network had to be made,
    failure is the failed create result or None.
    """
    if network_exists(network, run=run):
        return False, None
    res = network_create(network, run=run)
    if not res.ok:
        return False, res
    return True, None


def compose_up(project: Path, run: Runner = run_cmd) -> CmdResult:
    return run([DOCKER_BIN, "compose", "up", "--detach"], cwd=project)


def compose_container_ids(project: Path, run: Runner = run_cmd) -> tuple[list[str], CmdResult]:
    res = run([DOCKER_BIN, "compose", "ps", "--format", "{{.ID}}"], cwd=project)
    ids = res.stdout.split() if res.ok else []
    return ids, res


def compose_down(project: Path, run: Runner = run_cmd) -> CmdResult:
    return run([DOCKER_BIN, "compose", "down"], cwd=project)
