"""
commands.py

one function per subcommand. each takes the store explicitly and reports per-item
outcomes through a Report; a failing item never stops the remaining ones.
prompting is done up front by the collect_* helpers so the mutations can run unattended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import compose, vcs
from .config_store import ConfigStore
from .models import CmdResult, Configuration
from .prompts import PromptSource
from .settings import NETWORK_NAME
from .utils_run import Runner, run_cmd

logger = logging.getLogger(__name__)


@dataclass
class Report:
    out: Console
    err: Console
    failures: int = 0

    def info(self, msg: str) -> None:
        self.out.print(escape(msg), highlight=False, emoji=False)

    def error(self, msg: str, detail: str = "") -> None:
        self.failures += 1
        self.err.print(f"[red]{escape(msg)}[/red]", highlight=False, emoji=False)
        if detail.strip():
            self.err.print(escape(detail.rstrip()), highlight=False, emoji=False)

    def failed(self, msg: str, res: CmdResult) -> None:
        self.error(msg, res.stderr)

    @property
    def ok(self) -> bool:
        return self.failures == 0


# input collection


def collect_urls(names: list[str], prompt: PromptSource) -> dict[str, str]:
    return {name: prompt.ask(f"Enter URL for '{name}'").strip() for name in names}


def collect_clone_dir(prompt: PromptSource) -> str:
    return prompt.ask("Enter the path where you want to clone").strip()


# mutations


def add(store: ConfigStore, urls: dict[str, str], report: Report) -> None:
    for name, url in urls.items():
        store.put(name, Configuration(active=True, url=url))
        report.info(f"Configuration '{name}' added.")


def set_active(store: ConfigStore, names: list[str], active: bool, report: Report) -> None:
    state = "on" if active else "off"
    for name in names:
        cfg = store.get(name)
        if cfg is None:
            report.error(f"Configuration '{name}' not found.")
            continue
        cfg.active = active
        report.info(f"Configuration '{name}' turned {state}.")


def clone(store: ConfigStore, dest: str, report: Report, run: Runner = run_cmd) -> None:
    clone_dir = Path(dest).expanduser().absolute()
    if not clone_dir.is_dir():
        report.error(f"Clone destination '{clone_dir}' is not a directory")
        return

    for name, cfg in store.active():
        target = clone_dir / name
        if target.is_dir():
            # trusted as a checkout of cfg.url without looking inside
            report.info(f"Skipping '{name}', folder already exists at '{target}'")
            cfg.clone_project(str(target))
            continue
        if target.exists():
            report.error(f"Path '{target}' exists but is not a directory")
            continue

        res = vcs.git_clone(cfg.url, name, clone_dir, run=run)
        if res.ok:
            report.info(f"Cloned '{name}' from '{cfg.url}' to '{target}'")
            cfg.clone_project(str(target))
        else:
            report.failed(f"Failed to clone '{name}' from '{cfg.url}' to '{target}'", res)


def start(store: ConfigStore, report: Report, network: str = NETWORK_NAME, run: Runner = run_cmd) -> None:
    created, failure = compose.ensure_network(network, run=run)
    if failure is not None:
        report.failed(f"Failed to create {network} network", failure)
        return
    if created:
        report.info(f"Created {network} network")

    for name, cfg in store.active():
        if cfg.clone_path is None:
            logger.debug("skipping %s: not cloned", name)
            continue
        project = Path(cfg.clone_path)

        res = compose.compose_up(project, run=run)
        if not res.ok:
            report.failed(f"Failed to start Docker Compose for '{name}'", res)
            continue
        report.info(f"Started Docker Compose for '{name}'")

        ids, ps = compose.compose_container_ids(project, run=run)
        if not ps.ok:
            report.failed(f"Failed to list containers for '{name}'", ps)
            continue

        for container_id in ids:
            res = compose.network_connect(network, container_id, run=run)
            if res.ok:
                report.info(f"Attached container '{container_id}' to {network} network for '{name}'")
            else:
                report.failed(f"Failed to attach container '{container_id}' to {network} network for '{name}'", res)


def stop(store: ConfigStore, report: Report, run: Runner = run_cmd) -> None:
    for name, cfg in store.active():
        if cfg.clone_path is None:
            continue
        res = compose.compose_down(Path(cfg.clone_path), run=run)
        if res.ok:
            report.info(f"Stopped Docker Compose for '{name}'")
        else:
            report.failed(f"Failed to stop Docker Compose for '{name}'", res)


# read-only


def list_names(store: ConfigStore) -> list[str]:
    return store.names()


def describe(store: ConfigStore) -> Table:
    table = Table(title="comphost configurations")
    table.add_column("name", style="bold")
    table.add_column("active")
    table.add_column("url")
    table.add_column("clone path")
    for name, cfg in store.items():
        table.add_row(
            escape(name),
            "yes" if cfg.active else "no",
            escape(cfg.url),
            escape(cfg.clone_path or "-"),
        )
    return table
