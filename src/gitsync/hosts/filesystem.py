"""Editor host for VS Code-family editors (Cursor, VS Code, VSCodium).

User settings are read from and written to ``settings.json``; extensions are
managed by shelling out to the editor's command-line binary.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import JsonValue

from gitsync.contracts.exceptions import HostError
from gitsync.contracts.host import EditorHost
from gitsync.persistence.jsonc import loads_jsonc
from gitsync.snapshot.allowlist import flatten_settings

_LOG = logging.getLogger(__name__)


@dataclass
class CompletedProcess:
    """Result of an editor CLI invocation."""

    returncode: int
    stdout: str
    stderr: str


class EditorCli:
    """Async wrapper around the editor's command-line binary."""

    def __init__(self, command: str = "cursor") -> None:
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    async def run(self, args: list[str], *, check: bool = True) -> CompletedProcess:
        """Execute ``<command> <args>`` asynchronously.

        Raises:
            HostError: If the binary cannot be started, or if check=True and
                the command fails.
        """
        cmd = [self._command, *args]
        _LOG.debug("Running: %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise HostError(f"Failed to execute {self._command}: {exc}") from exc

        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CompletedProcess(
            returncode=proc.returncode or 0,
            stdout=stdout_bytes.decode(errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode(errors="replace") if stderr_bytes else "",
        )
        if check and result.returncode != 0:
            raise HostError(f"{self._command} command failed: {' '.join(args)}\n{result.stderr.strip()}")
        return result


class FileSystemEditorHost(EditorHost):
    def __init__(self, *, settings_path: Path, cli: EditorCli | None = None) -> None:
        self._settings_path = settings_path
        self._cli = cli or EditorCli()

    async def read_settings(self) -> dict[str, JsonValue]:
        return flatten_settings(self._load_raw_settings())

    async def update_setting(self, key: str, value: JsonValue) -> None:
        raw = self._load_raw_settings()
        raw[key] = value
        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)
            self._settings_path.write_text(json.dumps(raw, indent=4), encoding="utf-8")
        except OSError as exc:
            raise HostError(f"Failed to write {self._settings_path}: {exc}", subject=key) from exc

    async def installed_extensions(self) -> set[str]:
        # --list-extensions never reports built-in extensions.
        result = await self._cli.run(["--list-extensions"])
        return {line.strip() for line in result.stdout.splitlines() if line.strip()}

    async def install_extension(self, extension_id: str) -> None:
        await self._run_for(extension_id, ["--install-extension", extension_id])

    async def uninstall_extension(self, extension_id: str) -> None:
        await self._run_for(extension_id, ["--uninstall-extension", extension_id])

    async def _run_for(self, extension_id: str, args: list[str]) -> None:
        try:
            await self._cli.run(args)
        except HostError as exc:
            raise HostError(str(exc), subject=extension_id) from exc

    def _load_raw_settings(self) -> dict[str, Any]:
        if not self._settings_path.exists():
            return {}
        try:
            payload = loads_jsonc(self._settings_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise HostError(f"Cannot read editor settings {self._settings_path}: {exc}") from exc
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise HostError(f"Editor settings {self._settings_path} must contain a JSON object")
        return payload
