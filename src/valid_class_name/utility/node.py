"""Utility validator backed by a Node.js helper speaking JSON lines."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from typing import IO

from valid_class_name.logging import get_logger, warn
from valid_class_name.utility.base import UtilityValidatorError

# argv: <config path> <cwd>. Prints one handshake line, then answers one
# {"id", "className"} request per line with {"id", "valid"}.
NODE_BRIDGE_SCRIPT = r"""
const path = require('path');
const readline = require('readline');
const { createRequire } = require('module');
const { pathToFileURL } = require('url');

const [configPath, cwd] = process.argv.slice(1);

function send(payload) {
  process.stdout.write(JSON.stringify(payload) + '\n');
}

async function load() {
  const requireFromCwd = createRequire(path.join(cwd, 'package.json'));
  const entry = requireFromCwd.resolve('tailwind-api-utils');
  const { TailwindUtils } = await import(pathToFileURL(entry).href);
  const utils = new TailwindUtils({ paths: [cwd] });
  if (utils.isV4) {
    await utils.loadConfig(configPath);
  } else {
    utils.loadConfigV3(configPath, { pwd: path.dirname(configPath) });
  }
  return utils;
}

async function main() {
  let utils;
  try {
    utils = await load();
  } catch (error) {
    send({ error: String((error && error.message) || error) });
    return;
  }
  send({ ready: true, version: utils.isV4 ? 'v4' : 'v3' });
  const lines = readline.createInterface({ input: process.stdin });
  for await (const line of lines) {
    if (!line.trim()) continue;
    let request;
    try {
      request = JSON.parse(line);
    } catch {
      continue;
    }
    let valid = false;
    try {
      valid = Boolean(await utils.isValidClassName(request.className));
    } catch {
      valid = false;
    }
    send({ id: request.id, valid });
  }
}

main();
"""

LOGGER = get_logger(__name__)


class NodeProcessValidator:
    """Blocking validator that round-trips each unseen class name to a helper process."""

    def __init__(self, command: Sequence[str], cwd: str) -> None:
        try:
            self._process = subprocess.Popen(
                list(command),
                cwd=cwd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                bufsize=1,
            )
        except OSError as error:
            raise UtilityValidatorError(f"Failed to start utility validator: {error}") from error
        self._results: dict[str, bool] = {}
        self._next_id = 0
        self._alive = True
        self.version: str | None = None
        self._handshake()

    def _handshake(self) -> None:
        message = self._read_message()
        if message is None:
            self.close()
            raise UtilityValidatorError("Utility validator exited before becoming ready.")
        error = message.get("error")
        if isinstance(error, str):
            self.close()
            raise UtilityValidatorError(f"Utility validator failed to load: {error}")
        if message.get("ready") is not True:
            self.close()
            raise UtilityValidatorError("Utility validator sent an unexpected handshake.")
        version = message.get("version")
        self.version = version if isinstance(version, str) else None

    def is_valid_class_name(self, class_name: str) -> bool:
        """Return the helper's verdict, memoized per class name."""
        cached = self._results.get(class_name)
        if cached is not None:
            return cached
        if not self._alive:
            return False
        request_id = self._next_id
        self._next_id += 1
        try:
            stdin = self._stream(self._process.stdin)
            stdin.write(json.dumps({"id": request_id, "className": class_name}) + "\n")
            stdin.flush()
        except OSError as error:
            self._fail("Utility validator stopped accepting requests", error)
            return False
        message = self._read_message()
        if message is None:
            self._fail("Utility validator exited unexpectedly")
            return False
        if message.get("id") != request_id:
            self._fail("Utility validator answered out of order")
            return False
        valid = message.get("valid") is True
        self._results[class_name] = valid
        return valid

    def _read_message(self) -> dict[str, object] | None:
        try:
            line = self._stream(self._process.stdout).readline()
        except OSError:
            return None
        if not line:
            return None
        try:
            payload = json.loads(line)
        except json.JSONDecodeError:
            return {}
        if not isinstance(payload, dict):
            return {}
        return payload

    def _fail(self, message: str, error: BaseException | None = None) -> None:
        warn(LOGGER, message, error)
        self.close()

    @staticmethod
    def _stream(stream: IO[str] | None) -> IO[str]:
        if stream is None:
            raise OSError("Utility validator pipe is not available.")
        return stream

    def close(self) -> None:
        """Terminate the helper process."""
        self._alive = False
        process = self._process
        try:
            if process.stdin is not None and not process.stdin.closed:
                process.stdin.close()
            process.wait(timeout=2)
        except (OSError, subprocess.TimeoutExpired):
            process.kill()
            process.wait()
        if process.stdout is not None and not process.stdout.closed:
            process.stdout.close()

    def __enter__(self) -> NodeProcessValidator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
