# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import os
from pathlib import Path
from typing import NoReturn

GITHUB_PREFIX = {
    "debug": "debug",
    "info": "notice",
    "warning": "warning",
    "error": "error",
    "success": "notice",
}

PRETTY_PREFIX = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "success": "SUCCESS",
}


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


def _display_path(file: Path) -> Path:
    # archives given on the command line are usually below the working directory
    cwd = Path.cwd()
    if file.is_absolute() and file.is_relative_to(cwd):
        return file.relative_to(cwd)
    return file


class Logger:
    """Minimal logger that prints locally and emits annotations on GitHub Actions.

    Warnings and errors are remembered so a caller can decide on the exit
    status once all components were checked.
    """

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def _loc(self, file: Path | None) -> str:
        if file:
            file = _display_path(file)

        if is_running_in_github_actions():
            return f" file={file}" if file else ""
        return f" {file}" if file else ""

    def _print(self, prefix: str, msg: str, file: Path | None = None) -> None:
        location = self._loc(file)
        if is_running_in_github_actions():
            print(f"::{GITHUB_PREFIX.get(prefix, prefix)}{location}::{self.name} {msg}")
            return

        print(f"{PRETTY_PREFIX.get(prefix, prefix)}:{location} {self.name} {msg}")

    def debug(self, msg: str) -> None:
        self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(self, msg: str, file: Path | None = None) -> None:
        self.warnings.append(msg)
        self._print("warning", msg, file)

    def error(self, msg: str, file: Path | None = None) -> None:
        self.errors.append(msg)
        self._print("error", msg, file)

    def fatal(self, msg: str, file: Path | None = None) -> NoReturn:
        self._print("error", msg, file)
        raise SystemExit(1)
