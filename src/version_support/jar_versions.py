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
from collections.abc import Iterable
from pathlib import Path

from .gh_logging import Logger
from .version import FormatError, Version
from .version_extractor import extract_version

log = Logger(__name__)


def _jar_files(entries: Iterable[Path]) -> list[Path]:
    """Expand directories into the jars they contain."""
    files: list[Path] = []
    for entry in entries:
        if entry.is_dir():
            files.extend(sorted(entry.glob("*.jar")))
        elif entry.exists():
            files.append(entry)
        else:
            log.warning(f"{entry} does not exist; skipping", file=entry)
    return files


class JarVersions:
    """Versions of the jars on a classpath or in plugin directories.

    Each jar is keyed by its file name; the value is the raw version string
    formatted as `<version>+<groupId>-<artifactId>`.
    """

    def __init__(self, entries: Iterable[Path | str]):
        versions: dict[str, str] = {}
        for file in _jar_files(Path(e) for e in entries):
            if version := extract_version(file):
                versions[file.name] = version
        self.dependent_jars: dict[str, str] = dict(sorted(versions.items()))

    @classmethod
    def from_classpath(cls, classpath: str) -> "JarVersions":
        return cls(e for e in classpath.split(os.pathsep) if e)

    def remove_principal(self, principal: Path | str) -> Version | None:
        """Remove the principal jar from the dependent jars.

        Returns the version of the principal jar; None if the jar is unknown.
        """
        version = self.dependent_jars.pop(Path(principal).name, None)
        return Version.parse(version)

    def versions(self) -> dict[str, Version]:
        """Parsed versions of all jars; unparseable versions are skipped."""
        parsed: dict[str, Version] = {}
        for name, raw in self.dependent_jars.items():
            try:
                parsed[name] = Version(raw)
            except FormatError as e:
                log.warning(f"{name}: {e}")
        return parsed
