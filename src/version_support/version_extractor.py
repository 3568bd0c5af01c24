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

"""Extract version information from Maven built jars."""

import re
import zipfile
from dataclasses import dataclass
from pathlib import Path

from .gh_logging import Logger

log = Logger(__name__)

# key, separator ('=', ':' or whitespace), value
_PROPERTY_LINE = re.compile(r"\s*([^=:\s]+)\s*[=:\s]\s*(.*)")


@dataclass(frozen=True)
class GroupArtifactVersion:
    group_id: str | None
    artifact_id: str | None
    version: str | None

    def with_meta(self) -> str:
        """The version with `<groupId>-<artifactId>` as metadata."""
        if self.group_id is None or self.artifact_id is None:
            return str(self.version)
        return f"{self.version}+{self.group_id}-{self.artifact_id}"


def parse_properties(content: str) -> dict[str, str]:
    """Parse the simple `key=value` form of a Java properties file.

    Comment lines (`#`, `!`) and blank lines are skipped. Line continuations
    and escapes are not supported; Maven does not write them to pom.properties.
    """
    properties: dict[str, str] = {}
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped[0] in "#!":
            continue
        if m := _PROPERTY_LINE.match(stripped):
            properties[m.group(1)] = m.group(2).strip()
    return properties


def _is_pom_properties(name: str) -> bool:
    return name.startswith("META-INF/") and name.endswith("/pom.properties")


def read_pom_meta(jar: zipfile.ZipFile) -> GroupArtifactVersion | None:
    """Read the GAV that Maven writes into every jar it builds."""
    for name in jar.namelist():
        if _is_pom_properties(name):
            properties = parse_properties(jar.read(name).decode("iso-8859-1"))
            return GroupArtifactVersion(
                group_id=properties.get("groupId"),
                artifact_id=properties.get("artifactId"),
                version=properties.get("version"),
            )
    return None


def extract_version(file: Path) -> str | None:
    """Extract the version and metadata from the contents of a jar.

    The metadata is formatted as `<groupId>-<artifactId>`.
    Returns None if version information cannot be extracted from the jar.
    """
    try:
        with zipfile.ZipFile(file) as jar:
            pom_meta = read_pom_meta(jar)
    except (OSError, zipfile.BadZipFile) as e:
        log.warning(f"Unable to read {file.name}: {e}", file=file)
        return None

    if pom_meta is None or pom_meta.version is None:
        log.debug(f"No pom.properties version found in {file.name}")
        return None
    return pom_meta.with_meta()
