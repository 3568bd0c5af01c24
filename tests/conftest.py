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
import io
import zipfile
from pathlib import Path
from typing import Any

import pytest

from version_support.gh_logging import Logger


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.success_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(self, prefix: str, msg: str, file: Path | None = None) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "success":
            self.success_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
        elif prefix == "error":
            self.error_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


def make_jar(
    group_id: str | None = "org.slf4j",
    artifact_id: str | None = "slf4j-api",
    version: str | None = "1.7.30",
) -> bytes:
    """Build the bytes of a jar with a Maven pom.properties entry."""
    lines = ["#Created by Apache Maven 3.6.3"]
    if version is not None:
        lines.append(f"version={version}")
    if group_id is not None:
        lines.append(f"groupId={group_id}")
    if artifact_id is not None:
        lines.append(f"artifactId={artifact_id}")

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as jar:
        jar.writestr("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n")
        jar.writestr(
            f"META-INF/maven/{group_id}/{artifact_id}/pom.properties",
            "\n".join(lines) + "\n",
        )
    return buffer.getvalue()


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


@pytest.fixture
def plugin_directory(build_fake_filesystem):
    """Setup /plugins with a few Maven built jars and one broken archive."""

    def _setup(principal_version: str = "2.3.1") -> None:
        build_fake_filesystem(
            {
                "plugins": {
                    "plugin-core.jar": make_jar(
                        "org.example", "plugin-core", principal_version
                    ),
                    "slf4j-api-1.7.30.jar": make_jar(),
                    "jsr305-3.0.1.jar": make_jar(
                        "com.google.code.findbugs", "jsr305", "3.0.1"
                    ),
                    "broken.jar": b"\xca\xfe",
                    "README.txt": "not a jar",
                }
            }
        )

    return _setup
