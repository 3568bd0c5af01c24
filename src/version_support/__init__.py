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

from dataclasses import dataclass

from .matcher import VersionMatcher
from .version import FormatError, Version

__all__ = ["ComponentVersion", "FormatError", "Version", "VersionMatcher"]


@dataclass
class ComponentVersion:
    # File name of the archive, e.g. slf4j-api-1.7.30.jar
    name: str
    version: Version

    def __lt__(self, other: "ComponentVersion") -> bool:
        if self.version == other.version:
            return self.name < other.name
        return self.version < other.version
