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

from collections.abc import Iterable

from .version import Version


def _required(s: str | None, what: str) -> Version:
    if s is None:
        raise TypeError(f"{what} must not be None")
    return Version(s)


class VersionMatcher:
    """Match an actual version against one or more supported versions.

    At least one of the supported versions must be supported by the actual
    version for it to match.
    """

    def __init__(self, supported_version: str, *additional_supported_versions: str):
        self._expected_versions: tuple[Version, ...] = (
            _required(supported_version, "supported_version"),
            *(
                _required(s, "additional supported version")
                for s in additional_supported_versions
            ),
        )

    @classmethod
    def of(
        cls, supported_version: str, additional_supported_versions: Iterable[str]
    ) -> "VersionMatcher":
        """Build a matcher from a required version and a sequence of extra ones."""
        if additional_supported_versions is None:
            raise TypeError("additional_supported_versions must not be None")
        return cls(supported_version, *additional_supported_versions)

    @property
    def expected_versions(self) -> tuple[Version, ...]:
        return self._expected_versions

    def find_matching_version(self, actual: Version) -> Version | None:
        """Return the first supported version `actual` satisfies, or None."""
        return actual.find_supported(self._expected_versions)

    def error_message(self, actual: Version | str) -> str | None:
        """Explain why `actual` is not acceptable.

        Returns None if the actual version matches one of the expected
        versions; otherwise an error message listing all expected versions.
        """
        if isinstance(actual, str):
            actual = Version(actual)

        if self.find_matching_version(actual) is not None:
            return None

        expected = ", ".join(v.raw for v in self._expected_versions)
        if len(self._expected_versions) > 1:
            return f"{actual} does not support any of {expected}"
        return f"{actual} does not support {expected}"

    def __repr__(self) -> str:
        versions = ", ".join(repr(v.raw) for v in self._expected_versions)
        return f"VersionMatcher({versions})"
