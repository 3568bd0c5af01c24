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

"""A semantic version mostly following the rules at https://semver.org.

The major.minor.patch numbering scheme is loosened: any number of ordinals is
allowed. If minor or patch is not supplied, the minor and patch attributes
are -1.
"""

import re
from collections.abc import Iterable

import semver

VERSION_PATTERN = re.compile(
    r"(?P<ordinals>(?:0|[1-9][0-9]*)(?:\.(?:0|[1-9][0-9]*))*)"
    r"(?:-(?P<pre_release>[0-9A-Za-z.-]*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z.-]*))?"
)


class FormatError(ValueError):
    """Raised when a string is not a proper semantic version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"{version} is not a proper semantic version")
        self.version = version


def _pre_release_tokens(pre_release: str) -> list[str]:
    # empty tokens ("alpha..1", trailing ".") carry no ordering information
    return [token for token in pre_release.split(".") if token]


def _compare_tokens(left: str, right: str) -> int:
    """Compare two pre-release tokens; numbers are ordered before words."""
    left_numeric = left.isdigit()
    right_numeric = right.isdigit()
    if left_numeric and right_numeric:
        return int(left) - int(right)
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    return (left > right) - (left < right)


class Version:
    def __init__(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("Version must be a string")

        m = VERSION_PATTERN.fullmatch(s)
        if not m:
            raise FormatError(s)

        self._raw = m.group(0)
        self._ordinals = tuple(int(o) for o in m.group("ordinals").split("."))
        self._pre_release: str | None = m.group("pre_release")
        self._metadata: str | None = m.group("metadata")

        try:
            self._semver = semver.Version.parse(s)
        except ValueError:
            self._semver = None

    @classmethod
    def parse(cls, s: str | None) -> "Version | None":
        """Parse a version string; a missing string gives a missing version."""
        if s is None:
            return None
        return cls(s)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def ordinals(self) -> tuple[int, ...]:
        return self._ordinals

    @property
    def major(self) -> int:
        """The major version, X of X.Y.Z"""
        return self._ordinals[0]

    @property
    def minor(self) -> int:
        """The minor version, Y of X.Y.Z; -1 when not given."""
        return self._ordinals[1] if len(self._ordinals) > 1 else -1

    @property
    def patch(self) -> int:
        """The patch version, Z of X.Y.Z; -1 when not given."""
        return self._ordinals[2] if len(self._ordinals) > 2 else -1

    @property
    def pre_release(self) -> str | None:
        """Suffix after the first minus, e.g. SNAPSHOT of 1.2.3-SNAPSHOT"""
        return self._pre_release

    @property
    def metadata(self) -> str | None:
        """Suffix after the plus, e.g. exp.sha.5114f85 of 1.2.3+exp.sha.5114f85"""
        return self._metadata

    @property
    def semver(self) -> semver.Version | None:
        """The strict semver view, or None if the version is not strict semver."""
        return self._semver

    def is_supported(self, expected: "Version") -> bool:
        """Does this version satisfy the minimum requirement `expected`?

        The major version must match exactly; the remaining ordinals and the
        pre-release only need to be at least the expected ones. Metadata is
        ignored.
        """
        if not isinstance(expected, Version):
            raise TypeError("expected must be a Version")

        if self._ordinals[0] != expected._ordinals[0]:
            return False

        for i in range(1, len(self._ordinals)):
            if i == len(expected._ordinals):
                return True
            if self._ordinals[i] != expected._ordinals[i]:
                return self._ordinals[i] > expected._ordinals[i]

        if len(self._ordinals) < len(expected._ordinals):
            return False

        if self._pre_release is None or expected._pre_release is None:
            return self._pre_release is None
        return self._pre_release_supports(expected._pre_release)

    def _pre_release_supports(self, expected: str) -> bool:
        actual_tokens = _pre_release_tokens(self._pre_release or "")
        expected_tokens = _pre_release_tokens(expected)

        for actual, wanted in zip(actual_tokens, expected_tokens):
            diff = _compare_tokens(actual, wanted)
            if diff != 0:
                return diff > 0

        return len(actual_tokens) >= len(expected_tokens)

    def find_supported(
        self, expected_versions: Iterable["Version"]
    ) -> "Version | None":
        """Return the first of `expected_versions` this version supports."""
        for expected in expected_versions:
            if self.is_supported(expected):
                return expected
        return None

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        if self._semver is not None and other._semver is not None:
            return self._semver < other._semver
        else:
            return self._raw < other._raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        # Note: this intentionally compares the raw strings, metadata included.
        # "1.0.0+a" and "1.0.0+b" support each other but are different versions.
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Version({self._raw!r})"
