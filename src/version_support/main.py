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

import argparse
import os
import sys

from . import ComponentVersion
from .gh_logging import Logger
from .jar_versions import JarVersions
from .matcher import VersionMatcher
from .version import FormatError, Version

log = Logger(__name__)

REQUIRED_ENV = "VERSION_SUPPORT_REQUIRED"


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check that a jar supports one of the required versions."
    )
    parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="VERSION",
        help=(
            "A supported version; may be given several times. "
            f"Defaults to the comma-separated ${REQUIRED_ENV}."
        ),
    )
    parser.add_argument(
        "--principal",
        type=str,
        default=None,
        help="File name of the jar to check. Required if more than one jar is found.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Warn if the version of the checked jar is not a strict semantic version.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Jar files or directories containing jars.",
    )
    return parser.parse_args(args)


def get_required_versions(args: argparse.Namespace) -> list[str]:
    """Get the supported versions from CLI or environment.

    Tries sources in order:
    1. --require CLI arguments
    2. VERSION_SUPPORT_REQUIRED environment variable
    """
    if args.require:
        log.debug("Using required versions from command-line arguments.")
        return list(args.require)
    elif required := os.getenv(REQUIRED_ENV):
        log.debug("Using required versions from environment variable.")
        return [v.strip() for v in required.split(",") if v.strip()]
    else:
        return []


def build_matcher(required: list[str]) -> VersionMatcher:
    if not required:
        log.fatal(f"No required version given; use --require or ${REQUIRED_ENV}.")
    try:
        return VersionMatcher.of(required[0], required[1:])
    except FormatError as e:
        log.fatal(f"Invalid required version: {e}")


def select_principal(jars: JarVersions, principal: str | None) -> tuple[str, Version]:
    """Remove the jar to check from the inventory and return its version."""
    if principal is None:
        if len(jars.dependent_jars) != 1:
            log.fatal(
                f"Found {len(jars.dependent_jars)} versioned jars; "
                "use --principal to select the one to check."
            )
        principal = next(iter(jars.dependent_jars))

    try:
        version = jars.remove_principal(principal)
    except FormatError as e:
        log.fatal(f"{principal}: {e}")

    if version is None:
        log.fatal(f"No version information found for {principal}.")
    return principal, version


def check_version(
    matcher: VersionMatcher, name: str, actual: Version, strict: bool
) -> None:
    """Check one component against the matcher; a mismatch is logged as error."""
    if strict and actual.semver is None:
        log.warning(f"{name}: {actual} is not a strict semantic version")

    if (matched := matcher.find_matching_version(actual)) is not None:
        log.ok(f"{name}: {actual} supports {matched}")
    else:
        log.error(f"{name}: {matcher.error_message(actual)}")


def list_dependencies(jars: JarVersions) -> None:
    components = sorted(
        ComponentVersion(name=name, version=version)
        for name, version in jars.versions().items()
    )
    for component in components:
        log.info(f"Dependency {component.name} at {component.version}")


def main(args: list[str]) -> None:
    """Main entry point.

    Reads the jar versions, checks the principal jar against the required
    versions and lists the remaining jars.
    """
    p = parse_args(args)
    matcher = build_matcher(get_required_versions(p))
    jars = JarVersions(p.paths)
    name, actual = select_principal(jars, p.principal)

    check_version(matcher, name, actual, p.strict)
    list_dependencies(jars)

    if log.errors:
        log.fatal(f"Completed with {len(log.errors)} errors.")
    # Only warnings of the check itself count; unreadable jars do not fail the run
    if log.warnings:
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


if __name__ == "__main__":
    main(args=sys.argv[1:])
