"""Identification of the project release and of the source it was built from."""

from __future__ import annotations

import os

_PROJECT_VERSION = "0.2.1"
_UNKNOWN_SOURCE = "NoSourceCodeIdentity_CantRunGitDescribe_!!"
_SOURCE_IDENTITY_VARIABLE = "ENGABRA_SOURCE_IDENTITY"


def project_version() -> str:
    """Project version identifier."""
    return _PROJECT_VERSION


def source_identity() -> str:
    """Source code identifier, as supplied by the build environment.

    The identifier is taken from the ENGABRA_SOURCE_IDENTITY environment
    variable; without it a marker for an unknown source is returned.
    """
    identity = os.environ.get(_SOURCE_IDENTITY_VARIABLE, "").strip()
    return identity or _UNKNOWN_SOURCE