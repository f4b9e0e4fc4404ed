"""Constants shared across vcsdriver modules."""

from __future__ import annotations

#: Name under which the git backend is registered.
GIT_DRIVER_NAME = "git"

#: Default git executable.
DEFAULT_GIT_EXECUTABLE = "git"

#: Git's metadata directory inside a working copy.
GIT_METADATA_DIR = ".git"

#: Marker file git writes when a working copy has truncated history.
GIT_SHALLOW_MARKER = "shallow"

#: Remote name every working copy fetches from.
DEFAULT_REMOTE = "origin"

#: Prefix for all vcsdriver environment variables.
ENV_PREFIX = "VCSDRIVER_"

#: Project-level configuration file name.
PROJECT_CONFIG_FILENAME = "vcsdriver.yaml"
