"""Shared test fixtures for podlint."""

from __future__ import annotations

import pytest

from podlint.parser.loader import TrackedLoader
from podlint.parser.validator import PodSpecValidator
from podlint.service.linter import PodLinter


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def validator() -> PodSpecValidator:
    return PodSpecValidator()


@pytest.fixture
def linter() -> PodLinter:
    return PodLinter()


VALID_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
spec:
  os:
    name: linux
  containers:
    - name: app
      image: nginx:1.25
      readinessProbe:
        httpGet:
          path: /healthz
          port: 8080
      resources:
        limits:
          cpu: 2
          memory: 512Mi
        requests:
          cpu: 1
          memory: 256Mi
    - name: sidecar
      image: busybox
"""

# Line numbers are referenced by the tests; keep the layout stable.
INVALID_POD_YAML = """\
apiVersion: v1
kind: Pod
spec:
  os: macos
  containers:
    - name: app
      readinessProbe:
        httpGet:
          port: 70000
      resources:
        limits:
          cpu: "2"
        requests:
          cpu: 1.5
    - name: worker
      readinessProbe:
        httpGet:
          port: abc
"""
