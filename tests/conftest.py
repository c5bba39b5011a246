"""Shared workflow fixtures."""

from __future__ import annotations

import pytest

NODE_CI = """\
name: CI
on: [push]
jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - uses: actions/setup-node@v4
        with:
          node-version: "20"
      - run: npm ci
      - run: npm test
"""

E2E_WORKFLOW = """\
jobs:
  test:
    steps:
      - run: npm test
      - uses: actions/checkout@v4
      - uses: actions/upload-artifact@v4
        name: Upload
"""


@pytest.fixture
def node_ci() -> str:
    return NODE_CI


@pytest.fixture
def e2e_workflow() -> str:
    return E2E_WORKFLOW
