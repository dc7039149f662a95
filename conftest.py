#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os.path
import sys
import pytest


here = os.path.dirname(__file__)
sys.path.insert(0, here)


@pytest.fixture(autouse=True)
def chdir_root(monkeypatch):
    # AppTest resolves page scripts relative to the working directory
    monkeypatch.chdir(here)
