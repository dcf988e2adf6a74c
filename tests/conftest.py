# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azure_oauth

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clean_azure_env() -> Generator[None, None, None]:
    """
    Removes COREASON_AZURE_* variables from the environment so settings tests
    only see what they set themselves.
    """
    with patch.dict(os.environ):
        for key in list(os.environ):
            if key.upper().startswith("COREASON_AZURE_"):
                del os.environ[key]
        yield
