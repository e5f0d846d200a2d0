"""
Shared test fixtures for setterkit.
"""

import os
import sys

import pytest
from dotenv import load_dotenv

# Ensure project root is on sys.path so 'setterkit' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

# Load environment variables
load_dotenv()


@pytest.fixture
def validated():
    from targets import Validated
    return Validated()


@pytest.fixture
def strict_config(monkeypatch):
    """Force strict bool results regardless of the environment."""
    from setterkit.infrastructure.capabilities.config import Config
    monkeypatch.setattr(Config, "STRICT_BOOL", True)
    return Config
