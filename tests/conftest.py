"""Shared fixtures."""

import pytest

from txgh_sync.config import Config

DEFAULTS = {
    "tx_project_slug": "proj",
    "tx_resource_reg": r"/<lang>/(?P<name>[^/]+)\.pot$",
    "tx_resource_lang": "en",
    "tx_resource_type": "PO",
    "tx_resource_ext": ".pot",
    "tx_target_path": r"/<lang>/\g<name>.po",
    "tx_webhook_secret": "secret",
    "github_token": "token",
    "github_owner": "octo",
    "github_repo": "app",
    "github_branch": "main",
}


@pytest.fixture
def make_config():
    """Build a Config from test defaults plus overrides."""

    def _make(**overrides) -> Config:
        return Config(**{**DEFAULTS, **overrides})

    return _make


@pytest.fixture
def config(make_config) -> Config:
    return make_config()
