"""Shared fixtures for oupicker tests."""

import pytest

from oupicker.config import Config
from oupicker.paths import PathIndex

SAMPLE_DNS = [
    "ou=Sales,dc=a,dc=b",
    "ou=East,ou=Sales,dc=a,dc=b",
    "ou=West,ou=Sales,dc=a,dc=b",
    "ou=Boston,ou=East,ou=Sales,dc=a,dc=b",
    "ou=IT,dc=a,dc=b",
    "ou=Ops,dc=a,dc=b",
]


@pytest.fixture
def sample_dns():
    return list(SAMPLE_DNS)


@pytest.fixture
def sample_paths():
    """Prefix-stripped, sorted display paths as the directory returns them."""
    return sorted(dn[3:] for dn in SAMPLE_DNS)


@pytest.fixture
def sample_index(sample_paths):
    return PathIndex.build(sample_paths)


@pytest.fixture
def config_paths(tmp_path, monkeypatch):
    """Point the config file at a temp directory and clear LDAP variables."""
    config_dir = tmp_path / ".config" / "oupicker"
    monkeypatch.setattr("oupicker.config.get_config_dir", lambda: config_dir)
    monkeypatch.setattr("oupicker.config.get_config_path", lambda: config_dir / "config.toml")
    monkeypatch.setattr(
        "oupicker.config.get_default_data_dir", lambda: tmp_path / ".local" / "share" / "oupicker"
    )
    monkeypatch.delenv("LDAP_SERVER", raising=False)
    monkeypatch.delenv("BASE_DN", raising=False)
    monkeypatch.chdir(tmp_path)
    return config_dir


@pytest.fixture
def sample_config(tmp_path):
    """Create a Config pointing at a mock directory."""
    return Config(
        ldap_server="ldap.test:389",
        base_dn="dc=a,dc=b",
        log_file=tmp_path / "oupicker.log",
    )
