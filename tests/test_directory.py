"""Tests for oupicker.directory module, against ldap3's mock strategy."""

import pytest
from ldap3 import MOCK_SYNC

from oupicker.directory import DirectoryClient, fetch_ou_paths, to_display_paths
from oupicker.errors import AuthFailure, ConnectionFailure

BIND_DN = "cn=admin,ou=Administrators,dc=a,dc=b"
PASSWORD = "s3cret"
SEARCH_FILTER = "(objectClass=organizationalUnit)"


@pytest.fixture
def client(sample_dns):
    """A connected mock client with a small directory tree."""
    client = DirectoryClient("ldap.test", client_strategy=MOCK_SYNC)
    client.connect()
    strategy = client.connection.strategy
    strategy.add_entry("dc=a,dc=b", {"objectClass": ["top", "domain"], "dc": "a"})
    strategy.add_entry(
        BIND_DN,
        {"objectClass": ["person"], "cn": "admin", "sn": "admin", "userPassword": PASSWORD},
    )
    for dn in sample_dns:
        ou = dn.split(",", 1)[0][3:]
        strategy.add_entry(dn, {"objectClass": ["top", "organizationalUnit"], "ou": ou})
    yield client
    client.close()


class TestToDisplayPaths:
    def test_strips_and_sorts(self):
        assert to_display_paths(["ou=B,dc=x", "ou=A,dc=x"]) == ["A,dc=x", "B,dc=x"]

    def test_custom_prefix_length(self):
        assert to_display_paths(["OU=B,dc=x"], prefix_length=0) == ["OU=B,dc=x"]

    def test_empty(self):
        assert to_display_paths([]) == []


class TestDirectoryClient:
    def test_connection_before_connect(self):
        with pytest.raises(ConnectionFailure):
            DirectoryClient("ldap.test").connection

    def test_bind_before_connect(self):
        with pytest.raises(ConnectionFailure):
            DirectoryClient("ldap.test").bind(BIND_DN, PASSWORD)

    def test_bind(self, client):
        client.bind(BIND_DN, PASSWORD)
        assert client.is_bound

    def test_bind_wrong_password(self, client):
        with pytest.raises(AuthFailure):
            client.bind(BIND_DN, "wrong")
        assert not client.is_bound

    def test_search_returns_ous_only(self, client, sample_dns):
        client.bind(BIND_DN, PASSWORD)
        dns = client.search_organizational_units("dc=a,dc=b", SEARCH_FILTER)
        assert sorted(dns) == sorted(sample_dns)

    def test_fetch_ou_paths(self, client, sample_paths):
        client.bind(BIND_DN, PASSWORD)
        assert fetch_ou_paths(client, "dc=a,dc=b", SEARCH_FILTER) == sample_paths

    def test_close(self, client):
        client.bind(BIND_DN, PASSWORD)
        client.close()
        assert not client.is_bound
        with pytest.raises(ConnectionFailure):
            client.connection

    def test_search_unknown_base(self, client):
        client.bind(BIND_DN, PASSWORD)
        with pytest.raises(AuthFailure, match="noSuchObject"):
            client.search_organizational_units("dc=nope,dc=zz", SEARCH_FILTER)

    def test_search_with_no_matches_is_not_an_error(self, client):
        client.bind(BIND_DN, PASSWORD)
        assert client.search_organizational_units("dc=a,dc=b", "(objectClass=device)") == []

    def test_rejected_bind_releases_connection(self, client, monkeypatch):
        released = []
        monkeypatch.setattr("oupicker.directory._unbind", released.append)
        open_connection = client.connection

        with pytest.raises(AuthFailure):
            client.bind(BIND_DN, "wrong")
        assert len(released) == 1
        assert released[0] is not open_connection
        assert client.connection is open_connection
