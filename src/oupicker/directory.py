"""LDAP access: connect, bind and list organizational units."""

from __future__ import annotations

import logging

from ldap3 import NO_ATTRIBUTES, SUBTREE, SYNC, Connection, Server
from ldap3.core.results import RESULT_SUCCESS
from ldap3.core.exceptions import LDAPException

from .errors import AuthFailure, ConnectionFailure

logger = logging.getLogger(__name__)


def _unbind(connection: Connection) -> None:
    try:
        connection.unbind()
    except LDAPException as e:
        logger.debug("Ignoring error on unbind: %s", e)


class DirectoryClient:
    """One-shot directory session used before the picker starts.

    The server is contacted in ``connect`` so an unreachable address fails
    before any credentials are requested.
    """

    def __init__(
        self,
        server_address: str,
        client_strategy: str = SYNC,
        connect_timeout: int = 10,
    ) -> None:
        self.server_address = server_address
        self.client_strategy = client_strategy
        self.connect_timeout = connect_timeout
        self._server: Server | None = None
        self._connection: Connection | None = None
        self._bound = False

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            raise ConnectionFailure("Not connected")
        return self._connection

    @property
    def is_bound(self) -> bool:
        return self._bound

    def connect(self) -> None:
        """Open a connection to the directory server."""
        try:
            self._server = Server(self.server_address, connect_timeout=self.connect_timeout)
            connection = Connection(self._server, client_strategy=self.client_strategy)
            connection.open()
        except LDAPException as e:
            raise ConnectionFailure(f"Cannot connect to {self.server_address}: {e}") from e
        self._connection = connection
        logger.info("Connected to %s", self.server_address)

    def bind(self, bind_dn: str, password: str) -> None:
        """Authenticate with a simple bind.

        Raises:
            AuthFailure: if the server rejects the credentials.
        """
        if self._server is None:
            raise ConnectionFailure("Not connected")

        connection = Connection(
            self._server,
            user=bind_dn,
            password=password,
            client_strategy=self.client_strategy,
        )
        try:
            ok = connection.bind()
        except LDAPException as e:
            logger.warning("Bind failed for %s: %s", bind_dn, e)
            _unbind(connection)
            raise AuthFailure(f"Bind failed for {bind_dn}: {e}") from e
        if not ok:
            description = (connection.result or {}).get("description", "unknown error")
            logger.warning("Bind rejected for %s: %s", bind_dn, description)
            _unbind(connection)
            raise AuthFailure(f"Bind rejected for {bind_dn}: {description}")

        self._close_connection()
        self._connection = connection
        self._bound = True
        logger.info("Bound as %s", bind_dn)

    def search_organizational_units(self, base_dn: str, search_filter: str) -> list[str]:
        """Return the DN of every entry under ``base_dn`` matching the filter."""
        connection = self.connection
        try:
            connection.search(
                search_base=base_dn,
                search_filter=search_filter,
                search_scope=SUBTREE,
                attributes=NO_ATTRIBUTES,
            )
        except LDAPException as e:
            raise AuthFailure(f"Search under {base_dn} failed: {e}") from e

        # search() also returns False for an empty but successful result
        result = connection.result or {}
        if result.get("result") != RESULT_SUCCESS:
            description = result.get("description", "unknown error")
            message = result.get("message", "")
            logger.error("Search under %s failed: %s %s", base_dn, description, message)
            detail = f"{description} ({message})" if message else description
            raise AuthFailure(f"Search under {base_dn} failed: {detail}")

        dns = [
            entry["dn"]
            for entry in connection.response or []
            if entry.get("type") == "searchResEntry"
        ]
        logger.info("Search under %s returned %d entries", base_dn, len(dns))
        if not dns:
            logger.warning("No entries matched %s under %s", search_filter, base_dn)
        return dns

    def _close_connection(self) -> None:
        if self._connection is not None:
            _unbind(self._connection)
            self._connection = None

    def close(self) -> None:
        """Unbind and drop the connection."""
        self._close_connection()
        self._bound = False

    def __enter__(self) -> "DirectoryClient":
        self.connect()
        return self

    def __exit__(self, *args) -> None:
        self.close()


def to_display_paths(dns: list[str], prefix_length: int = 3) -> list[str]:
    """Strip the fixed ``ou=`` prefix from each DN and sort the result."""
    return sorted(dn[prefix_length:] for dn in dns)


def fetch_ou_paths(
    client: DirectoryClient,
    base_dn: str,
    search_filter: str,
    prefix_length: int = 3,
) -> list[str]:
    """Search for organizational units and return sorted display paths."""
    return to_display_paths(
        client.search_organizational_units(base_dn, search_filter), prefix_length
    )
