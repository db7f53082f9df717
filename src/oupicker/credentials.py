"""Terminal prompts for the bind username and password."""

import getpass
from dataclasses import dataclass, field
from typing import Callable

from .errors import CredentialReadFailure


@dataclass
class Credentials:
    username: str
    password: str = field(repr=False)


def read_credentials(
    read_line: Callable[[str], str] = input,
    read_secret: Callable[[str], str] = getpass.getpass,
) -> Credentials:
    """Prompt for a username and a password that is not echoed.

    Raises:
        CredentialReadFailure: if either prompt hits end of input or the
            username is empty.
    """
    try:
        username = read_line("Enter username: ").strip()
    except (EOFError, OSError) as e:
        raise CredentialReadFailure(f"Failed to read username: {e}") from e
    if not username:
        raise CredentialReadFailure("Failed to read username: empty input")

    try:
        password = read_secret("Enter password: ")
    except (EOFError, OSError) as e:
        raise CredentialReadFailure(f"Failed to read password: {e}") from e

    return Credentials(username=username, password=password)
