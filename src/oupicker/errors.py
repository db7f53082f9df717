"""Startup failures for OU Picker.

All of these are fatal and raised before the picker starts. The
navigation core itself never raises.
"""


class OUPickerError(Exception):
    """Base class for OU Picker startup failures."""


class ConfigMissing(OUPickerError):
    """Required settings are missing from the config file and environment."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required setting(s): {', '.join(missing)}")


class ConnectionFailure(OUPickerError):
    """The directory server could not be reached."""


class AuthFailure(OUPickerError):
    """The directory server rejected the bind or the search."""


class CredentialReadFailure(OUPickerError):
    """Username or password could not be read from the terminal."""


class ConfigInvalid(OUPickerError):
    """A setting has a value the picker cannot use."""
