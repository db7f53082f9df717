"""Configuration loading and defaults for OU Picker."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values

from .errors import ConfigInvalid, ConfigMissing
from .paths import MATCH_MODES

DEFAULT_BIND_DN_TEMPLATE = "cn={username},ou=Administrators,dc=obm,dc=local"
DEFAULT_SEARCH_FILTER = "(objectClass=organizationalUnit)"

# Settings that may come from the process environment or a .env file
ENV_OVERRIDES = {
    "LDAP_SERVER": "ldap_server",
    "BASE_DN": "base_dn",
}


def get_config_dir() -> Path:
    """Get the oupicker config directory (XDG-style)."""
    return Path.home() / ".config" / "oupicker"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_data_dir() -> Path:
    """Get the default data directory for the log file."""
    return Path.home() / ".local" / "share" / "oupicker"


def read_environment(env_file: Path | None = None) -> dict[str, str]:
    """Collect overridable settings from a .env file and the process environment.

    Variables already present in the process environment win over the
    .env file, matching ``load_dotenv(override=False)``.
    """
    if env_file is None:
        env_file = Path.cwd() / ".env"

    values: dict[str, str] = {}
    if env_file.is_file():
        for key, value in dotenv_values(env_file).items():
            if key in ENV_OVERRIDES and value:
                values[ENV_OVERRIDES[key]] = value

    for key, name in ENV_OVERRIDES.items():
        value = os.environ.get(key)
        if value:
            values[name] = value

    return values


@dataclass
class Config:
    """Application configuration."""

    ldap_server: str = ""
    base_dn: str = ""
    bind_dn_template: str = DEFAULT_BIND_DN_TEMPLATE
    search_filter: str = DEFAULT_SEARCH_FILTER
    prefix_length: int = 3
    root_segments: int = 3
    match_mode: Literal["tree", "substring"] = "tree"
    log_file: Path = field(default_factory=lambda: get_default_data_dir() / "oupicker.log")

    def bind_dn(self, username: str) -> str:
        """Build the bind DN for a username."""
        return self.bind_dn_template.format(username=username)

    def validate(self) -> None:
        """Raise ConfigMissing or ConfigInvalid before any directory access."""
        missing = []
        if not self.ldap_server:
            missing.append("LDAP_SERVER")
        if not self.base_dn:
            missing.append("BASE_DN")
        if missing:
            raise ConfigMissing(missing)
        if self.match_mode not in MATCH_MODES:
            raise ConfigInvalid(
                f"Unknown match_mode {self.match_mode!r}, expected one of: {', '.join(MATCH_MODES)}"
            )

    @classmethod
    def load(cls, env_file: Path | None = None) -> "Config":
        """Load configuration from file, .env and environment, or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            # Create default config file
            config = cls()
            config.save()
        else:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)

            ldap_data = data.get("ldap", {})
            picker_data = data.get("picker", {})

            log_file = data.get("log_file", str(get_default_data_dir() / "oupicker.log"))

            config = cls(
                ldap_server=ldap_data.get("server", ""),
                base_dn=ldap_data.get("base_dn", ""),
                bind_dn_template=ldap_data.get("bind_dn_template", DEFAULT_BIND_DN_TEMPLATE),
                search_filter=ldap_data.get("search_filter", DEFAULT_SEARCH_FILTER),
                prefix_length=picker_data.get("prefix_length", 3),
                root_segments=picker_data.get("root_segments", 3),
                match_mode=picker_data.get("match_mode", "tree"),
                log_file=Path(log_file).expanduser(),
            )

        for name, value in read_environment(env_file).items():
            setattr(config, name, value)

        return config

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# OU Picker Configuration',
            '',
            '# Log file (the terminal is used by the picker)',
            f'log_file = "{self.log_file}"',
            '',
            '[ldap]',
            '# host:port of the directory server; LDAP_SERVER overrides',
            f'server = "{self.ldap_server}"',
            '# Search base; BASE_DN overrides',
            f'base_dn = "{self.base_dn}"',
            '# {username} is replaced with the name typed at the prompt',
            f'bind_dn_template = "{self.bind_dn_template}"',
            f'search_filter = "{self.search_filter}"',
            '',
            '[picker]',
            '# Characters stripped from the front of every DN ("ou=")',
            f'prefix_length = {self.prefix_length}',
            '# Entries with at most this many components are shown at the top level',
            f'root_segments = {self.root_segments}',
            '# "tree" (direct children) or "substring" (legacy matching)',
            f'match_mode = "{self.match_mode}"',
        ]

        config_path.write_text("\n".join(lines) + "\n")
