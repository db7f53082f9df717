"""Entry point for OU Picker."""

import logging
import sys

from .app import run_app
from .config import Config
from .credentials import read_credentials
from .directory import DirectoryClient, fetch_ou_paths
from .errors import OUPickerError
from .paths import PathIndex

logger = logging.getLogger(__name__)


def configure_logging(config: Config) -> None:
    """Send log records to the configured log file."""
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=config.log_file,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_paths(config: Config) -> list[str]:
    """Connect, prompt for credentials, bind and fetch sorted OU paths."""
    with DirectoryClient(config.ldap_server) as client:
        credentials = read_credentials()
        client.bind(config.bind_dn(credentials.username), credentials.password)
        return fetch_ou_paths(
            client, config.base_dn, config.search_filter, config.prefix_length
        )


def main() -> int:
    """Main entry point for OU Picker."""
    try:
        # Load configuration
        config = Config.load()
        configure_logging(config)
        config.validate()

        paths = load_paths(config)
        index = PathIndex.build(
            paths,
            prefix_length=config.prefix_length,
            root_segments=config.root_segments,
        )

        # Run the picker
        selection = run_app(index, config)
        if selection is not None:
            print(f"\nYOU CHOSE:\nOU={selection}\n")

        return 0
    except KeyboardInterrupt:
        return 0
    except OUPickerError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
