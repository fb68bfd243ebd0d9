"""Main module entrypoint for local runtime execution.

This module validates startup configuration, configures logging and launches
the FastAPI relay service.
"""

import argparse

import uvicorn

from push_relay.bootstrap import bootstrap_create_application
from push_relay.config import config_load_settings
from push_relay.observability import observability_configure_logging


def main() -> None:
    """Run the relay server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Push relay runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for APPLICATION_HOST",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Optional bind port override for APPLICATION_PORT",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    observability_configure_logging(
        log_level=settings.log_level,
        json_logs=settings.log_json,
        environment_name=settings.environment_name,
    )
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=parsed_arguments.host or settings.application_host,
        port=parsed_arguments.port or settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
