"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service
or runs one of the token utility commands.
"""

import argparse
import json
import logging
import sys

import uvicorn

from app.bootstrap import bootstrap_create_application, bootstrap_create_token_service
from app.config import AppSettings, SettingsLoadError, config_load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails
            or a verified token is rejected.
    """

    argument_parser = argparse.ArgumentParser(description="Service scaffold runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "token-issue", "token-verify"),
        help="Runtime command: `api` starts server, `token-issue` prints a signed token, "
        "`token-verify` prints the claims of a token",
        type=str,
    )
    argument_parser.add_argument("--subject", dest="subject", type=str, help="Token subject for `token-issue`")
    argument_parser.add_argument("--email", dest="email", type=str, help="Optional email claim for `token-issue`")
    argument_parser.add_argument("--role", dest="role", type=str, help="Optional role claim for `token-issue`")
    argument_parser.add_argument(
        "--expires-in",
        dest="expires_in_seconds",
        type=int,
        help="Optional token lifetime in seconds for `token-issue`",
    )
    argument_parser.add_argument("--token", dest="token", type=str, help="Token to check for `token-verify`")
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error("%s", error)
        raise SystemExit(1) from error

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    if parsed_arguments.command == "token-issue":
        if not parsed_arguments.subject:
            argument_parser.error("--subject is required for `token-issue`")
        token_service = bootstrap_create_token_service(settings)
        print(
            token_service.auth_generate_token(
                subject=parsed_arguments.subject,
                email=parsed_arguments.email,
                role=parsed_arguments.role,
                expires_in_seconds=parsed_arguments.expires_in_seconds,
            )
        )
        return

    if parsed_arguments.command == "token-verify":
        if not parsed_arguments.token:
            argument_parser.error("--token is required for `token-verify`")
        token_service = bootstrap_create_token_service(settings)
        claims = token_service.auth_verify_token(parsed_arguments.token)
        if claims is None:
            print("INVALID_TOKEN", file=sys.stderr)
            raise SystemExit(1)
        print(json.dumps(claims.model_dump(exclude_none=True), sort_keys=True))
        return

    main_run_api(settings)


def main_run_api(settings: AppSettings) -> None:
    """Build the application and serve it until interrupted.

    Args:
        settings: Validated application settings.

    Returns:
        None: Blocks while the server runs.
    """

    application = bootstrap_create_application(settings)
    logger.info(
        "Listening on http://%s:%s (health: /api/v1/health)",
        settings.application_host,
        settings.application_port,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
