"""Entry point for the txgh-sync bot."""

import argparse
import logging
import sys

from txgh_sync.exceptions import RemoteCallError, StageFailure
from txgh_sync.infrastructure.dependency_injection import DependenciesContainer

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging to stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def serve(container: DependenciesContainer) -> None:
    """Run the webhook server with uvicorn."""
    import uvicorn

    from txgh_sync.app import create_app

    config = container.config()
    logger.info("Starting webhook server on %s:%d", config.host, config.port)
    uvicorn.run(create_app(container), host=config.host, port=config.port)


def resync(container: DependenciesContainer) -> int:
    """Run a full resync of the configured branch head. Returns the exit code."""
    config = container.config()

    try:
        config.validate_webhook()
        result = container.push_handler().run_resync(config.github_owner, config.github_repo)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    except StageFailure as e:
        logger.error("Resync failed at stage %s: %s", e.stage.value, e)
        return 1
    except RemoteCallError as e:
        logger.error("Could not resolve the head of %s: %s", config.github_branch, e)
        return 1

    logger.info("=" * 50)
    logger.info("Resync complete:")
    logger.info("  Resources uploaded: %d", len(result.uploaded))
    logger.info("  Languages: %s", ", ".join(result.languages))
    logger.info("  Files committed: %d", len(result.committed_paths))
    logger.info("  Commit: %s", result.commit_sha or "-")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Sync source strings and translations between GitHub and Transifex")
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=["serve", "resync"],
        help="serve webhooks (default) or run a one-off full resync",
    )
    args = parser.parse_args(argv)

    container = DependenciesContainer()
    config = container.config()
    setup_logging(config.log_level)

    try:
        config.validate()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    if args.command == "resync":
        sys.exit(resync(container))

    serve(container)


if __name__ == "__main__":
    main()
