"""
Command line entry point for the RHDH pre-release configurator.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from config.settings import Settings
from .core.downloader import Downloader
from .core.errors import InstallerFailed, PrereleaseError, UsageError
from .core.orchestrator import PreReleaseOrchestrator
from .core.provisioner import ToolProvisioner
from .core.retry import RetryingInvoker
from .core.runner import SubprocessRunner
from .integrations.subscription import CommonScriptConfigurator
from .models.execution import ExecutionContext
from .utils.logging import setup_root_logger


PROG = "rhdh-prerelease"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Configure the RHDH operator catalog source and subscription for pre-release testing",
        add_help=False,
        allow_abbrev=False
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Activate tracing/debug mode."
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Display this message."
    )
    return parser


def parse_arguments(argv: List[str]) -> argparse.Namespace:
    """
    Parse command line arguments in order.

    Only the exact flag spellings are accepted; parsing stops at the first
    help flag, so anything after it is ignored.

    Raises:
        UsageError: for any argument other than the known flags
    """
    args = argparse.Namespace(debug=False, help=False)
    for arg in argv:
        if arg in ("-d", "--debug"):
            args.debug = True
        elif arg in ("-h", "--help"):
            args.help = True
            break
        else:
            raise UsageError(f"Unknown argument: {arg}")
    return args


def build_orchestrator(settings: Settings, context: ExecutionContext) -> PreReleaseOrchestrator:
    """Wire the production components together."""
    runner = SubprocessRunner()
    downloader = Downloader(timeout=settings.installer.download_timeout)
    return PreReleaseOrchestrator(
        settings=settings,
        context=context,
        provisioner=ToolProvisioner(downloader),
        downloader=downloader,
        invoker=RetryingInvoker(runner, description="RHDH install script"),
        configurator=CommonScriptConfigurator(settings.subscription.common_script, runner)
    )


def main(argv: Optional[List[str]] = None,
         orchestrator_factory: Callable[[Settings, ExecutionContext], PreReleaseOrchestrator] = build_orchestrator,
         settings: Optional[Settings] = None) -> int:
    """
    Run the configurator.
    
    Returns:
        Process exit code
    """
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    
    try:
        args = parse_arguments(argv)
    except UsageError as e:
        setup_root_logger()
        logging.getLogger(__name__).error(str(e))
        parser.print_help(sys.stderr)
        return 1
    
    if args.help:
        parser.print_help(sys.stderr)
        return 0
    
    if settings is None:
        try:
            settings = Settings()
        except ValidationError as e:
            setup_root_logger()
            logging.getLogger(__name__).error(f"Invalid configuration: {e}")
            return 1
    level = "DEBUG" if args.debug else settings.logging.level
    setup_root_logger(settings.logging.file_path, level, settings.logging.format)
    logger = logging.getLogger(__name__)
    
    context = ExecutionContext.from_environ()
    if args.debug:
        context.set_variable("DEBUG", "--debug")
    
    try:
        orchestrator_factory(settings, context).run()
    except InstallerFailed:
        # already reported by the invoker
        return 1
    except PrereleaseError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1
    
    print("Done", file=sys.stderr)
    return 0


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    sys.exit(main())
