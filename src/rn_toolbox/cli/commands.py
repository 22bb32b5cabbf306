import asyncio
import logging
import os
import platform
import sys

import click

from rn_toolbox import __version__
from rn_toolbox.cli.runner import run_cli
from rn_toolbox.utils.config import ToolboxConfig

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup structured logging format based on debug mode setting."""
    debug_enabled = ToolboxConfig.is_debug_mode()

    if debug_enabled:
        # Structured debug logging format for easy parsing
        logging.basicConfig(
            level=logging.DEBUG,
            format='[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        if not os.environ.get("RN_TOOLBOX_SUPPRESS_HEADER"):
            logging.info("=" * 60)
            logging.info(f"rn-toolbox v{__version__} - Debug Log")
            logging.info("=" * 60)
            logging.info(f"Python: {sys.version}")
            logging.info(f"Platform: {sys.platform} ({platform.machine()})")
    else:
        logging.basicConfig(level=logging.ERROR)


# All tokens, including --help and --version, are forwarded untouched to run_cli
@click.command(
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.argument('argv', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, argv):
    """rn-toolbox: A set of scripts to simplify React Native development."""
    setup_logging()
    exit_code = asyncio.run(run_cli(argv))
    ctx.exit(int(exit_code))
