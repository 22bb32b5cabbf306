import inspect
import logging
from typing import Dict, List, Sequence, Tuple

import click
from click.core import ParameterSource
from rich.markup import escape

from rn_toolbox.cli.errors import CommandError, ExitCode
from rn_toolbox.cli.types import CommandConfig, FlagConfig, FlagValue, ParsedArgs

logger = logging.getLogger(__name__)

POSITIONALS_PARAM = "positionals"


async def resolve_default(flag: FlagConfig) -> FlagValue:
    """Returns the flag default, calling (and awaiting) deferred defaults."""
    default = flag.default
    if callable(default):
        default = default()
        if inspect.isawaitable(default):
            default = await default
    return default


def _requests_help(argv: Sequence[str], config: CommandConfig) -> bool:
    """True if the tokens ask for help, as --help, -h or a short boolean cluster such as -vh."""
    help_flag = config.flags.get("help")
    if help_flag is None:
        return False

    boolean_shorts = {flag.short for flag in config.flags.values() if flag.short and flag.type == "boolean"}
    for token in argv:
        if token == "--":
            break
        if token == "--help":
            return True
        if help_flag.short and token.startswith("-") and not token.startswith("--"):
            for char in token[1:]:
                if char == help_flag.short:
                    return True
                if char not in boolean_shorts:
                    break
    return False


def _build_click_command(config: CommandConfig) -> Tuple[click.Command, Dict[str, str]]:
    params: List[click.Parameter] = []
    param_names: Dict[str, str] = {}

    for index, (name, flag) in enumerate(config.flags.items()):
        # click lowercases derived names, so every flag gets an explicit identifier
        param_name = f"flag_{index}"
        param_names[name] = param_name

        decls = [param_name, f"--{name}"]
        if flag.short:
            decls.append(f"-{flag.short}")

        if flag.type == "boolean":
            params.append(click.Option(decls, is_flag=True))
        else:
            params.append(click.Option(decls, type=click.STRING))

    params.append(click.Argument([POSITIONALS_PARAM], nargs=-1, required=False))

    command = click.Command(config.name, params=params, add_help_option=False)
    return command, param_names


async def parse_args(argv: Sequence[str], config: CommandConfig) -> ParsedArgs:
    """
    Parses raw command-line tokens against a command configuration.

    Flags are matched as declared (--name, --name=value, --name value, -x);
    remaining tokens fill the positionals in declaration order.
    Raises CommandError(INVALID_ARGUMENT) on unknown flags, missing flag values
    and missing required positionals, unless help was requested.
    """
    command, param_names = _build_click_command(config)

    try:
        # click consumes the list it is given
        ctx = command.make_context(config.name, list(argv))
    except click.UsageError as e:
        logger.debug(f"Argument parsing failed for '{config.name}': {e.format_message()}")
        if _requests_help(argv, config):
            # Help renders regardless of otherwise invalid arguments
            flags = {name: None for name in config.flags}
            flags["help"] = True
            return ParsedArgs(args={arg.name: arg.default for arg in config.args}, flags=flags)
        # Tokens are echoed back in the message and must not be read as markup
        raise CommandError(escape(e.format_message()), ExitCode.INVALID_ARGUMENT) from e

    flags: Dict[str, FlagValue] = {}
    for name, flag in config.flags.items():
        param_name = param_names[name]
        if ctx.get_parameter_source(param_name) == ParameterSource.COMMANDLINE:
            flags[name] = ctx.params[param_name]
        else:
            flags[name] = await resolve_default(flag)

    positionals = ctx.params.get(POSITIONALS_PARAM) or ()
    # A help request never fails on missing positionals
    help_requested = bool(flags.get("help"))
    args: Dict[str, str] = {}
    for index, arg in enumerate(config.args):
        if index < len(positionals):
            args[arg.name] = positionals[index]
        elif arg.default is not None:
            args[arg.name] = arg.default
        elif arg.required and not help_requested:
            raise CommandError(f"Missing required argument: {arg.name}", ExitCode.INVALID_ARGUMENT)
        else:
            args[arg.name] = None

    if len(positionals) > len(config.args):
        logger.debug(f"Ignoring extra arguments for '{config.name}': {positionals[len(config.args):]}")

    return ParsedArgs(args=args, flags=flags)
