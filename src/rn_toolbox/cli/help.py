from typing import Iterable, List

from rn_toolbox import CLI_BIN
from rn_toolbox.cli.types import CommandConfig

BIN_PLACEHOLDER = "{bin}"
COMMAND_PLACEHOLDER = "{command}"

TAGLINE = "A set of scripts to simplify React Native development"


def generate_command_help(config: CommandConfig) -> str:
    """Generates help text for a single command."""
    lines: List[str] = []

    lines.append(config.description.strip())
    lines.append("")

    lines.append("USAGE")
    args_str = " ".join(f"<{a.name}>" if a.required else f"[{a.name}]" for a in config.args)
    usage = f"  $ {CLI_BIN} {config.name}"
    if args_str:
        usage += f" {args_str}"
    if config.flags:
        usage += " [FLAGS]"
    lines.append(usage)
    lines.append("")

    if config.args:
        lines.append("ARGUMENTS")
        for arg in config.args:
            default_str = f" [default: {arg.default}]" if arg.default else ""
            lines.append(f"  {arg.name.upper()}{default_str}  {arg.description}")
        lines.append("")

    if config.flags:
        lines.append("FLAGS")
        for name, flag in config.flags.items():
            short_str = f"-{flag.short}, " if flag.short else "    "
            value_str = "=<value>" if flag.type == "string" else ""
            lines.append(f"  {short_str}--{name}{value_str}  {flag.description}")
        lines.append("")

    if config.examples:
        lines.append("EXAMPLES")
        for example in config.examples:
            example = example.replace(BIN_PLACEHOLDER, CLI_BIN).replace(COMMAND_PLACEHOLDER, config.name)
            lines.append(f"  {example}")
        lines.append("")

    return "\n".join(lines)


def generate_global_help(commands: Iterable[CommandConfig], version: str) -> str:
    """Generates the top-level help listing every registered command."""
    lines: List[str] = [
        f"{CLI_BIN}/{version}",
        "",
        TAGLINE,
        "",
        "USAGE",
        f"  $ {CLI_BIN} <command> [ARGS] [FLAGS]",
        "",
        "COMMANDS",
    ]

    for config in commands:
        summary = config.description.strip().split("\n")[0].strip()
        lines.append(f"  {config.name.ljust(10)} {summary}")

    lines.extend([
        "",
        "FLAGS",
        "  -h, --help     Show help",
        "  -V, --version  Show version",
        "",
        f"Run '{CLI_BIN} <command> --help' for more information on a command.",
        "",
    ])

    return "\n".join(lines)
