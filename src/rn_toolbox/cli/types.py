from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple, Union

FLAG_TYPES = ("boolean", "string")

FlagValue = Union[bool, str, None]
DefaultFactory = Callable[[], Union[FlagValue, Awaitable[FlagValue]]]


@dataclass(frozen=True)
class ArgConfig:
    name: str
    description: str
    required: bool = False
    default: Optional[str] = None

    @property
    def is_optional(self) -> bool:
        return not self.required or self.default is not None


@dataclass(frozen=True)
class FlagConfig:
    description: str
    type: str = "boolean"
    short: Optional[str] = None
    # Literal value, or a zero-argument callable (sync or async) resolved only when the flag is absent
    default: Union[FlagValue, DefaultFactory] = None

    def __post_init__(self):
        if self.type not in FLAG_TYPES:
            raise ValueError(f"Unsupported flag type '{self.type}', expected one of {FLAG_TYPES}")
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"Flag shorthand must be a single character, got '{self.short}'")


@dataclass(frozen=True)
class CommandConfig:
    """
    Declarative description of a command: positionals, flags and help examples.
    Shared by the parser and the help generator.
    """
    name: str
    description: str
    args: Tuple[ArgConfig, ...] = ()
    flags: Mapping[str, FlagConfig] = field(default_factory=dict)
    examples: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))
        object.__setattr__(self, "examples", tuple(self.examples))
        self._validate()

    def _validate(self):
        seen_args = set()
        seen_optional = None
        for arg in self.args:
            if arg.name in seen_args:
                raise ValueError(f"Duplicate argument '{arg.name}' in command '{self.name}'")
            seen_args.add(arg.name)

            if arg.is_optional:
                seen_optional = arg.name
            elif seen_optional is not None:
                raise ValueError(
                    f"Required argument '{arg.name}' cannot follow optional argument "
                    f"'{seen_optional}' in command '{self.name}'"
                )

        seen_shorts: Dict[str, str] = {}
        for name, flag in self.flags.items():
            if flag.short is None:
                continue
            if flag.short in seen_shorts:
                raise ValueError(
                    f"Shorthand '-{flag.short}' used by both '{seen_shorts[flag.short]}' and '{name}'"
                )
            seen_shorts[flag.short] = name


@dataclass(frozen=True)
class ParsedArgs:
    args: Mapping[str, Optional[str]] = field(default_factory=dict)
    flags: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))

    @property
    def help(self) -> bool:
        return bool(self.flags.get("help"))

    @property
    def verbose(self) -> bool:
        return bool(self.flags.get("verbose"))
