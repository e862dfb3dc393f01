"""
SPL Policy - Tablas de gobierno (índices, comandos y keywords bloqueadas)
"""

from dataclasses import dataclass, field
from typing import Iterable

# Índices permitidos
DEFAULT_ALLOWED_INDEXES = ("security", "app", "infra")

# Comandos destructivos / administrativos (blocklist por keyword)
DEFAULT_BLOCKED_KEYWORDS = (
    "delete",
    "drop",
    "collect",
    "sendemail",
    "runshellscript",
    "script",
    "rest",
    "dbxquery",
    "outputlookup",
)

# Comandos de solo lectura permitidos en el pipeline
DEFAULT_ALLOWED_COMMANDS = (
    "search",
    "tstats",
    "stats",
    "timechart",
    "chart",
    "table",
    "fields",
    "eval",
    "where",
    "rex",
    "sort",
    "dedup",
    "head",
    "tail",
    "lookup",
    "rename",
    "fillnull",
    "top",
    "rare",
    "eventstats",
    "streamstats",
)


def _dedupe(values: Iterable[str]) -> tuple[str, ...]:
    """Normaliza a minúsculas conservando el orden de declaración"""
    if isinstance(values, str):
        values = (values,)
    seen = {}
    for value in values:
        value = value.strip().lower()
        if value:
            seen.setdefault(value, None)
    return tuple(seen)


@dataclass(frozen=True)
class SplPolicy:
    """
    Política de guardrails para SPL.

    Todas las comparaciones son case-insensitive. El orden de
    declaración se conserva para los mensajes y para el orden
    en que se evalúan las keywords bloqueadas.
    """

    allowed_indexes: tuple[str, ...] = DEFAULT_ALLOWED_INDEXES
    blocked_keywords: tuple[str, ...] = DEFAULT_BLOCKED_KEYWORDS
    allowed_commands: tuple[str, ...] = DEFAULT_ALLOWED_COMMANDS

    _index_set: frozenset[str] = field(init=False, repr=False, compare=False)
    _command_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # frozen: se asigna vía object.__setattr__
        object.__setattr__(self, "allowed_indexes", _dedupe(self.allowed_indexes))
        object.__setattr__(self, "blocked_keywords", _dedupe(self.blocked_keywords))
        object.__setattr__(self, "allowed_commands", _dedupe(self.allowed_commands))
        object.__setattr__(self, "_index_set", frozenset(self.allowed_indexes))
        object.__setattr__(self, "_command_set", frozenset(self.allowed_commands))

    def is_index_allowed(self, name: str) -> bool:
        return name.lower() in self._index_set

    def is_command_allowed(self, command: str) -> bool:
        return command.lower() in self._command_set

    def describe_indexes(self, conjunction: str | None = None) -> str:
        """
        Lista legible de índices permitidos.

        Con conjunction="or" produce "security, app, or infra".
        """
        names = list(self.allowed_indexes)
        if not names:
            return "none"
        if conjunction is None or len(names) == 1:
            return ", ".join(names)
        if len(names) == 2:
            return f"{names[0]} {conjunction} {names[1]}"
        return f"{', '.join(names[:-1])}, {conjunction} {names[-1]}"

    @classmethod
    def from_settings(cls, settings) -> "SplPolicy":
        """Construye la política a partir de Settings"""
        return cls(
            allowed_indexes=tuple(settings.allowed_indexes),
            blocked_keywords=tuple(settings.blocked_keywords),
            allowed_commands=tuple(settings.allowed_commands),
        )

    def to_dict(self) -> dict:
        return {
            "allowed_indexes": list(self.allowed_indexes),
            "blocked_keywords": list(self.blocked_keywords),
            "allowed_commands": list(self.allowed_commands),
        }


DEFAULT_POLICY = SplPolicy()
