"""Registry of allowed commit types and their required fields.

The registry is built once per run, either from the default conventional
commit types or from an override specification of the form::

    feat=scope,description;fix=scope;docs=

Each entry names a commit type and the fields a message of that type must
carry. An entry with an empty right-hand side accepts the type with no
requirements beyond the description.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import ConfigError
from .models import CommitTypeSpec

DEFAULT_COMMIT_TYPES: Tuple[str, ...] = (
    "fix",
    "feat",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "chore",
)

# Type names must be able to match a header token.
_INVALID_TYPE_CHARS = re.compile(r"[():\s]")


def _canonical(name: str, ignore_case: bool) -> str:
    return name.casefold() if ignore_case else name


class TypeRegistry:
    """Read-only mapping from commit type identifier to required fields.

    Identifiers keep the case they were registered with; ``lookup`` decides
    per call whether the comparison folds case.
    """

    def __init__(self, specs: List[CommitTypeSpec]):
        self._specs: Dict[str, CommitTypeSpec] = {spec.name: spec for spec in specs}

    @classmethod
    def default(cls) -> 'TypeRegistry':
        """Create the registry of default conventional commit types."""
        return cls([CommitTypeSpec(name=name) for name in DEFAULT_COMMIT_TYPES])

    @classmethod
    def build(cls, override_spec: Optional[str] = None, ignore_case: bool = False) -> 'TypeRegistry':
        """Build the registry for a run.

        Args:
            override_spec: Optional type specification replacing the defaults
            ignore_case: Whether type names are compared without case

        Returns:
            TypeRegistry: The default registry, or the parsed override

        Raises:
            ConfigError: If the override specification is malformed
        """
        if override_spec is None:
            return cls.default()
        return parse_type_spec(override_spec, ignore_case=ignore_case).unwrap()

    @property
    def types(self) -> List[str]:
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[CommitTypeSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def lookup(self, token: str, ignore_case: bool = False) -> Optional[CommitTypeSpec]:
        """Resolve a header type token to its registered spec."""
        if not ignore_case:
            return self._specs.get(token)
        wanted = _canonical(token, True)
        for spec in self._specs.values():
            if _canonical(spec.name, True) == wanted:
                return spec
        return None

    def required_fields(self, name: str) -> Tuple[str, ...]:
        return self._specs[name].required

    def to_spec(self) -> str:
        """Render the registry back into override specification syntax."""
        return ";".join(f"{spec.name}={','.join(spec.required)}" for spec in self)


@dataclass(frozen=True)
class TypeSpecParseResult:
    """Outcome of parsing a type specification.

    Exactly one of ``registry`` and ``error`` is set.
    """

    registry: Optional[TypeRegistry] = None
    error: Optional[ConfigError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> TypeRegistry:
        if self.error is not None:
            raise self.error
        return self.registry


def _parse_entry(entry: str) -> CommitTypeSpec:
    if "=" not in entry:
        raise ConfigError(f"Invalid type entry '{entry}': expected 'type=field1,field2'", entry)
    name, _, fields = entry.partition("=")
    name = name.strip()
    if not name:
        raise ConfigError(f"Invalid type entry '{entry}': missing type name", entry)
    if _INVALID_TYPE_CHARS.search(name):
        raise ConfigError(f"Invalid type name '{name}': must not contain '(', ')', ':' or whitespace", entry)

    # The description is always required; listing it only sets its position.
    listed = [field.strip() for field in fields.split(",")]
    required: List[str] = [] if "description" in listed else ["description"]
    for field in listed:
        if field and field not in required:
            required.append(field)
    return CommitTypeSpec(name=name, required=tuple(required))


def parse_type_spec(text: str, ignore_case: bool = False) -> TypeSpecParseResult:
    """Parse an override specification into a registry.

    Args:
        text: Semicolon separated ``type=field,...`` entries
        ignore_case: Treat names differing only in case as duplicates

    Returns:
        TypeSpecParseResult: The registry, or the first configuration error
    """
    specs: List[CommitTypeSpec] = []
    seen: Dict[str, str] = {}
    try:
        for entry in text.split(";"):
            if not entry.strip():
                continue
            spec = _parse_entry(entry)
            key = _canonical(spec.name, ignore_case)
            if key in seen:
                raise ConfigError(f"Duplicate commit type '{spec.name}' (already defined as '{seen[key]}')", entry)
            seen[key] = spec.name
            specs.append(spec)
        if not specs:
            raise ConfigError("Type specification defines no commit types", text)
    except ConfigError as e:
        return TypeSpecParseResult(error=e)
    return TypeSpecParseResult(registry=TypeRegistry(specs))
