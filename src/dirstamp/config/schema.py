# src/dirstamp/config/schema.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .loader import ConfigError

Validator = Callable[[Any], None]


# ------------------------------- KeySpec -----------------------------------
@dataclass(frozen=True)
class KeySpec:
    """
    Specification for a configuration key used during validation.

    :param expected_type: Allowed type (or tuple of types) for the key's value.
    :param coerce: Optional callable turning a raw (string) value into the typed value.
    :param validator: Optional callable that receives the typed value and
                      must raise on invalid content.
    """
    expected_type: Union[type, Tuple[type, ...]]
    coerce: Optional[Callable[[Any], Any]] = None
    validator: Optional[Validator] = None

    def __post_init__(self) -> None:
        if self.validator is not None and not callable(self.validator):
            raise TypeError("KeySpec.validator must be callable or None")
        if self.coerce is not None and not callable(self.coerce):
            raise TypeError("KeySpec.coerce must be callable or None")


def validate_section(section: str, values: Mapping[str, Any], specs: Mapping[str, KeySpec]) -> Dict[str, Any]:
    """
    Coerce and validate one section.

    For each key of *specs* present in *values*:
      * run the optional ``coerce``,
      * check ``isinstance(value, expected_type)``,
      * run the optional ``validator``.

    Problems are aggregated and raised together as one ``ConfigError``.
    Keys without a spec are ignored.

    :param section: Section name for messages.
    :param values: Raw values of the section.
    :param specs: Mapping ``key -> KeySpec``.
    :return: New dict with the typed values of the known keys.
    :raises ConfigError: When any validation error occurs.
    """
    errors: List[str] = []
    out: Dict[str, Any] = {}

    for key_name, spec in specs.items():
        if key_name not in values:
            continue
        value = values[key_name]

        if spec.coerce is not None:
            try:
                value = spec.coerce(value)
            except (TypeError, ValueError) as exc:
                errors.append(f"[{section}] key '{key_name}' could not be converted: {exc}")
                continue

        if not isinstance(value, spec.expected_type):
            errors.append(
                f"[{section}] key '{key_name}' expected {spec.expected_type}, "
                f"got {type(value).__name__} ({value!r})"
            )
            continue

        if spec.validator is not None:
            try:
                spec.validator(value)
            except (TypeError, ValueError) as exc:
                errors.append(f"[{section}] key '{key_name}' failed validation: {exc}")
                continue

        out[key_name] = value

    if errors:
        raise ConfigError("\n".join(errors))
    return out


__all__ = [
    "KeySpec",
    "Validator",
    "validate_section",
]
