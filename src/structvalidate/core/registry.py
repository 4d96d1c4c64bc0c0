"""
Validator Registry - Central mapping of validator names to functions.

Validators come in two shapes, fixed when they are registered:

- plain: ``func(value) -> failure | None``
- parameterized: ``func(value, params) -> failure | None``

A failure is a returned ``Exception`` instance or a non-empty message string.
Returning ``None`` means the value is valid. Exceptions raised by a validator
are not failures; they propagate to the caller of Validator.validate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Union

Failure = Union[Exception, str, None]
PlainValidatorFunc = Callable[[Any], Failure]
ParameterizedValidatorFunc = Callable[[Any, list[str]], Failure]


class ValidatorKind(str, Enum):
    """Call shape of a registered validator."""

    PLAIN = "PLAIN"
    PARAMETERIZED = "PARAMETERIZED"


@dataclass(frozen=True)
class RegisteredValidator:
    """A validator function tagged with its call shape."""

    name: str
    kind: ValidatorKind
    func: Callable[..., Failure]

    def __call__(self, value: Any, params: tuple[str, ...] = ()) -> Failure:
        if self.kind == ValidatorKind.PARAMETERIZED:
            return self.func(value, list(params))
        return self.func(value)


class ValidatorRegistry:
    """
    Central registry for validator functions.

    Keys are unique; registering a name again replaces the earlier
    validator. The engine only reads the registry, so callers must not
    mutate it while validations run on other threads.
    """

    def __init__(self) -> None:
        self._validators: dict[str, RegisteredValidator] = {}

    def register(self, name: str, func: PlainValidatorFunc) -> None:
        """
        Register a plain validator.

        Args:
            name: Name used in directives
            func: Called with the field value
        """
        self._validators[name] = RegisteredValidator(name, ValidatorKind.PLAIN, func)

    def register_parameterized(
        self, name: str, func: ParameterizedValidatorFunc
    ) -> None:
        """
        Register a validator that takes directive parameters.

        Args:
            name: Name used in directives
            func: Called with the field value and the bracketed parameters
        """
        self._validators[name] = RegisteredValidator(
            name, ValidatorKind.PARAMETERIZED, func
        )

    def validator(self, name: str) -> Callable[[PlainValidatorFunc], PlainValidatorFunc]:
        """Decorator form of register."""

        def decorator(func: PlainValidatorFunc) -> PlainValidatorFunc:
            self.register(name, func)
            return func

        return decorator

    def parameterized(
        self, name: str
    ) -> Callable[[ParameterizedValidatorFunc], ParameterizedValidatorFunc]:
        """Decorator form of register_parameterized."""

        def decorator(func: ParameterizedValidatorFunc) -> ParameterizedValidatorFunc:
            self.register_parameterized(name, func)
            return func

        return decorator

    def unregister(self, name: str) -> bool:
        """
        Unregister a validator by name.

        Args:
            name: Validator name

        Returns:
            True if removed, False if not found
        """
        return self._validators.pop(name, None) is not None

    def get(self, name: str) -> RegisteredValidator | None:
        """Get a validator by name."""
        return self._validators.get(name)

    def list_validators(self) -> list[str]:
        """Get list of registered validator names."""
        return list(self._validators.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)
