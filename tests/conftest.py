"""Shared fixtures for structvalidate tests."""

import pytest

from structvalidate.config import Settings
from structvalidate.core import Validator, ValidatorRegistry


def long_validator(value: str) -> str | None:
    if len(value) < 5:
        return f'"{value}" is too short'
    return None


def short_validator(value: str) -> str | None:
    if len(value) >= 5:
        return f'"{value}" is too long'
    return None


def nonzero_validator(value: int) -> str | None:
    if value == 0:
        return "must be nonzero"
    return None


def odd_validator(value: int) -> str | None:
    if value % 2 == 0:
        return f"{value} is not odd"
    return None


def between_validator(value: int, params: list[str]) -> str | None:
    low, high = (int(p) for p in params)
    if not low <= value <= high:
        return f"{value} is not between {low} and {high}"
    return None


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def registry() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register("long", long_validator)
    registry.register("short", short_validator)
    registry.register("nonzero", nonzero_validator)
    registry.register("odd", odd_validator)
    registry.register_parameterized("between", between_validator)
    return registry


@pytest.fixture
def validator(registry: ValidatorRegistry, settings: Settings) -> Validator:
    return Validator(registry, settings=settings)
