"""
Strategy registry.

Strategy classes add themselves with the @register_strategy decorator when
the strategies package is imported; callers look them up by name.
"""

from typing import Dict, List, Type

from .base import SolverStrategy


_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "backtracking"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy under its `name`.

    Registering the same class twice is harmless. A second class claiming
    a name already taken raises ValueError instead of replacing the first.
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name '{cls.name}' already used by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> SolverStrategy:
    """
    Instantiate the strategy registered as `name`.

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        return _STRATEGIES[name]()
    except KeyError:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None


def get_strategy_names() -> List[str]:
    """Registered names in registration order."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of each strategy, for --help output."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """Strategy used when none is requested."""
    return DEFAULT_STRATEGY
