"""
Strategy-specific chunk group configuration.

Each configuration turns the project's declared dependencies into the
strategy-based chunk groups for one splitting strategy.

Key Components:
- BaseStrategyConfig: Abstract base class for all strategies
- AggressiveStrategyConfig: One chunk per declared dependency
- BalancedStrategyConfig: Large presets plus grouped medium libraries
- ConservativeStrategyConfig: Only the very large presets
"""

from typing import Union

from ..matchers import SplitStrategy
from .aggressive import AggressiveStrategyConfig
from .balanced import BalancedStrategyConfig
from .base import BaseStrategyConfig
from .conservative import ConservativeStrategyConfig

# Configuration registry
_CONFIGS = {
    'aggressive': AggressiveStrategyConfig,
    'balanced': BalancedStrategyConfig,
    'conservative': ConservativeStrategyConfig,
}


def get_strategy_config(strategy: Union[SplitStrategy, str]) -> BaseStrategyConfig:
    """
    Get the configuration for a splitting strategy.

    Args:
        strategy: SplitStrategy member or its name

    Returns:
        Strategy configuration instance

    Raises:
        ValueError: If no configuration is registered for the strategy
    """
    key = strategy.value if isinstance(strategy, SplitStrategy) else str(strategy).lower()
    config_class = _CONFIGS.get(key)

    if config_class is None:
        raise ValueError(f"No chunk split configuration registered for strategy '{strategy}'")

    return config_class()


__all__ = [
    'BaseStrategyConfig',
    'AggressiveStrategyConfig',
    'BalancedStrategyConfig',
    'ConservativeStrategyConfig',
    'get_strategy_config'
]
