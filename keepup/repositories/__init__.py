from .rules_repository import RulesRepository

__all__ = [
    'RulesRepository',
]
