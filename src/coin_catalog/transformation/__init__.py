"""Processing applied to every dataset before persistence."""

from .overrides import OverrideTable
from .token_transformer import TokenTransformer, VariantRule, default_rules

__all__ = ["OverrideTable", "TokenTransformer", "VariantRule", "default_rules"]
