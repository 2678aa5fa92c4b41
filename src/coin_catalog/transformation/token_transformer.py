"""Expand native token records into per-addressing-scheme variants.

Wallets derive different addresses for the same Bitcoin-family coin
depending on the derivation path (or, for Bitcoin Cash, the address
encoding). The catalog lists one ``native`` token per coin; locally each
scheme gets its own token record.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from coin_catalog.infrastructure.observability import get_processing_logger
from coin_catalog.shared.models.catalog import TokenRecord
from coin_catalog.shared.models.enums import (
    NATIVE_TOKEN_TYPE,
    BlockchainUid,
    address_token_types,
    derivation_token_types,
)

log = get_processing_logger("token-transformer")


@dataclass(frozen=True)
class VariantRule:
    """Replace the native token of ``blockchain_uid`` with one token per type tag."""

    blockchain_uid: str
    types: tuple[str, ...]


def default_rules() -> tuple[VariantRule, ...]:
    derivations = tuple(derivation_token_types())
    return (
        VariantRule(BlockchainUid.BITCOIN.value, derivations),
        VariantRule(BlockchainUid.LITECOIN.value, derivations),
        VariantRule(BlockchainUid.BITCOIN_CASH.value, tuple(address_token_types())),
    )


class TokenTransformer:
    """Applies variant rules to a token list.

    Every native record on a configured blockchain is expanded, one coin at a
    time, so two coins sharing a chain both get their variants.
    """

    def __init__(self, rules: Sequence[VariantRule] | None = None):
        self.rules = tuple(default_rules() if rules is None else rules)

    def transform(self, records: Iterable[TokenRecord]) -> list[TokenRecord]:
        tokens = list(records)
        for rule in self.rules:
            tokens = self._apply_rule(tokens, rule)
        return tokens

    def _apply_rule(
        self, tokens: list[TokenRecord], rule: VariantRule
    ) -> list[TokenRecord]:
        kept: list[TokenRecord] = []
        natives: list[TokenRecord] = []
        for token in tokens:
            if (
                token.blockchain_uid == rule.blockchain_uid
                and token.type == NATIVE_TOKEN_TYPE
            ):
                natives.append(token)
            else:
                kept.append(token)

        if not natives:
            return tokens

        for native in natives:
            kept.extend(
                TokenRecord(
                    coin_uid=native.coin_uid,
                    blockchain_uid=native.blockchain_uid,
                    type=token_type,
                    decimals=native.decimals,
                )
                for token_type in rule.types
            )

        log.debug(
            "native_tokens_expanded",
            blockchain_uid=rule.blockchain_uid,
            coins=[n.coin_uid for n in natives],
            variants=len(rule.types),
        )
        return kept
