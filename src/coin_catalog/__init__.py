"""
Coin catalog synchronization.
Keeps a local reference dataset of coins, blockchains and tokens in step
with a remote catalog service.

Modules:
- ingestion: Remote catalog client and HTTP transport
- transformation: Override merging and token variant expansion
- orchestration: Bootstrap, staleness tracking and sync
- storage: Dataset store and bundled snapshots
- shared: Common models, enums
- infrastructure: Sync state store, logging
- config: YAML and environment configuration
"""

__version__ = "0.3.0"
