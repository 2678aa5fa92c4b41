"""Remote API adapters."""
