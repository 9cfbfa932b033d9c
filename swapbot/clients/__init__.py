"""Chain-facing clients."""
