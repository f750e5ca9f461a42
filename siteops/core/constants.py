"""Core constants: shared literal values used across layers."""

# Firestore rejects commits with more than 500 writes.
MAX_BATCH_SIZE = 500
