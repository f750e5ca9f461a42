"""Infrastructure layer: Firestore adapters and security helpers."""
