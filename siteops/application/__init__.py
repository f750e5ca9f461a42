"""Application layer: interfaces, services, DTOs.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (Firestore store, repositories).
"""
