"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the front-end first writes a document. These constants are the single
source of truth for the names both the front-end and this backend use.
"""

COLLECTION_TEAM_MEMBERS = "teamMembers"

# Operational data
COLLECTION_SITES = "sites"
COLLECTION_PAYMENT_REQUESTS = "paymentRequests"
COLLECTION_INVENTORY = "inventory"
COLLECTION_MATERIAL_USAGE_LOGS = "materialUsageLogs"
COLLECTION_TRANSPORTERS = "transporters"
COLLECTION_JOB_CARDS = "jobCards"

# Collections wiped by the administrative cleanup, in processing order.
# Fixed here so no caller can point the purge at another collection;
# teamMembers is deliberately absent.
PURGE_COLLECTIONS: tuple[str, ...] = (
    COLLECTION_SITES,
    COLLECTION_PAYMENT_REQUESTS,
    COLLECTION_INVENTORY,
    COLLECTION_MATERIAL_USAGE_LOGS,
    COLLECTION_TRANSPORTERS,
    COLLECTION_JOB_CARDS,
)

PRESERVED_COLLECTIONS: tuple[str, ...] = (COLLECTION_TEAM_MEMBERS,)
