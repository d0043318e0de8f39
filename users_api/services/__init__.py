# Services package.
#
# Each module exposes a focused set of async functions for a single domain
# aggregate:
#
#   user_service  — create + list for User
#
# All service functions accept an AsyncIOMotorDatabase as their first
# argument so that the router layer decides which database a request uses
# via the ``get_db`` dependency.
