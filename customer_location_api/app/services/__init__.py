"""
Service layer abstraction.

Business logic lives here, isolated from the API handlers.  The only
service is the in-memory customer/location store.
"""
