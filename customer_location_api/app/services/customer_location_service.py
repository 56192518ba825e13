"""
In-memory store for customers and the locations they are associated with.

The store keeps two collections: the customer list and a canonical
location registry.  Customers embed *copies* of locations rather than
references, so every mutation path below keeps the copies consistent
with the registry:

* adding or updating a customer resolves each embedded location against
  the registry by address (case-insensitive), reusing the registry id
  or registering a new location;
* updating a location rewrites every embedded copy with the same id;
* deleting a location removes every embedded copy with the same id;
* a customer cannot be deleted while it still has locations.

Routine failures (not found, already exists, blocked) are reported as
return values, never as exceptions.  Every operation runs under one
lock guarding both collections, and each mutation is committed as its
last step.  Records returned to callers are deep copies.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from customer_location_api.app.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from customer_location_api.app.schemas.location import Location, LocationCreate, LocationUpdate


class DeleteCustomerOutcome(Enum):
    DELETED = "deleted"
    BLOCKED_HAS_LOCATIONS = "blocked_has_locations"
    NOT_FOUND = "not_found"


class DeleteCustomerLocationOutcome(Enum):
    DELETED = "deleted"
    LOCATION_NOT_FOUND = "location_not_found"
    CUSTOMER_NOT_FOUND = "customer_not_found"


class LocationWriteOutcome(Enum):
    CREATED = "created"
    UPDATED = "updated"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


@dataclass
class LocationWriteResult:
    """Outcome of ``add_location``/``update_location``.

    ``location`` holds the stored record for ``CREATED``/``UPDATED``,
    the conflicting registry entry for ``ALREADY_EXISTS`` and ``None``
    for ``NOT_FOUND``.
    """

    outcome: LocationWriteOutcome
    location: Optional[Location] = None


def _same_address(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


class CustomerLocationService:
    """Owner of the customer list and the canonical location registry."""

    def __init__(self) -> None:
        self._customers: List[Customer] = []
        self._locations: List[Location] = []
        # Independent counters per entity kind; ids are never reused.
        self._customer_ids = itertools.count(1)
        self._location_ids = itertools.count(1)
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        """Return every customer in insertion order."""
        with self._lock:
            return [c.model_copy(deep=True) for c in self._customers]

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            index = self._customer_index(customer_id)
            if index is None:
                return None
            return self._customers[index].model_copy(deep=True)

    def add_customer(self, candidate: CustomerCreate) -> Customer:
        """Store a new customer and return it with all ids resolved.

        Embedded locations whose address is already registered take the
        registry id; unknown addresses are registered under a fresh
        location id.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            locations = self._resolve_locations(candidate.locations)
            customer = Customer(
                id=next(self._customer_ids),
                first_name=candidate.first_name,
                last_name=candidate.last_name,
                locations=locations,
            )
            self._customers.append(customer)
            logger.info("Created customer %s with %d location(s)", customer.id, len(locations))
            return customer.model_copy(deep=True)

    def update_customer(self, customer_id: int, candidate: CustomerUpdate) -> Optional[Customer]:
        """Replace the stored customer wholesale.

        Returns ``None`` if no customer has ``customer_id``; in that case
        the location registry is left untouched as well.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            index = self._customer_index(customer_id)
            if index is None:
                return None
            locations = self._resolve_locations(candidate.locations)
            customer = Customer(
                id=customer_id,
                first_name=candidate.first_name,
                last_name=candidate.last_name,
                locations=locations,
            )
            self._customers[index] = customer
            logger.info("Updated customer %s", customer_id)
            return customer.model_copy(deep=True)

    def delete_customer(self, customer_id: int) -> DeleteCustomerOutcome:
        """Delete a customer that has no remaining locations."""
        logger = logging.getLogger(__name__)
        with self._lock:
            index = self._customer_index(customer_id)
            if index is None:
                return DeleteCustomerOutcome.NOT_FOUND
            if self._customers[index].locations:
                logger.info("Refused to delete customer %s: locations still attached", customer_id)
                return DeleteCustomerOutcome.BLOCKED_HAS_LOCATIONS
            del self._customers[index]
            logger.info("Deleted customer %s", customer_id)
            return DeleteCustomerOutcome.DELETED

    def delete_customer_location(self, customer_id: int, location_id: int) -> DeleteCustomerLocationOutcome:
        """Detach one location from one customer.

        The registry entry is kept; other customers are unaffected.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            index = self._customer_index(customer_id)
            if index is None:
                return DeleteCustomerLocationOutcome.CUSTOMER_NOT_FOUND
            customer = self._customers[index]
            remaining = [loc for loc in customer.locations if loc.id != location_id]
            if len(remaining) == len(customer.locations):
                return DeleteCustomerLocationOutcome.LOCATION_NOT_FOUND
            customer.locations = remaining
            logger.info("Removed location %s from customer %s", location_id, customer_id)
            return DeleteCustomerLocationOutcome.DELETED

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------

    def list_locations(self) -> List[Location]:
        """Return the location registry in insertion order."""
        with self._lock:
            return [loc.model_copy() for loc in self._locations]

    def get_location(self, location_id: int) -> Optional[Location]:
        with self._lock:
            index = self._location_index(location_id)
            if index is None:
                return None
            return self._locations[index].model_copy()

    def add_location(self, candidate: LocationCreate) -> LocationWriteResult:
        """Register a new location unless its address is already known.

        An existing address is not an error: the result is
        ``ALREADY_EXISTS`` carrying the registered location, and nothing
        is modified.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            existing = self._find_location_by_address(candidate.address)
            if existing is not None:
                logger.info("Location %r already registered as %s", candidate.address, existing.id)
                return LocationWriteResult(LocationWriteOutcome.ALREADY_EXISTS, existing.model_copy())
            location = Location(id=next(self._location_ids), address=candidate.address)
            self._locations.append(location)
            logger.info("Created location %s", location.id)
            return LocationWriteResult(LocationWriteOutcome.CREATED, location.model_copy())

    def update_location(self, location_id: int, candidate: LocationUpdate) -> LocationWriteResult:
        """Change the address of a location everywhere it appears.

        Every customer's embedded copy with ``location_id`` is replaced,
        then the registry entry itself.  If the new address belongs to a
        different registered location the update is refused with
        ``ALREADY_EXISTS``.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            index = self._location_index(location_id)
            if index is None:
                return LocationWriteResult(LocationWriteOutcome.NOT_FOUND)
            clash = self._find_location_by_address(candidate.address)
            if clash is not None and clash.id != location_id:
                logger.info(
                    "Refused to rename location %s: address %r belongs to %s",
                    location_id,
                    candidate.address,
                    clash.id,
                )
                return LocationWriteResult(LocationWriteOutcome.ALREADY_EXISTS, clash.model_copy())

            location = Location(id=location_id, address=candidate.address)
            for customer in self._customers:
                customer.locations = [
                    location.model_copy() if loc.id == location_id else loc for loc in customer.locations
                ]
            self._locations[index] = location
            logger.info("Updated location %s", location_id)
            return LocationWriteResult(LocationWriteOutcome.UPDATED, location.model_copy())

    def delete_location(self, location_id: int) -> bool:
        """Remove a location from the registry and from every customer.

        Returns ``True`` if the location existed, ``False`` otherwise.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            index = self._location_index(location_id)
            if index is None:
                return False
            for customer in self._customers:
                customer.locations = [loc for loc in customer.locations if loc.id != location_id]
            del self._locations[index]
            logger.info("Deleted location %s", location_id)
            return True

    # ------------------------------------------------------------------
    # Helpers (callers must hold the lock)
    # ------------------------------------------------------------------

    def _customer_index(self, customer_id: int) -> Optional[int]:
        for i, customer in enumerate(self._customers):
            if customer.id == customer_id:
                return i
        return None

    def _location_index(self, location_id: int) -> Optional[int]:
        for i, location in enumerate(self._locations):
            if location.id == location_id:
                return i
        return None

    def _find_location_by_address(self, address: str) -> Optional[Location]:
        for location in self._locations:
            if _same_address(location.address, address):
                return location
        return None

    def _resolve_locations(self, candidates: Iterable[LocationCreate]) -> List[Location]:
        """Resolve embedded locations against the registry.

        Addresses already registered reuse the registry id; new ones are
        registered.  Candidates resolving to the same id are kept once.
        """
        logger = logging.getLogger(__name__)
        resolved: List[Location] = []
        seen = set()
        for candidate in candidates:
            canonical = self._find_location_by_address(candidate.address)
            if canonical is None:
                canonical = Location(id=next(self._location_ids), address=candidate.address)
                self._locations.append(canonical)
                logger.info("Created location %s", canonical.id)
            if canonical.id in seen:
                continue
            seen.add(canonical.id)
            resolved.append(Location(id=canonical.id, address=candidate.address))
        return resolved
