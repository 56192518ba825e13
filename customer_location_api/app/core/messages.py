"""
Human readable messages placed in the ``message`` field of every
response envelope.

Keeping them in one place lets the endpoints and the tests refer to
the same text.
"""

DATA_FORMAT = "Entered data is not in correct format"
INTERNAL_ERROR = "Internal server error"

CUSTOMER_LIST = "List of customers"
NO_CUSTOMERS = "No customers found"
CUSTOMER_DETAILS = "Customer details"
CUSTOMER_NOT_FOUND = "Customer not found"
CUSTOMER_ADD = "Customer added successfully"
CUSTOMER_UPDATE = "Customer updated successfully"
CUSTOMER_DELETE = "Customer deleted successfully"
CUSTOMER_WITH_LOCATIONS = "Customer has locations and cannot be deleted"
CUSTOMER_LOCATION_DELETE = "Customer's location deleted successfully"
CUSTOMER_LOCATION_NOT_FOUND = "Location not found for this customer"

LOCATION_LIST = "List of locations"
NO_LOCATIONS = "No locations found"
LOCATION_DETAILS = "Location details"
LOCATION_NOT_FOUND = "Location not found"
LOCATION_ADD = "Location added successfully"
LOCATION_EXIST = "Location with this address already exists"
LOCATION_UPDATE = "Location updated successfully"
LOCATION_DELETE = "Location deleted successfully"
