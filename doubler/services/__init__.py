"""
Doubler API - Services Layer
=============================

Service Inventory:
    - doubler_service: the doubler transformation (pure function, no I/O)

Services can be called and tested without HTTP; they raise exceptions from
doubler.exceptions and leave the HTTP mapping to the global handlers.
"""
