"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource package uses
(settings, logging, DB wiring, error rendering). Keep resource-specific SQL
and validation in the corresponding package (e.g. `athletes/`).
"""
