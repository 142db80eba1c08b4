"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, logging). Feature SQL and business logic stay in the feature
package (e.g. `people/`).
"""
