"""
HTTP API for DietMind.

This layer exposes REST endpoints that use the internal core
(dietmind_core.engine) to generate meal plans.

The API is meant to be consumed by:
- The web UI (served from the same process when a build is available)
- External clients
"""
