"""
Events Service package for the Event & Venue API.

Serves read-only views over event and venue records published as a remote
JSON document and described by a remote JSON Schema.

Structure:
- app.main: FastAPI app, routes, and service wiring.
- app.adapters: HTTP client for the remote event source.
- app.validation: JSON Schema validation of the data document.
- app.domain: Event/Venue models, document parser, query layer.
- app.caching: Process-local snapshot cache with sliding expiration.
- app.provider: Fetch/validate/parse cycle with retry and cache fallback.

Guidelines:
- Every request runs its own data cycle; the snapshot cache is the only
  shared state.
- Callers never see pipeline faults; they get fresh, cached or empty data.
"""
