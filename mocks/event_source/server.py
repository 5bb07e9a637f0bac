"""
Mock event source serving the event data document and its JSON Schema.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Body
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.logging import get_logger
from shared.test_helpers import EventDataFactory


DATA_PATH = "/events/event-data.json"
SCHEMA_PATH = "/events/event-data.schema.json"


class MockEventSourceServer:
    """Mock remote event source.

    Serves fixture documents and can be switched into a failure mode per
    document: an HTTP status to return, or a body to serve instead of the
    fixture. Each request is counted so tests can assert on retries.
    """

    def __init__(self, port: int = 8090):
        self.port = port
        self.logger = get_logger("mock.event_source")
        self.app = FastAPI(title="Mock Event Source", version="1.0.0")

        self.documents: Dict[str, Dict[str, Any]] = {}
        self.failures: Dict[str, Dict[str, Any]] = {}
        self.request_counts: Dict[str, int] = {"data": 0, "schema": 0}
        self.reset()

        self._setup_routes()

    def reset(self):
        """Restore fixture documents and clear failure modes and counters."""
        self.documents = {
            "data": EventDataFactory.create_event_document(),
            "schema": EventDataFactory.create_event_schema(),
        }
        self.failures = {}
        self.request_counts = {"data": 0, "schema": 0}

    def fail(self, document: str, status_code: int = 503, body: Optional[str] = None):
        """Make ``document`` ("data" or "schema") fail until reset."""
        self.failures[document] = {"status_code": status_code, "body": body}

    def serve(self, document: str, content: Dict[str, Any]):
        """Replace the JSON served for ``document``."""
        self.documents[document] = content
        self.failures.pop(document, None)

    def _respond(self, document: str):
        self.request_counts[document] += 1
        failure = self.failures.get(document)
        if failure is None:
            return JSONResponse(content=self.documents[document])

        self.logger.info("Serving failure", document=document, **failure)
        if failure["body"] is not None:
            return PlainTextResponse(content=failure["body"], status_code=failure["status_code"])
        return JSONResponse(status_code=failure["status_code"], content={"error": "unavailable"})

    def _setup_routes(self):
        """Set up mock routes."""

        @self.app.get(DATA_PATH)
        async def event_data():
            return self._respond("data")

        @self.app.get(SCHEMA_PATH)
        async def event_schema():
            return self._respond("schema")

        @self.app.post("/admin/fail/{document}")
        async def set_failure(document: str, status_code: int = 503):
            """Switch a document into failure mode (for manual testing)."""
            if document not in self.documents:
                return JSONResponse(status_code=404, content={"error": f"unknown document {document}"})
            self.fail(document, status_code=status_code)
            return {"document": document, "status_code": status_code}

        @self.app.put("/admin/documents/{document}")
        async def replace_document(document: str, content: Dict[str, Any] = Body(...)):
            if document not in self.documents:
                return JSONResponse(status_code=404, content={"error": f"unknown document {document}"})
            self.serve(document, content)
            return {"document": document}

        @self.app.post("/admin/reset")
        async def reset():
            self.reset()
            return {"status": "reset"}

        @self.app.get("/admin/requests")
        async def request_counts():
            return self.request_counts

    def run(self):
        """Run the mock server."""
        import uvicorn
        self.logger.info("Starting mock event source", port=self.port)
        uvicorn.run(self.app, host="0.0.0.0", port=self.port)


if __name__ == "__main__":
    server = MockEventSourceServer()
    server.run()
