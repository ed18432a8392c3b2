"""HTTP API for subtitle statistics.

WHY: Web tools and automation (n8n, CI checks on deliverables) need the
statistics report without shelling out to the CLI.

HOW: app.py defines the FastAPI application, models.py the pydantic
request/response schemas. Analysis runs inline in the request; there is
no job store because a report is computed in a single synchronous pass.
"""
