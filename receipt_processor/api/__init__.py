"""HTTP layer: the FastAPI app, receipt routes and error handlers."""
