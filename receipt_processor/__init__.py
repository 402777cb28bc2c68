"""Top-level application package for the receipt points API.

Receipts are submitted over HTTP, stored under a generated identifier
and scored on request by the rule engine in
:mod:`receipt_processor.services.points_engine`. The engine is a plain
function and can be used without the web layer.

To run the API locally you can execute:

```bash
uvicorn receipt_processor.api.main:app --reload --port 8080
```

Configuration values can be overridden using environment variables or a
``.env`` file at the project root.
"""

__all__: list[str] = []
