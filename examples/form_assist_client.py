#!/usr/bin/env python3
"""
Form Assist HTTP client example.

Sends a small form to a running Form Assist server, asks for a change
and prints the markdown explanation and the updated components.

Prerequisites:
    1. Start the server:
       python run_server.py --transport http --port 3001

    2. Health check:
       curl http://localhost:3001/health

Usage:
    python examples/form_assist_client.py "add a required email field"
"""

import asyncio
import json
import os
import sys

import httpx


SAMPLE_SCHEMA = {
    "title": "Contact",
    "display": "form",
    "components": [
        {"type": "textfield", "key": "name", "label": "Name", "input": True},
        {"type": "textarea", "key": "message", "label": "Message", "input": True},
        {"type": "button", "key": "submit", "label": "Submit"},
    ],
}


async def main(message: str) -> int:
    base_url = os.environ.get("FORM_ASSIST_URL", "http://localhost:3001")

    print("=" * 60)
    print("Form Assist Client")
    print("=" * 60)
    print(f"Server: {base_url}")
    print(f"Request: {message}")
    print()

    async with httpx.AsyncClient(base_url=base_url, timeout=90.0) as client:
        limits = (await client.get("/ai/limits")).json()["data"]
        print(f"AI enabled: {limits['aiEnabled']}, max complexity: {limits['maxComplexity']}")

        report = (await client.post("/ai/validate-schema", json={"schema": SAMPLE_SCHEMA})).json()["data"]
        print(f"Current schema valid: {report['valid']}, complexity: {report['complexity']}")

        response = await client.post(
            "/ai/form-assist",
            json={"message": message, "currentSchema": SAMPLE_SCHEMA},
        )

    body = response.json()
    if response.status_code != 200:
        print(f"\nRequest failed ({response.status_code}): {body.get('error')}")
        return 1

    data = body["data"]
    print("\n" + data["markdown"])
    print("\nUpdated components:")
    print(json.dumps(data["schema"]["components"], indent=2))
    print(f"\nPreview id: {data['previewId']}")
    return 0


if __name__ == "__main__":
    request = " ".join(sys.argv[1:]) or "add a required email field after the name"
    sys.exit(asyncio.run(main(request)))
