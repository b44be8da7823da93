"""
Export the OpenAPI spec to a JSON file for Postman import.

Usage:
    python scripts/export_openapi.py [output-file]

The spec is written to ./docs/openapi.json unless a path is given.
"""

import json
import os
import sys

# Ensure the app package is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.main import app  # noqa: E402

OUTPUT_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "docs")
OUTPUT_FILE = os.path.join(OUTPUT_DIR, "openapi.json")


def main(output_file: str = OUTPUT_FILE) -> dict:
    os.makedirs(os.path.dirname(os.path.abspath(output_file)), exist_ok=True)

    spec = app.openapi()
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(spec, f, indent=2, default=str, ensure_ascii=False)

    print(f"OpenAPI spec exported to {output_file}")
    print(f"    Title   : {spec['info']['title']}")
    print(f"    Version : {spec['info']['version']}")
    print(f"    Paths   : {len(spec.get('paths', {}))}")
    return spec


if __name__ == "__main__":
    main(*sys.argv[1:2])
