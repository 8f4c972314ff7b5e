"""JSON schema definition for serialized reports."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

_CASE_SCHEMA = {
    "type": "object",
    "required": ["describeLabel", "description", "message", "passed", "time"],
    "properties": {
        "describeLabel": {"type": "string"},
        "description": {"type": "string"},
        "message": {"type": "string"},
        "errorMessage": {"type": "string"},
        "passed": {"type": "boolean"},
        "time": {"type": "number", "minimum": 0},
    },
}

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "livetest report",
    "type": "object",
    "required": ["schema_version", "generated_at", "report"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "report": {
            "type": "object",
            "required": ["results", "fullResults", "errorCount", "duration"],
            "properties": {
                "results": {"type": "array", "items": _CASE_SCHEMA},
                "fullResults": {
                    "type": "object",
                    "required": ["time", "timestamp", "testCases"],
                    "properties": {
                        "time": {"type": "number", "minimum": 0},
                        "timestamp": {"type": "string"},
                        "testCases": {"type": "array", "items": _CASE_SCHEMA},
                    },
                },
                "errorCount": {"type": "integer", "minimum": 0},
                "duration": {"type": "number", "minimum": 0},
            },
        },
    },
}

FRAGMENT_SCHEMA = {
    "type": "object",
    "required": ["message", "passed"],
    "properties": {
        "message": {"type": "string"},
        "passed": {"type": "boolean"},
    },
}
