"""Serialization module — export engine outputs as JSON-safe payloads."""

from recovery_engine.serialization.payloads import to_json_string, to_payload

__all__ = ["to_json_string", "to_payload"]
