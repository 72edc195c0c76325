"""Framework adapters for jsonbody."""
