"""Utility helpers for jsonbody."""
