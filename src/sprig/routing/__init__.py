"""Routing — the route table and the per-request resolver.

The table is loaded once when the app freezes and never changes; the
resolver reads it for every request without locking.
"""
