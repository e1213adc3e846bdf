"""
Core calendar primitives, value types, and payload contracts.

This module contains the building blocks that are independent of any
external system (formatters, zone databases, storage, etc.).
"""
