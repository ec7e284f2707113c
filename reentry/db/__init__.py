"""
Storage layer for Reentry.

- EntityStore: the in-memory, index-addressed world graph
- codec: conversion to and from the label-addressed YAML world file
"""

from __future__ import annotations

from reentry.db.codec import (
    UnresolvedReference,
    WorldLoadError,
    WorldParseError,
    decode,
    dumps,
    encode,
    load_world,
    loads,
    save_world,
)
from reentry.db.memory import EntityStore

__all__ = [
    "EntityStore",
    # Codec
    "encode",
    "decode",
    "loads",
    "dumps",
    "load_world",
    "save_world",
    # Errors
    "WorldLoadError",
    "WorldParseError",
    "UnresolvedReference",
]
