"""Configuration package for consistent environment snapshots."""

from .settings import CfEnvSnapshot, SnapshotLoadError, config_load_snapshot

__all__ = ["CfEnvSnapshot", "SnapshotLoadError", "config_load_snapshot"]
