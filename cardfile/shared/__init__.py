"""Shared utilities: telemetry (logging) and cross-cutting helpers. No business logic."""
