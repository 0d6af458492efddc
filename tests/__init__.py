"""Tests for hueprint."""
