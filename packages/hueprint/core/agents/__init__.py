"""Inference agents and providers."""
