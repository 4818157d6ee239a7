"""Integrations with the cluster manager."""
