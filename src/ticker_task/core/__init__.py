"""Ports, errors and lifecycle states shared by ticker tasks."""
