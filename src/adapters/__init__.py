"""Concrete infrastructure: payment gateways, catalog loading, report export."""
