"""Adapters between the reconciliation core and concrete media indexes."""
