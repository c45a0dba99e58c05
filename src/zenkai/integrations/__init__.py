"""Clients for the hosted services the code agent job depends on."""
