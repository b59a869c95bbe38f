"""Clients for the external services the bot talks to."""
