"""Contactbook: one contact list, fetched in-process and over HTTP."""
