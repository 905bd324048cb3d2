"""Synchronize umamusu.wiki templates with the master.mdb game database."""

__version__ = "1.0.0"
