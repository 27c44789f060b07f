"""Flat JSON inventory of a project directory tree."""
