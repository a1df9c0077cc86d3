"""Typed contracts shared by the core helpers and the CLI wizard."""
