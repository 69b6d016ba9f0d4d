"""Typer application for pve-ct-executor."""
