"""Command-line front end for pve-ct-executor."""
