"""Terminal UI building blocks (rich console and headless test doubles)."""
