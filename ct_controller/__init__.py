"""Fan-out executor core: run one operation across many LXC containers."""
