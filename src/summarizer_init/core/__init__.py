"""Side-effecting helpers used by the wizard steps."""
