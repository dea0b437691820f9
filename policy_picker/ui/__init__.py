"""User interface: the approval policy widget and its hosts."""
