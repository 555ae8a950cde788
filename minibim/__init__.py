"""Mini building-information model: elements, rules, commands, users, projects and proposals."""

__version__ = "0.1.0"
__all__ = ["elements", "rules", "commands", "users", "project", "proposal", "demo"]