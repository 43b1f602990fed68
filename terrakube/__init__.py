"""Client library for the Terrakube JSON:API: workspaces, variables, VCS connections, schedules, access entries and tags."""

__version__ = "0.1.0"