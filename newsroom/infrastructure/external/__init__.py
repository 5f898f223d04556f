"""External collaborators: image store and outgoing mail."""
