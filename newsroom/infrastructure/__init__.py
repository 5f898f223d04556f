"""Infrastructure: persistence, security, external collaborators and jobs."""
