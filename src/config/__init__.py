"""Runtime configuration for the waitlist app."""
