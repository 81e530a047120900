"""Infrastructure Layer — file loading and logging setup (the imperative shell)."""
