"""User-facing interfaces for devnote."""
