"""Host environment lookups and the external editor."""
