"""Terminal client support: rich rendering helpers."""
