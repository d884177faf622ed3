"""Domain services: HTML answer extraction and field mapping."""
