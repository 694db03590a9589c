"""Static catalog data for the tool selector."""
