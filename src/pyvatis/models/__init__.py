"""pydantic models of a decoded METAR."""
