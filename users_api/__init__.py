"""Users API: a small FastAPI service storing user documents in MongoDB."""
