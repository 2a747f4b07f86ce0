"""Output formatting for ServiceResult (Rich or JSON)."""
