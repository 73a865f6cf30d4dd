class BatchValidationError(ValueError):
    """Batch request rejected before any remote call."""
