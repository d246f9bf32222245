"""Service layer — adapts domain results to the ServiceResult contract."""
