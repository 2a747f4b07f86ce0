"""Service layer — daytime operations returning ServiceResult."""
