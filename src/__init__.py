"""Job application tracker core: shared types, storage and services."""
