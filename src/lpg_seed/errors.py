"""Exception hierarchy for the seeder."""


class SeedError(Exception):
    """Base class for all seeding failures."""

    pass


class ConfigurationError(SeedError):
    """Raised when configuration or credentials are missing or invalid."""

    pass


class StoreError(SeedError):
    """Raised when the persistent store rejects a read or a write."""

    pass


class BatchWriteError(StoreError):
    """Raised when one chunk of a batched write fails."""

    def __init__(self, collection: str, batch_index: int, batch_count: int, cause: Exception):
        self.collection = collection
        self.batch_index = batch_index
        self.batch_count = batch_count
        self.cause = cause
        super().__init__(
            f"Batch {batch_index + 1}/{batch_count} of '{collection}' failed: {cause}"
        )


class PipelineError(SeedError):
    """Raised when a pipeline stage fails; remaining stages are not run."""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Stage '{stage}' failed: {cause}")
