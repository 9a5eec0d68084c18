from dataclasses import dataclass

from paramsql.exceptions import ValidationError

from libb import ConfigOptions

__all__ = [
    'DEFAULT_MAX_BATCH_SIZE',
    'BuilderOptions',
]

DEFAULT_MAX_BATCH_SIZE = 1000


@dataclass
class BuilderOptions(ConfigOptions):
    """Options

    Batch runner options:
    - max_batch_size: Rows per executed chunk (default: 1000)
    - log_enabled: Record one debug SQL per executed chunk (default: False)
    """
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    log_enabled: bool = False

    def __post_init__(self):
        if self.max_batch_size is None or self.max_batch_size <= 0:
            raise ValidationError('max_batch_size must be non-zero and positive')
