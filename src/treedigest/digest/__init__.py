"""Sequential and concurrent digesters."""

from .parallel import digest_all_parallel, digest_all_parallel_async, sum_files
from .serial import digest_all_serial
from .signals import CancellationSignal, LivenessCounter

__all__ = [
    "CancellationSignal",
    "LivenessCounter",
    "digest_all_parallel",
    "digest_all_parallel_async",
    "digest_all_serial",
    "sum_files",
]
