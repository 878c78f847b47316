"""Per-call tracking of transient entries under construction."""

from contextlib import contextmanager
from typing import Dict, Iterator, List

from ..errors import CircularDependencyError


class CycleGuard:
    """Names of transient entries whose fields are being injected.

    One guard is created per top-level ``get`` and threaded through every
    recursive resolution it triggers. A name leaves the guard once its entry
    has been fully injected.
    """

    def __init__(self):
        # dict as an insertion-ordered set
        self._in_progress: Dict[str, None] = {}

    @contextmanager
    def constructing(self, name: str) -> Iterator[None]:
        """Mark ``name`` in progress for the duration of the block.

        Raises:
            CircularDependencyError: ``name`` is already in progress
        """
        if name in self._in_progress:
            raise CircularDependencyError(name, chain=self.chain)
        self._in_progress[name] = None
        try:
            yield
        finally:
            del self._in_progress[name]

    @property
    def chain(self) -> List[str]:
        """In-progress names, outermost first."""
        return list(self._in_progress)

    def __contains__(self, name: object) -> bool:
        return name in self._in_progress

    def __len__(self) -> int:
        return len(self._in_progress)
