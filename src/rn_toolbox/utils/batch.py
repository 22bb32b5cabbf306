import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Union

logger = logging.getLogger(__name__)


class GenerationBatch:
    """
    Runs independent asset operations concurrently and collects their failures.

    A failing operation never cancels its siblings; each failure is recorded as
    "<output path>: <reason>" for a single report once everything has settled.
    """

    def __init__(self, on_start: Optional[Callable[[str], Any]] = None,
                 on_done: Optional[Callable[[str], Any]] = None):
        self.errors: List[str] = []
        self._on_start = on_start
        self._on_done = on_done

    async def run(self, output_path: Union[str, Path], func: Callable[..., Any], *args) -> bool:
        """Runs func(*args) in a worker thread. Returns False if it raised."""
        output_path = str(output_path)
        if self._on_start:
            self._on_start(output_path)
        try:
            await asyncio.to_thread(func, *args)
        except Exception as e:
            self.fail(output_path, e)
            return False
        if self._on_done:
            self._on_done(output_path)
        return True

    def fail(self, output_path: Union[str, Path], error: Exception) -> None:
        """Records a failure for output_path."""
        logger.debug(f"Failed to generate {output_path}", exc_info=error)
        # Appended on the event loop thread, never concurrently
        self.errors.append(f"{output_path}: {error}")

    async def gather(self, operations: List[Awaitable[bool]]) -> None:
        await asyncio.gather(*operations)

    @property
    def failed(self) -> bool:
        return bool(self.errors)
