"""Console loading indicator.

The indicator is a rich Live display refreshed by its own asyncio task,
which stops when the main flow sets the event it was handed. Anything
printed on the same console while it runs lands above the indicator.
It is purely cosmetic.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .config import SPINNER_FRAMES, SPINNER_INTERVAL


async def spin(
    stop: asyncio.Event,
    live: Live,
    label: str = "Loading",
    frames: tuple[str, ...] = SPINNER_FRAMES,
    interval: float = SPINNER_INTERVAL,
) -> None:
    """Redraw "<label> <frame>" on the live display until stop is set."""
    index = 0
    while not stop.is_set():
        live.update(Text(f"{label} {frames[index]}"), refresh=True)
        index = (index + 1) % len(frames)
        try:
            await asyncio.wait_for(stop.wait(), timeout=interval)
        except asyncio.TimeoutError:
            pass


@asynccontextmanager
async def loading(console: Console, label: str = "Loading") -> AsyncIterator[None]:
    """Show the indicator for the duration of the block, then erase it.

    Does nothing when the console is not a terminal.

    Usage:
        async with loading(console):
            reply = await complete(...)
    """
    if not console.is_terminal:
        yield
        return

    stop = asyncio.Event()
    with Live(
        Text(f"{label} {SPINNER_FRAMES[0]}"),
        console=console,
        auto_refresh=False,
        transient=True,
        redirect_stdout=False,
        redirect_stderr=False,
    ) as live:
        task = asyncio.create_task(spin(stop, live, label))
        try:
            yield
        finally:
            stop.set()
            await task
