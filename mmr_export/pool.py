from __future__ import annotations

from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Callable, Dict, List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")

Outcome = Union[R, Exception]


def _capture(fn: Callable[[T], R], item: T) -> Outcome:
    try:
        return fn(item)
    except Exception as e:
        return e


def map_bounded(fn: Callable[[T], R], items: Sequence[T], *, workers: int) -> List[Outcome]:
    """
    Run `fn` over `items` with at most `workers` calls in flight.

    Failures are returned in place of the result (never raised), and the output
    lines up with `items` regardless of completion order.
    """
    results: List[Outcome] = [None] * len(items)  # type: ignore[list-item]
    workers = max(1, int(workers))
    if workers == 1:
        for idx, item in enumerate(items):
            results[idx] = _capture(fn, item)
        return results

    # Submit at most `workers` tasks at a time so a new item is dispatched as
    # soon as one finishes (instead of building a huge queue).
    it = iter(enumerate(items))
    with ThreadPoolExecutor(max_workers=workers) as ex:
        running: Dict[Future, int] = {}
        for _ in range(min(workers, len(items))):
            idx, item = next(it)
            running[ex.submit(_capture, fn, item)] = idx

        while running:
            done, _ = wait(running, return_when=FIRST_COMPLETED)
            for fut in done:
                results[running.pop(fut)] = fut.result()
                try:
                    idx, item = next(it)
                except StopIteration:
                    continue
                running[ex.submit(_capture, fn, item)] = idx

    return results


def split_results(results: Sequence[Outcome]) -> Tuple[List, List[Exception]]:
    ok = [r for r in results if not isinstance(r, Exception)]
    failed = [r for r in results if isinstance(r, Exception)]
    return ok, failed
