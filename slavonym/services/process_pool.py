"""
Batch declension in worker processes.

A `PersistentMultiprocessDecliner` is created for one or more rule packs.
Each worker process builds one `NameCaseEngine` per pack when it starts and
declines every chunk of names it receives with the engine of the requested
language, so the workers never consult the language registry of the parent.

The packs themselves travel to the workers by pickle. Rule functions are
pickled by reference, so a custom pack works as long as its rules, scorers and
classifier are module-level functions importable by the workers; packs built
from lambdas or closures are rejected before any process starts.
"""

from __future__ import annotations

import pickle
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from dataclasses import dataclass
from multiprocessing import get_all_start_methods, get_context
from typing import TYPE_CHECKING

from slavonym.services.rules import RulePack
from slavonym.types import DeclensionConfig, Gender

if TYPE_CHECKING:
    from slavonym.engine import NameCaseEngine


# language -> engine, one per pack, private to each worker process
_WORKER_ENGINES: dict[str, NameCaseEngine] = {}


@dataclass(frozen=True)
class DeclineJob:
    """One chunk of full names sent to a worker."""

    language: str
    names: tuple[str, ...]
    case: int | None = None
    gender: Gender | None = None


def _start_worker(packs: tuple[RulePack, ...], config: DeclensionConfig | None) -> None:
    from slavonym.engine import NameCaseEngine

    _WORKER_ENGINES.clear()
    for pack in packs:
        _WORKER_ENGINES[pack.language] = NameCaseEngine(pack, config)


def _run_job(job: DeclineJob) -> list[str | list[str]]:
    engine = _WORKER_ENGINES.get(job.language)
    if engine is None:
        raise RuntimeError(f"worker has no engine for language '{job.language}'")
    return [engine.q(name, job.case, job.gender) for name in job.names]


def ensure_transferable(packs: Sequence[RulePack], config: DeclensionConfig | None) -> None:
    """Raise ValueError unless ``packs`` and ``config`` can be pickled into workers."""
    for pack in packs:
        try:
            pickle.dumps(pack)
        except (pickle.PicklingError, AttributeError, TypeError) as e:
            raise ValueError(
                f"rule pack '{pack.language}' cannot be sent to worker processes: {e}. "
                "Define its rules, scorers and classifier as module-level functions.",
            ) from e
    try:
        pickle.dumps(config)
    except (pickle.PicklingError, AttributeError, TypeError) as e:
        raise ValueError(f"engine config cannot be sent to worker processes: {e}") from e


class PersistentMultiprocessDecliner:
    """
    Process pool that declines full names with per-worker engines.

    The pool stays alive across `decline_names` calls; close it (or use it as
    a context manager) to stop the workers. `spawn` is the default start
    method so behavior is the same on every platform.
    """

    def __init__(
        self,
        packs: Sequence[RulePack],
        *,
        config: DeclensionConfig | None = None,
        max_workers: int | None = None,
        chunk_size: int = 64,
        mp_start_method: str = "spawn",
    ) -> None:
        packs = tuple(packs)
        if not packs:
            raise ValueError("at least one rule pack is required")
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        if mp_start_method not in get_all_start_methods():
            raise ValueError(
                f"unsupported multiprocessing start method '{mp_start_method}'. "
                f"Available methods: {', '.join(get_all_start_methods())}",
            )
        ensure_transferable(packs, config)

        self._languages = tuple(pack.language for pack in packs)
        self._chunk_size = chunk_size
        self._closed = False
        self._executor = ProcessPoolExecutor(
            max_workers=max_workers,
            mp_context=get_context(mp_start_method),
            initializer=_start_worker,
            initargs=(packs, config),
        )

    @property
    def languages(self) -> tuple[str, ...]:
        """Languages the workers can decline; the first one is the default."""
        return self._languages

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def closed(self) -> bool:
        return self._closed

    def decline_names(
        self,
        names: Sequence[str],
        case: int | None = None,
        gender: Gender | None = None,
        *,
        language: str | None = None,
    ) -> list[str | list[str]]:
        """
        Decline full names in the workers.

        Entry ``i`` of the result is what `NameCaseEngine.q` returns for
        ``names[i]`` with the same ``case`` and ``gender``.
        """
        if self._closed:
            raise RuntimeError("process pool is closed")
        language = self._languages[0] if language is None else language
        if language not in self._languages:
            raise ValueError(f"pool has no rule pack for '{language}'. Available: {', '.join(self._languages)}")

        names = tuple(names)
        step = self._chunk_size
        futures = [
            self._executor.submit(_run_job, DeclineJob(language, names[start : start + step], case, gender))
            for start in range(0, len(names), step)
        ]
        results: list[str | list[str]] = []
        try:
            for future in futures:
                results.extend(future.result())
        except BrokenProcessPool as e:
            raise RuntimeError(
                "worker processes failed to start. With the spawn start method, call this "
                "from code guarded by `if __name__ == '__main__':`.",
            ) from e
        return results

    def close(self) -> None:
        if not self._closed:
            self._executor.shutdown(wait=True)
            self._closed = True

    def __enter__(self) -> PersistentMultiprocessDecliner:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def decline_names_multiprocess(
    names: Sequence[str],
    packs: Sequence[RulePack],
    case: int | None = None,
    gender: Gender | None = None,
    *,
    config: DeclensionConfig | None = None,
    max_workers: int | None = None,
    chunk_size: int = 64,
    mp_start_method: str = "spawn",
) -> list[str | list[str]]:
    """Decline ``names`` with the first of ``packs`` in a pool that lives for this call only."""
    with PersistentMultiprocessDecliner(
        packs,
        config=config,
        max_workers=max_workers,
        chunk_size=chunk_size,
        mp_start_method=mp_start_method,
    ) as pool:
        return pool.decline_names(names, case, gender)
