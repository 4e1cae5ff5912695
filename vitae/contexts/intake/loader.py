"""
Profile Loader

One-shot asynchronous load of the profile, exposed as a tagged state:

    Loading  ->  Populated(profile)
             ->  LoadError(reason="no data")      source returned no row
             ->  LoadError(reason="load failed")  source raised, or row was invalid

Exactly one fetch happens per loader. Failure details are logged; the state only
carries a localized, user-facing message. Once cancelled, the loader discards any
in-flight result and never changes state again.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from vitae.contexts.intake.logger import _log_debug, _log_error, log_fetch_result, log_fetch_start
from vitae.contexts.intake.profile_data_structure import Profile
from vitae.contexts.intake.sources import ProfileSource
from vitae.utils.config import load_site_config

NO_DATA = "no data"
LOAD_FAILED = "load failed"


@dataclass(frozen=True)
class Loading:
    """Fetch not settled yet."""


@dataclass(frozen=True)
class LoadError:
    """
    Fetch settled without a profile.

    Attributes:
        reason: NO_DATA or LOAD_FAILED
        message: Localized message shown to the visitor
    """

    reason: str
    message: str


@dataclass(frozen=True)
class Populated:
    """Fetch settled with a profile."""

    profile: Profile


LoadState = Union[Loading, LoadError, Populated]
StateObserver = Callable[[LoadState], None]


class ProfileLoader:
    """
    Drives the single profile fetch for one page load.

    Example:
        loader = ProfileLoader(YAMLProfileSource(Path("profile.yaml")))
        state = asyncio.run(loader.load())
        if isinstance(state, Populated):
            print(state.profile.full_name)
    """

    def __init__(self, source: ProfileSource, messages: Optional[Dict[str, str]] = None):
        """
        Args:
            source: Profile source to query
            messages: User-facing messages keyed by "no_data" and "load_failed"
                      (defaults to the site config messages)
        """
        self.source = source
        self.messages = messages if messages is not None else load_site_config()["messages"]

        self._state: LoadState = Loading()
        self._observers: List[StateObserver] = []
        self._started = False
        self._cancelled = False
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """
        Register a callback invoked synchronously on every state transition.

        Returns:
            Function that removes the observer
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _transition(self, new_state: LoadState) -> None:
        if self._cancelled:
            _log_debug(f"Loader cancelled, discarding {type(new_state).__name__} state")
            return
        self._state = new_state
        for observer in list(self._observers):
            observer(new_state)

    async def load(self) -> LoadState:
        """
        Fetch the profile once and settle the state.

        Returns:
            The state reached (Loading if the loader was cancelled mid-fetch)

        Raises:
            RuntimeError: If called more than once
            asyncio.CancelledError: If the running task is cancelled
        """
        if self._started:
            raise RuntimeError("Profile was already requested by this loader")
        self._started = True

        log_fetch_start(self.source.describe())
        start_time = time.time()

        try:
            record = await self.source.fetch_newest()
            profile = Profile.from_record(record) if record is not None else None
        except asyncio.CancelledError:
            self._cancelled = True
            _log_debug("Profile fetch cancelled")
            raise
        except Exception as e:
            _log_error(f"Error loading profile: {type(e).__name__}: {e}")
            self._transition(LoadError(reason=LOAD_FAILED, message=self.messages["load_failed"]))
        else:
            if profile is None:
                self._transition(LoadError(reason=NO_DATA, message=self.messages["no_data"]))
            else:
                self._transition(Populated(profile=profile))

        if not self._cancelled:
            log_fetch_result(self._state, time.time() - start_time)
        return self._state

    def start(self) -> asyncio.Task:
        """Schedule load() on the running event loop and keep the task for cancel()."""
        self._task = asyncio.ensure_future(self.load())
        return self._task

    def cancel(self) -> None:
        """Stop reacting to the fetch; an in-flight result is discarded."""
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
