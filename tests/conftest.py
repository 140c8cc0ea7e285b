"""Shared test fixtures and fakes."""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime

import pytest

from ces.config.models import SurveyTimingConfig
from ces.config.paths import ENV_VAR, get_ces_home
from ces.dates import format_http_date
from ces.scheduling.survey import SurveyScheduler, create_survey_scheduler
from ces.services.protocols import ProductInfo, PromptChoice, Severity, TelemetryInfo
from ces.store.storage import MemoryStore

NOW = datetime(2026, 10, 16, 12, 0, 0, tzinfo=UTC)
SURVEY_URL = "https://example.com/survey"
VERSION = "1.2.3"

# =============================================================================
# Fakes
# =============================================================================


class RecordingStore(MemoryStore):
    """MemoryStore that records every get/set."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.ops: list[tuple] = []

    def get(self, key: str, default: str = "") -> str:
        self.ops.append(("get", key))
        return super().get(key, default)

    def set(self, key: str, value: str) -> None:
        self.ops.append(("set", key, value))
        super().set(key, value)

    @property
    def writes(self) -> list[tuple]:
        return [op for op in self.ops if op[0] == "set"]


class FakeExperiments:
    def __init__(self, treatments: dict[str, bool | str] | None = None) -> None:
        self.treatments = dict(treatments or {})
        self.calls: list[str] = []

    async def get_treatment(self, name: str) -> bool | str | None:
        self.calls.append(name)
        return self.treatments.get(name)


class FakeTelemetry:
    def __init__(
        self, first_session_date: str | None = None, machine_id: str = "machine-1"
    ) -> None:
        self.first_session_date = (
            format_http_date(NOW) if first_session_date is None else first_session_date
        )
        self.machine_id = machine_id
        self.events: list[tuple[str, dict[str, str]]] = []
        self.info_calls = 0

    async def public_log(self, event_name: str, payload: dict[str, str]) -> None:
        self.events.append((event_name, payload))

    async def get_telemetry_info(self) -> TelemetryInfo:
        self.info_calls += 1
        return TelemetryInfo(
            first_session_date=self.first_session_date,
            machine_id=self.machine_id,
        )


class FakePresenter:
    """Records prompts; optionally runs the choice at ``pick``."""

    def __init__(self, pick: int | None = None) -> None:
        self.pick = pick
        self.prompts: list[tuple[Severity, str, list[PromptChoice], bool]] = []

    async def prompt(
        self,
        severity: Severity,
        message: str,
        choices: list[PromptChoice],
        *,
        sticky: bool = False,
    ) -> None:
        self.prompts.append((severity, message, choices, sticky))
        if self.pick is not None:
            await choices[self.pick].run()


class FakeOpener:
    def __init__(self) -> None:
        self.opened: list[str] = []

    async def open(self, uri: str) -> bool:
        self.opened.append(uri)
        return True


class Clock:
    """Settable clock."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def ces_home(monkeypatch, tmp_path):
    """Isolate CES_HOME per test."""
    home = tmp_path / "ces-home"
    monkeypatch.setenv(ENV_VAR, str(home))
    for env_var in ("CES_SURVEY_URL", "CES_PRODUCT_VERSION", "CES_LANGUAGE"):
        monkeypatch.delenv(env_var, raising=False)
    get_ces_home.cache_clear()
    yield home
    get_ces_home.cache_clear()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def experiments() -> FakeExperiments:
    return FakeExperiments({"CESSurvey": True})


@pytest.fixture
def telemetry() -> FakeTelemetry:
    return FakeTelemetry()


@pytest.fixture
def presenter() -> FakePresenter:
    return FakePresenter()


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def make_scheduler(
    store, experiments, telemetry, presenter, opener, clock
) -> Iterator[Callable[..., SurveyScheduler | None]]:
    """Factory for schedulers wired to the fakes; stops them on teardown."""
    created: list[SurveyScheduler] = []

    def factory(**overrides) -> SurveyScheduler | None:
        kwargs = {
            "store": store,
            "presenter": presenter,
            "telemetry": telemetry,
            "opener": opener,
            "product": ProductInfo(survey_url=SURVEY_URL, version=VERSION),
            "experiments": experiments,
            "timing": SurveyTimingConfig(),
            "clock": clock,
            "platform": "linux",
        }
        kwargs.update(overrides)
        scheduler = create_survey_scheduler(**kwargs)
        if scheduler is not None:
            created.append(scheduler)
        return scheduler

    yield factory

    for scheduler in created:
        scheduler.stop()
