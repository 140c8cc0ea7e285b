"""Tests for host-side survey wiring."""

from datetime import timedelta

import pytest

from ces.config.models import CesConfig
from ces.host import SurveyHost, build_survey_scheduler, is_survey_language
from ces.scheduling.survey import SurveyScheduler
from ces.services.experiments import ConfigExperimentService
from ces.store import SKIP_SURVEY_KEY
from tests.conftest import SURVEY_URL, VERSION, FakeTelemetry


def _config(**product) -> CesConfig:
    return CesConfig(
        product={"survey_url": SURVEY_URL, "version": VERSION, **product},
        experiments={"CESSurvey": True},
    )


class TestIsSurveyLanguage:
    @pytest.mark.parametrize("language", ["en", "EN", "en-US", "en_GB"])
    def test_english(self, language):
        assert is_survey_language(language) is True

    @pytest.mark.parametrize("language", ["de", "fr-FR", "eng", ""])
    def test_other(self, language):
        assert is_survey_language(language) is False


class TestBuildSurveyScheduler:
    def test_non_english_is_gated_out(self, store):
        scheduler = build_survey_scheduler(_config(language="de"), store=store)
        assert scheduler is None
        assert store.ops == []

    def test_no_survey_url_is_gated_out(self, store):
        scheduler = build_survey_scheduler(
            CesConfig(experiments={"CESSurvey": True}), store=store
        )
        assert scheduler is None
        assert store.ops == []

    def test_builds_scheduler(self, store, presenter, opener):
        scheduler = build_survey_scheduler(
            _config(), store=store, presenter=presenter, opener=opener
        )
        assert isinstance(scheduler, SurveyScheduler)

    @pytest.mark.asyncio
    async def test_default_collaborators_use_config(
        self, store, presenter, opener, clock
    ):
        config = _config()
        config.timing.wait_time_to_show_survey = timedelta(minutes=5)
        scheduler = build_survey_scheduler(
            config, store=store, presenter=presenter, opener=opener, clock=clock
        )
        try:
            await scheduler.start()
            # Install date is created by the file telemetry service on first use
            assert scheduler.timer.delay == timedelta(minutes=5)
        finally:
            scheduler.stop()

    @pytest.mark.asyncio
    async def test_no_experiments_configured_skips(self, store, presenter, opener):
        config = CesConfig(product={"survey_url": SURVEY_URL, "version": VERSION})
        scheduler = build_survey_scheduler(
            config,
            store=store,
            presenter=presenter,
            opener=opener,
            telemetry=FakeTelemetry(),
        )

        await scheduler.start()

        assert store.get(SKIP_SURVEY_KEY) == VERSION


class TestSurveyHost:
    @pytest.mark.asyncio
    async def test_starts_and_stops_scheduler(self, store, presenter, opener, clock):
        async with SurveyHost(
            _config(),
            store=store,
            presenter=presenter,
            opener=opener,
            telemetry=FakeTelemetry(),
            experiments=ConfigExperimentService({"CESSurvey": True}),
            clock=clock,
        ) as host:
            assert host.scheduler is not None
            assert host.scheduler.timer.is_scheduled

        assert not host.scheduler.timer.is_scheduled

    @pytest.mark.asyncio
    async def test_wait_returns_when_inactive(self, store):
        async with SurveyHost(_config(language="fr"), store=store) as host:
            assert host.scheduler is None
            await host.wait(poll_interval=0.01)

    @pytest.mark.asyncio
    async def test_wait_returns_after_skip(self, store, presenter, opener):
        store.set(SKIP_SURVEY_KEY, "0.9.0")
        async with SurveyHost(
            _config(), store=store, presenter=presenter, opener=opener
        ) as host:
            await host.wait(poll_interval=0.01)
            assert store.get(SKIP_SURVEY_KEY) == "0.9.0"


class TestConfigExperimentService:
    @pytest.mark.asyncio
    async def test_known_and_unknown_treatments(self):
        service = ConfigExperimentService({"CESSurvey": True, "CESSurveyButton": "Go"})
        assert await service.get_treatment("CESSurvey") is True
        assert await service.get_treatment("CESSurveyButton") == "Go"
        assert await service.get_treatment("Other") is None
