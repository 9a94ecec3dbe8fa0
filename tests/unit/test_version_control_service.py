"""Unit tests for the VersionControlService."""

import pytest

from sanctuary_cms.application.interfaces import NullContentObserver
from sanctuary_cms.application.services import VersionControlService
from sanctuary_cms.domain.entities import (
    Category,
    ChangeType,
    ContentType,
    EducationalResource,
    FAQ,
    WorkflowState,
)
from sanctuary_cms.domain.exceptions import EntityNotFoundError
from sanctuary_cms.infrastructure.repositories import (
    InMemoryContentRepository,
    InMemoryVersionRepository,
)

VISITING = Category(id="visiting", name="Visiting")


class RecordingObserver(NullContentObserver):
    def __init__(self):
        self.versions = []

    def version_recorded(self, content_type, content_id, version_number, changes_summary) -> None:
        self.versions.append((content_type, content_id, version_number, changes_summary))


@pytest.fixture
def faq_repository() -> InMemoryContentRepository[FAQ]:
    return InMemoryContentRepository([
        FAQ(id="q1", question="Old Q?", answer="A.", category=VISITING, priority=5),
    ])


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def service(faq_repository, observer) -> VersionControlService:
    return VersionControlService(
        {
            ContentType.FAQ: faq_repository,
            ContentType.RESOURCE: InMemoryContentRepository(),
        },
        InMemoryVersionRepository(),
        observer=observer,
    )


async def _rename(repository, new_question: str) -> None:
    def mutate(faq: FAQ) -> None:
        faq.question = new_question
    await repository.modify("q1", mutate)


@pytest.mark.asyncio
async def test_first_version_is_initial(service, observer):
    version = await service.create_version(ContentType.FAQ, "q1", "Sarah")

    assert version.version_number == 1
    assert version.changes_summary == "Initial version"
    assert version.snapshot["question"] == "Old Q?"
    assert "views" not in version.snapshot
    assert version.title == "Old Q?"
    assert observer.versions == [(ContentType.FAQ, "q1", 1, "Initial version")]


@pytest.mark.asyncio
async def test_next_version_summarizes_changes(service, faq_repository):
    await service.create_version(ContentType.FAQ, "q1", "Sarah")
    await _rename(faq_repository, "New Q?")

    version = await service.create_version(ContentType.FAQ, "q1", "Mike", changelog="Reword")

    assert version.version_number == 2
    assert version.changes_summary == "1 change (1 major)"
    assert version.changelog == "Reword"


@pytest.mark.asyncio
async def test_snapshot_is_isolated_from_later_edits(service, faq_repository):
    version = await service.create_version(ContentType.FAQ, "q1", "Sarah")
    await _rename(faq_repository, "New Q?")
    assert version.snapshot["question"] == "Old Q?"


@pytest.mark.asyncio
async def test_list_versions_newest_first(service, faq_repository):
    await service.create_version(ContentType.FAQ, "q1", "Sarah")
    await _rename(faq_repository, "New Q?")
    await service.create_version(ContentType.FAQ, "q1", "Sarah")

    versions = await service.list_versions(ContentType.FAQ, "q1")
    assert [v.version_number for v in versions] == [2, 1]
    assert await service.list_versions(ContentType.RESOURCE, "q1") == []


@pytest.mark.asyncio
async def test_compare_versions(service, faq_repository):
    v1 = await service.create_version(ContentType.FAQ, "q1", "Sarah")
    await _rename(faq_repository, "New Q?")
    v2 = await service.create_version(ContentType.FAQ, "q1", "Sarah")

    comparison = await service.compare_versions(ContentType.FAQ, "q1", v1.id, v2.id)

    assert (comparison.from_version, comparison.to_version) == (1, 2)
    assert [(c.field, c.change_type) for c in comparison.changes] == [
        ("question", ChangeType.MODIFIED),
    ]
    assert comparison.summary.major_changes == 1


@pytest.mark.asyncio
async def test_rollback_restores_fields_and_records_new_version(service, faq_repository):
    v1 = await service.create_version(
        ContentType.FAQ, "q1", "Sarah", workflow_state=WorkflowState.PUBLISHED
    )
    await _rename(faq_repository, "New Q?")
    await service.create_version(ContentType.FAQ, "q1", "Sarah")

    restored = await service.rollback(ContentType.FAQ, "q1", v1.id, "Mike")

    assert restored.version_number == 3
    assert restored.changelog == "Rollback to v1"
    assert restored.workflow_state == WorkflowState.PUBLISHED
    assert restored.snapshot["question"] == "Old Q?"
    assert (await faq_repository.get_by_id("q1")).question == "Old Q?"


@pytest.mark.asyncio
async def test_unknown_record_or_version_raises(service):
    with pytest.raises(EntityNotFoundError):
        await service.create_version(ContentType.FAQ, "missing", "Sarah")
    with pytest.raises(EntityNotFoundError):
        await service.get_version(ContentType.FAQ, "q1", "no-such-version")


@pytest.mark.asyncio
async def test_version_of_other_record_is_not_found(service):
    version = await service.create_version(ContentType.FAQ, "q1", "Sarah")
    with pytest.raises(EntityNotFoundError):
        await service.get_version(ContentType.FAQ, "other", version.id)


def test_track_changes_on_adhoc_snapshots(service):
    comparison = service.track_changes(
        ContentType.RESOURCE,
        {"title": "Guide", "type": "pdf"},
        {"title": "Guide", "type": "video", "url": "https://example.org"},
    )
    assert [(c.field, c.change_type) for c in comparison.changes] == [
        ("type", ChangeType.MODIFIED),
        ("url", ChangeType.ADDED),
    ]
    assert comparison.summary.total == 2


def test_track_changes_without_previous(faq_repository):
    strict = VersionControlService({ContentType.FAQ: faq_repository}, InMemoryVersionRepository())
    lenient = VersionControlService(
        {ContentType.FAQ: faq_repository},
        InMemoryVersionRepository(),
        treat_missing_previous_as_all_added=True,
    )
    current = {"question": "Q?", "answer": "A."}

    assert strict.track_changes(ContentType.FAQ, None, current).changes == []
    added = lenient.track_changes(ContentType.FAQ, None, current)
    assert [c.field for c in added.changes] == ["question", "answer"]
    assert added.summary.added == 2


def test_resource_snapshot_uses_resource_schema():
    from sanctuary_cms.application.services.version_control_service import take_snapshot
    from sanctuary_cms.domain.field_config import RESOURCE_FIELD_SCHEMA

    resource = EducationalResource(
        id="r1", title="Guide", description="D.", category=VISITING,
        target_audience=["educators"], downloads=99,
    )
    snapshot = take_snapshot(resource, RESOURCE_FIELD_SCHEMA)
    assert list(snapshot) == list(RESOURCE_FIELD_SCHEMA)
    assert snapshot["target_audience"] == ["educators"]
    assert snapshot["target_audience"] is not resource.target_audience
