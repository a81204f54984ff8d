import pytest

from app.core.errors import ConflictError, InvalidTransition, NotFound, ValidationError
from app.domain.enums import JobStatus
from app.models import JobListing
from app.services.intake import IntakeService
from app.services.listings import ListingService


@pytest.fixture
def listings(gateway, lifecycle):
    return ListingService(gateway, lifecycle)


def test_create_defaults(listings):
    listing = listings.create(
        {"title": "Welder", "description": {"en": "MIG and TIG"}, "department": "Fabrication"}
    )
    assert listing.status == "DRAFT"
    assert listing.location == "Workshop"
    assert listing.job_type == "FULL_TIME"


def test_published_only_lists_published(listings, make_listing):
    open_ = make_listing(status=JobStatus.PUBLISHED)
    make_listing(status=JobStatus.DRAFT)
    make_listing(status=JobStatus.ARCHIVED)

    assert [job.id for job in listings.published()] == [open_.id]
    assert len(listings.all()) == 3


def test_get_published_hides_drafts(listings, make_listing):
    draft = make_listing(status=JobStatus.DRAFT)
    with pytest.raises(NotFound):
        listings.get_published(draft.id)
    assert listings.get(draft.id).id == draft.id


def test_update_content_and_status(listings, make_listing):
    listing = make_listing(status=JobStatus.DRAFT, salary_range="30-40k")
    updated = listings.update(
        listing.id,
        {"department": "Machining", "status": "PUBLISHED", "salaryRange": None, "location": None},
    )
    assert updated.department == "Machining"
    assert updated.status == "PUBLISHED"
    assert updated.salary_range is None
    assert updated.location == "Workshop"


def test_invalid_status_change_leaves_content_untouched(listings, make_listing):
    listing = make_listing(status=JobStatus.DRAFT)
    with pytest.raises(InvalidTransition):
        listings.update(listing.id, {"department": "Paint", "status": "ARCHIVED"})
    assert listings.get(listing.id).department == "Production"


def test_update_rejects_bad_payload(listings, make_listing):
    with pytest.raises(ValidationError):
        listings.update(make_listing().id, {"jobType": "SEASONAL"})


def test_delete_without_applications(listings, gateway, make_listing):
    listing = make_listing(status=JobStatus.DRAFT)
    listings.delete(listing.id)
    assert gateway.find_by_id(JobListing, listing.id) is None


def test_delete_with_applications_is_refused(listings, gateway, make_listing, application_payload):
    listing = make_listing()
    IntakeService(gateway).submit_application(application_payload(listing.id))

    with pytest.raises(ConflictError) as exc:
        listings.delete(listing.id)
    assert exc.value.status_code == 409
    assert gateway.find_by_id(JobListing, listing.id) is not None


def test_edit_form_resending_current_status_saves_content(listings, make_listing):
    listing = make_listing(status=JobStatus.PUBLISHED)
    updated = listings.update(
        listing.id,
        {"department": "Paint", "title": {"en": "Spray Painter"}, "status": "PUBLISHED"},
    )
    assert updated.status == "PUBLISHED"
    assert updated.department == "Paint"
    assert updated.title == {"en": "Spray Painter"}


def test_content_and_status_are_one_write(listings, gateway, make_listing, monkeypatch):
    listing = make_listing(status=JobStatus.DRAFT)

    # a concurrent publish lands between our read and our write
    real_update_where = gateway.update_where

    def racing_update_where(model, entity_id, expected, fields):
        real_update_where(model, entity_id, {}, {"status": JobStatus.PUBLISHED})
        return real_update_where(model, entity_id, expected, fields)

    monkeypatch.setattr(gateway, "update_where", racing_update_where)

    with pytest.raises(ConflictError):
        listings.update(listing.id, {"department": "Paint", "status": "PUBLISHED"})

    stored = gateway.require(JobListing, listing.id)
    assert stored.department == "Production"
    assert stored.status == "PUBLISHED"
