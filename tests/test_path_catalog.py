# File: tests/test_path_catalog.py

from onboard.models.onboarding_path import OnboardingPath
from onboard.schemas.path import ChecklistItem
from onboard.services.path_catalog import USER_TYPES, PathCatalog


def test_seeding_is_idempotent(db):
    catalog = PathCatalog(db)

    assert catalog.seed_defaults() == 5
    assert catalog.seed_defaults() == 0
    assert len(catalog.list_all()) == 5


def test_list_all_orders_by_label(db):
    catalog = PathCatalog(db)
    catalog.seed_defaults()

    labels = [p.user_type for p in catalog.list_all()]

    assert labels == sorted(USER_TYPES)


def test_lookup_by_label_and_id(db):
    catalog = PathCatalog(db)
    catalog.seed_defaults()

    founder = catalog.find_by_label("Founder")

    assert founder.name == "Founder Onboarding"
    assert catalog.find_by_id(founder.id).user_type == "Founder"
    assert catalog.find_by_label("Astronaut") is None
    assert catalog.find_by_id("missing") is None


def test_checklist_order_is_preserved(db):
    items = [ChecklistItem(title=f"Step {i}", description=f"Do {i}") for i in range(6)]
    path = PathCatalog(db).create("Tester", "Tester Onboarding", "Test things", items)

    assert PathCatalog.parse_checklist(path) == items
    assert PathCatalog.to_read(path).checklist == items


def test_parse_checklist_degrades_to_empty():
    assert PathCatalog.parse_checklist(OnboardingPath(checklist_items="{not json")) == []
    assert PathCatalog.parse_checklist(OnboardingPath(checklist_items=None)) == []
    assert PathCatalog.parse_checklist(OnboardingPath(checklist_items='{"title": "x"}')) == []
    assert PathCatalog.parse_checklist(OnboardingPath(checklist_items='[{"title": 1}]')) == []
