import pytest

from invoice_designer.application.use_cases.templates import (
    create_template,
    delete_template,
    get_template,
    list_templates,
    render_template,
    seed_templates,
    update_template,
)
from invoice_designer.domain.errors import TemplateNotFoundError, TemplateValidationError
from invoice_designer.domain.presets import DEFAULT_SAMPLE_DATA


def test_create_uses_starter_layout_and_sample_data(db_session):
    template = create_template(db_session, name="  Quarterly  ")

    assert template.id is not None
    assert template.name == "Quarterly"
    assert [element.content for element in template.layout.elements] == ["INVOICE"]
    assert template.sample_data == DEFAULT_SAMPLE_DATA
    assert template.created_at == template.updated_at


def test_create_rejects_blank_name(db_session):
    with pytest.raises(TemplateValidationError) as exc:
        create_template(db_session, name="   ")

    assert exc.value.field == "name"


def test_update_changes_only_given_fields(db_session):
    template = create_template(db_session, name="Original", description="keep me")

    updated = update_template(db_session, template_id=template.id, name="Renamed")

    assert updated.name == "Renamed"
    assert updated.description == "keep me"
    assert updated.layout == template.layout
    assert updated.updated_at >= template.updated_at


def test_update_can_clear_description(db_session):
    template = create_template(db_session, name="Original", description="drop me")

    updated = update_template(db_session, template_id=template.id, description=None)

    assert updated.description is None


def test_update_rejects_null_sample_data(db_session):
    template = create_template(db_session, name="Original")

    with pytest.raises(TemplateValidationError) as exc:
        update_template(db_session, template_id=template.id, sample_data=None)

    assert exc.value.field == "sampleData"


def test_update_missing_template_raises_not_found(db_session):
    with pytest.raises(TemplateNotFoundError):
        update_template(db_session, template_id=999, name="Ghost")


def test_delete_is_idempotent(db_session):
    template = create_template(db_session, name="Disposable")

    delete_template(db_session, template.id)
    delete_template(db_session, template.id)

    with pytest.raises(TemplateNotFoundError):
        get_template(db_session, template.id)


def test_list_orders_by_last_update(db_session):
    first = create_template(db_session, name="First")
    second = create_template(db_session, name="Second")
    update_template(db_session, template_id=first.id, description="touched")

    assert [template.name for template in list_templates(db_session)] == ["Second", "First"]
    assert second.id != first.id


def test_seed_only_runs_on_empty_table(db_session):
    seeded = seed_templates(db_session)

    assert seeded is not None
    assert seeded.name == "Standard Invoice"
    assert seed_templates(db_session) is None
    assert len(list_templates(db_session)) == 1


def test_render_seeded_template_in_preview(db_session):
    seeded = seed_templates(db_session)

    page = render_template(db_session, seeded.id, mode="preview")

    texts = [element.text for element in page.elements if element.kind == "text"]
    assert texts == ["INVOICE", "Acme Corp", "John Doe"]
    table = page.elements[-1]
    assert table.rows[0] == ["Web Development", "10", "$50.00", "$500.00"]
    assert len(table.rows) == 3
