"""Tests for the editor session save boundary."""

import pytest

from invoice_designer.application.editor_session import EditorSession, parse_sample_data
from invoice_designer.application.rendering import ElementRenderer
from invoice_designer.application.use_cases.templates import create_template, get_template
from invoice_designer.domain.errors import InvalidSampleDataError, TemplateNotFoundError


@pytest.fixture()
def renderer() -> ElementRenderer:
    return ElementRenderer(
        qr_service_url="https://qr.test/?data=",
        placeholder_image_url="https://placeholder.test/image",
        signature_placeholder_url="https://placeholder.test/signature",
    )


@pytest.fixture()
def template(db_session):
    return create_template(db_session, name="Editor Test")


def test_parse_sample_data_reports_malformed_json():
    with pytest.raises(InvalidSampleDataError) as exc:
        parse_sample_data('{"items": [}')

    assert str(exc.value) == "Please fix the sample data JSON before saving."
    assert exc.value.title == "Invalid JSON"


def test_open_missing_template_raises(db_session):
    with pytest.raises(TemplateNotFoundError):
        EditorSession.open(db_session, 404)


def test_save_persists_layout_and_sample_data(db_session, template, renderer):
    editor = EditorSession.open(db_session, template.id, renderer=renderer)
    table = editor.add_element("table")
    editor.name = "Renamed"
    editor.sample_data_text = '{"items": [{"description": "X", "price": 10}]}'

    saved = editor.save(db_session)

    assert saved.name == "Renamed"
    assert saved.sample_data == {"items": [{"description": "X", "price": 10}]}
    stored = get_template(db_session, template.id)
    assert [element.id for element in stored.layout.elements][-1] == table.id
    assert stored.layout.elements[-1].table_config.data_source == "items"


def test_save_with_malformed_json_does_not_touch_storage(db_session, template, renderer):
    editor = EditorSession.open(db_session, template.id, renderer=renderer)
    editor.name = "Should not persist"
    editor.add_element("box")
    editor.sample_data_text = "{not json"

    with pytest.raises(InvalidSampleDataError):
        editor.save(db_session)

    stored = get_template(db_session, template.id)
    assert stored.name == "Editor Test"
    assert len(stored.layout.elements) == len(template.layout.elements)
    assert stored.updated_at == template.updated_at


def test_render_switches_between_edit_and_preview(db_session, template, renderer):
    editor = EditorSession.open(db_session, template.id, renderer=renderer)
    element = editor.add_element("text")
    editor.layout.update_element(element.id, content="Client: {{client.name}}")

    assert editor.render().elements[-1].text == "Client: {{client.name}}"

    editor.preview_mode = True
    assert editor.render().mode == "preview"
    assert editor.render().elements[-1].text == "Client: Acme Corp"


def test_render_with_malformed_sample_data_previews_against_empty_data(db_session, template, renderer):
    editor = EditorSession.open(db_session, template.id, renderer=renderer)
    element = editor.add_element("text")
    editor.layout.update_element(element.id, content="{{invoiceNumber}}")
    editor.preview_mode = True
    editor.sample_data_text = "{broken"

    assert editor.render().elements[-1].text == "{{invoiceNumber}}"


def test_reset_sample_data_restores_stored_value(db_session, template, renderer):
    editor = EditorSession.open(db_session, template.id, renderer=renderer)
    original = editor.sample_data_text
    editor.sample_data_text = "{}"

    editor.reset_sample_data()

    assert editor.sample_data_text == original
    assert parse_sample_data(original) == template.sample_data


def test_selection_follows_added_and_deleted_elements(db_session, template, renderer):
    editor = EditorSession.open(db_session, template.id, renderer=renderer)

    element = editor.add_element("badge")
    assert editor.selected_element is element

    editor.delete_element(element.id)
    assert editor.selected_element is None
    assert editor.layout.get(element.id) is None
