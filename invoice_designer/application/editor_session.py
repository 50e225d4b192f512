"""In-memory editing state for one template.

The editor keeps the sample data as the raw text the user is typing. It is
only parsed when previewing or saving; a save with malformed JSON is refused
before anything reaches the repository.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy.orm import Session

from invoice_designer.application.layout_store import LayoutStore
from invoice_designer.application.rendering import ElementRenderer, RenderedPage
from invoice_designer.application.use_cases.templates import get_template, update_template
from invoice_designer.domain.entities import Template, TemplateElement
from invoice_designer.domain.errors import InvalidSampleDataError

logger = logging.getLogger(__name__)


def format_sample_data(sample_data: Any) -> str:
    return json.dumps(sample_data, indent=2, ensure_ascii=False)


def parse_sample_data(text: str) -> Any:
    """Parse the editor's sample data text, raising ``InvalidSampleDataError``."""

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidSampleDataError(str(exc)) from exc


class EditorSession:
    """Explicit editor state: name, layout, sample data text, mode and selection."""

    def __init__(
        self,
        template: Template,
        *,
        renderer: ElementRenderer | None = None,
    ) -> None:
        if template.id is None:
            raise ValueError("Only persisted templates can be edited")
        self.template_id: int = template.id
        self.name = template.name
        self.layout = LayoutStore(template.layout)
        self.sample_data_text = format_sample_data(template.sample_data)
        self.preview_mode = False
        self.selected_element_id: str | None = None
        self._stored_sample_data = template.sample_data
        self._renderer = renderer or ElementRenderer.from_settings()

    @classmethod
    def open(cls, session: Session, template_id: int, **kwargs: Any) -> "EditorSession":
        return cls(get_template(session, template_id), **kwargs)

    @property
    def mode(self) -> str:
        return "preview" if self.preview_mode else "edit"

    @property
    def selected_element(self) -> TemplateElement | None:
        if self.selected_element_id is None:
            return None
        return self.layout.get(self.selected_element_id)

    def select(self, element_id: str | None) -> None:
        self.selected_element_id = element_id

    def add_element(self, element_type: str) -> TemplateElement:
        element = self.layout.add_element(element_type)
        self.selected_element_id = element.id
        return element

    def add_preset(self, preset_id: str) -> TemplateElement:
        element = self.layout.add_preset(preset_id)
        self.selected_element_id = element.id
        return element

    def delete_element(self, element_id: str) -> None:
        self.layout.remove_element(element_id)
        self.selected_element_id = None

    def reset_sample_data(self) -> None:
        self.sample_data_text = format_sample_data(self._stored_sample_data)

    def render(self) -> RenderedPage:
        """Render the current state; unparseable sample data previews as ``{}``."""

        try:
            sample_data = parse_sample_data(self.sample_data_text or "{}")
        except InvalidSampleDataError:
            sample_data = {}
        return self._renderer.render_layout(self.layout.to_layout(), self.mode, sample_data)

    def save(self, session: Session) -> Template:
        """Persist name, layout and sample data wholesale.

        Raises:
            InvalidSampleDataError: If the sample data text is not valid JSON;
                nothing is written in that case.
        """

        sample_data = parse_sample_data(self.sample_data_text)
        saved = update_template(
            session,
            template_id=self.template_id,
            name=self.name,
            layout=self.layout.to_layout(),
            sample_data=sample_data,
        )
        self._stored_sample_data = saved.sample_data
        logger.info("Saved editor changes for template %s", saved.id)
        return saved


__all__ = ["EditorSession", "format_sample_data", "parse_sample_data"]
