"""Static design data: text block presets, starter layouts and seed content."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any

from .entities import TemplateElement, TemplateLayout


@dataclass(frozen=True)
class TextPreset:
    """A pre-styled text block offered by the editor palette."""

    id: str
    name: str
    description: str
    element: dict[str, Any]

    def build_element(self, element_id: str, *, x: int | float = 50, y: int | float = 50) -> TemplateElement:
        payload = deepcopy(self.element)
        payload.update({"id": element_id, "x": x, "y": y})
        return TemplateElement.from_dict(payload)


def _text(width: int, height: int, content: str, style: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {"type": "text", "width": width, "height": height, "content": content, "style": style, **extra}


TEXT_PRESETS: tuple[TextPreset, ...] = (
    TextPreset(
        "address-block",
        "Address Block",
        "Multi-line address with proper spacing",
        _text(
            250,
            80,
            "Company Name\n123 Street Address\nCity, State ZIP\nCountry",
            {"fontSize": 12, "lineHeight": 1.5, "color": "#333333"},
        ),
    ),
    TextPreset(
        "supplier-name",
        "Supplier Name",
        "Large bold supplier/company name",
        _text(300, 50, "Supplier Name", {"fontSize": 24, "fontWeight": "bold", "color": "#1a1a1a"}),
    ),
    TextPreset(
        "client-name",
        "Client Name",
        "Client or customer name heading",
        _text(250, 40, "Client Name", {"fontSize": 18, "fontWeight": "600", "color": "#2c3e50"}),
    ),
    TextPreset(
        "invoice-title",
        "Invoice Title",
        "Large prominent invoice header",
        _text(
            200,
            50,
            "INVOICE",
            {
                "fontSize": 32,
                "fontWeight": "bold",
                "color": "#2563eb",
                "textTransform": "uppercase",
                "letterSpacing": 2,
            },
        ),
    ),
    TextPreset(
        "invoice-number",
        "Invoice Number",
        "Invoice number with label",
        _text(200, 30, "Invoice #: {{invoiceNumber}}", {"fontSize": 14, "fontWeight": "500", "color": "#4b5563"}),
    ),
    TextPreset(
        "date-label",
        "Date Field",
        "Date with label",
        _text(200, 25, "Date: {{date}}", {"fontSize": 12, "color": "#6b7280"}),
    ),
    TextPreset(
        "section-heading",
        "Section Heading",
        "Bold section heading with underline",
        _text(
            200,
            30,
            "Section Heading",
            {
                "fontSize": 16,
                "fontWeight": "bold",
                "color": "#1f2937",
                "borderBottom": "2px solid #d1d5db",
                "paddingBottom": 5,
            },
        ),
    ),
    TextPreset(
        "total-amount",
        "Total Amount",
        "Large total amount display",
        _text(200, 40, "$0.00", {"fontSize": 24, "fontWeight": "bold", "color": "#059669", "textAlign": "right"}),
    ),
    TextPreset(
        "label-value",
        "Label & Value",
        "Label with value (e.g., Status: Paid)",
        _text(200, 25, "Label: Value", {"fontSize": 13, "color": "#374151"}),
    ),
    TextPreset(
        "footer-text",
        "Footer Text",
        "Small footer or disclaimer text",
        _text(
            400,
            40,
            "Thank you for your business",
            {"fontSize": 11, "color": "#9ca3af", "textAlign": "center", "fontStyle": "italic"},
        ),
    ),
    TextPreset(
        "contact-info",
        "Contact Info",
        "Contact details block",
        _text(
            250,
            60,
            "Email: contact@company.com\nPhone: +1 234 567 8900\nWebsite: www.company.com",
            {"fontSize": 11, "color": "#6b7280", "lineHeight": 1.6},
        ),
    ),
    TextPreset(
        "marine-vessel",
        "Vessel Name",
        "Ship or vessel name (marine themed)",
        _text(
            300,
            45,
            "M/V Ocean Voyager",
            {"fontSize": 20, "fontWeight": "600", "color": "#0369a1", "fontFamily": "serif"},
        ),
    ),
    TextPreset(
        "marine-port",
        "Port Information",
        "Port of call details",
        _text(
            250,
            50,
            "Port: Miami, FL\nDeparture: {{departureDate}}",
            {"fontSize": 13, "color": "#475569", "lineHeight": 1.5},
        ),
    ),
    TextPreset(
        "cabin-number",
        "Cabin Number",
        "Cabin or suite number",
        _text(200, 35, "Cabin: A-101", {"fontSize": 15, "fontWeight": "600", "color": "#0c4a6e"}),
    ),
)

_PRESETS_BY_ID = {preset.id: preset for preset in TEXT_PRESETS}


def get_text_preset(preset_id: str) -> TextPreset | None:
    return _PRESETS_BY_ID.get(preset_id)


DEFAULT_LAYOUT: dict[str, Any] = {
    "pageSize": "A4",
    "orientation": "portrait",
    "elements": [
        {
            "id": "title",
            "type": "text",
            "x": 40,
            "y": 40,
            "width": 300,
            "height": 50,
            "content": "INVOICE",
            "style": {"fontSize": 32, "fontWeight": "bold", "color": "#1a1a1a"},
        }
    ],
}

DEFAULT_SAMPLE_DATA: dict[str, Any] = {
    "invoiceNumber": "INV-001",
    "date": "2024-05-20",
    "client": {"name": "Acme Corp", "address": "123 Business Rd, Tech City"},
    "items": [
        {"description": "Web Development", "quantity": 1, "price": 1500},
        {"description": "Hosting (Yearly)", "quantity": 1, "price": 200},
    ],
    "total": 1700,
}


def default_layout() -> TemplateLayout:
    """Return a fresh copy of the single-title starter layout."""

    return TemplateLayout.from_dict(deepcopy(DEFAULT_LAYOUT))


def default_sample_data() -> dict[str, Any]:
    return deepcopy(DEFAULT_SAMPLE_DATA)


SEED_TEMPLATE: dict[str, Any] = {
    "name": "Standard Invoice",
    "description": "A clean, standard invoice layout.",
    "sample_data": {
        "invoiceNumber": "INV-2023-001",
        "date": "2023-10-25",
        "provider": {
            "name": "Acme Corp",
            "address": "123 Business Rd, Tech City",
            "email": "contact@acme.com",
        },
        "client": {"name": "John Doe", "address": "456 Customer Ln, Buyer Town"},
        "items": [
            {"description": "Web Development", "quantity": 10, "price": 50, "total": 500},
            {"description": "Hosting Setup", "quantity": 1, "price": 100, "total": 100},
            {"description": "Domain Registration", "quantity": 1, "price": 15, "total": 15},
        ],
        "subtotal": 615,
        "tax": 61.5,
        "total": 676.5,
    },
    "layout": {
        "pageSize": "A4",
        "orientation": "portrait",
        "elements": [
            {
                "id": "el_1",
                "type": "text",
                "x": 20,
                "y": 20,
                "width": 200,
                "height": 40,
                "content": "INVOICE",
                "style": {"fontSize": 24, "fontWeight": "bold"},
            },
            {
                "id": "el_2",
                "type": "text",
                "x": 20,
                "y": 70,
                "width": 200,
                "height": 60,
                "binding": "provider.name",
                "style": {"fontSize": 14},
            },
            {
                "id": "el_3",
                "type": "text",
                "x": 350,
                "y": 70,
                "width": 200,
                "height": 60,
                "binding": "client.name",
                "style": {"fontSize": 14, "textAlign": "right"},
            },
            {
                "id": "el_table",
                "type": "table",
                "x": 20,
                "y": 150,
                "width": 550,
                "height": 300,
                "tableConfig": {
                    "dataSource": "items",
                    "columns": [
                        {"header": "Description", "binding": "description", "width": "50%"},
                        {"header": "Qty", "binding": "quantity", "width": "15%"},
                        {"header": "Price", "binding": "price", "width": "15%", "format": "currency"},
                        {"header": "Total", "binding": "total", "width": "20%", "format": "currency"},
                    ],
                },
            },
        ],
    },
}


__all__ = [
    "DEFAULT_LAYOUT",
    "DEFAULT_SAMPLE_DATA",
    "SEED_TEMPLATE",
    "TEXT_PRESETS",
    "TextPreset",
    "default_layout",
    "default_sample_data",
    "get_text_preset",
]
