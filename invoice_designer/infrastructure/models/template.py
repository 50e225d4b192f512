"""SQLAlchemy model for invoice templates."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from invoice_designer.infrastructure.database import Base
from invoice_designer.utils import now_in_app_timezone

_template_json_type = JSONB().with_variant(JSON(), "sqlite").with_variant(JSON(), "mysql")


class TemplateModel(Base):
    """Database representation of an invoice template."""

    __tablename__ = "template"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    layout = Column(_template_json_type, nullable=False)
    sample_data = Column(_template_json_type, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
        index=True,
    )


__all__ = ["TemplateModel"]
