"""Sample persons used to seed empty stores."""

from .base import PersonRecord

SAMPLE_PERSONS: tuple[PersonRecord, ...] = (
    PersonRecord(
        id="3d594650-3436-11e9-bc57-8b80ba54c431",
        name="Midu",
        phone="034-1234567",
        street="Calle Frontend",
        city="Barcelona",
    ),
    PersonRecord(
        id="3d599470-3436-11e9-bc57-8b80ba54c431",
        name="Youseff",
        phone="044-123456",
        street="Avenida Fullstack",
        city="Mataro",
    ),
    PersonRecord(
        id="3d599471-3436-11e9-bc57-8b80ba54c431",
        name="Itzi",
        street="Pasaje Testing",
        city="Ibiza",
    ),
)
